from __future__ import annotations

import sys
from typing import Iterator

import pytest

from digestint.error import FormatError
from digestint.text import IntFormat, format_int, parse_int


def _value_id(value: int) -> str:
  # str() of the largest values exceeds the interpreter's int/str digit limit.
  if value.bit_length() <= 64:
    return hex(value)
  return f'{"-" if value < 0 else ""}{value.bit_length()}-bit'


@pytest.mark.parametrize(
  ('text', 'expected'),
  [
    ('0x2a', 42),
    ('-0x2a', -42),
    ('-42', -42),
    ('42', 42),
    ('0', 0),
    ('-0', 0),
    ('0x0', 0),
    ('0x2A', 42),
    ('0xDeadBeef', 0xDEADBEEF),
    ('0x00ff', 255),
    ('007', 7),
  ],
)
def test_parse_accepts_grammar(text: str, expected: int) -> None:
  assert parse_int(text) == expected


@pytest.mark.parametrize(
  'text',
  [
    '',
    '-',
    '0x',
    '-0x',
    '+5',
    '--5',
    ' 5',
    '5 ',
    '5\n',
    '1_000',
    '0X2a',
    '0x-2a',
    '0xg',
    '12a',
    '4.2',
    '٤٢',
    '0x１',
  ],
)
def test_parse_rejects_malformed_text(text: str) -> None:
  with pytest.raises(FormatError):
    parse_int(text)


def test_parse_rejects_non_string_input() -> None:
  with pytest.raises(TypeError):
    parse_int(42)  # type: ignore[arg-type]


def test_format_error_is_a_value_error() -> None:
  with pytest.raises(ValueError):
    parse_int('')


@pytest.mark.parametrize(
  ('value', 'mode', 'expected'),
  [
    (42, IntFormat.HEX, '0x2a'),
    (-42, IntFormat.HEX, '-0x2a'),
    (0, IntFormat.HEX, '0x0'),
    (0xABCDEF, IntFormat.HEX, '0xabcdef'),
    (42, IntFormat.DEC, '42'),
    (-42, IntFormat.DEC, '-42'),
    (0, IntFormat.DEC, '0'),
  ],
)
def test_format(value: int, mode: IntFormat, expected: str) -> None:
  assert format_int(value, mode) == expected


def test_format_defaults_to_hex_and_accepts_mode_names() -> None:
  assert format_int(255) == '0xff'
  assert format_int(255, 'dec') == '255'  # type: ignore[arg-type]


def test_large_decimal_values_are_not_limited() -> None:
  value = 10**9000 + 123456789
  text = format_int(value, IntFormat.DEC)

  assert len(text) == 9001
  assert text.endswith('000123456789')
  assert parse_int(text) == value
  assert parse_int('-' + text) == -value


def test_decimal_chunks_keep_inner_zeros() -> None:
  value = 7 * 10**4000 + 5
  text = format_int(value, IntFormat.DEC)

  assert text == '7' + '0' * 3999 + '5'
  assert parse_int(text) == value


@pytest.mark.parametrize(
  'value',
  [0, 1, -1, 15, 16, -255, 2**63, -(2**127) + 3, 3**2000, -(10**4500)],
  ids=_value_id,
)
@pytest.mark.parametrize('mode', list(IntFormat))
def test_text_round_trip(value: int, mode: IntFormat) -> None:
  assert parse_int(format_int(value, mode)) == value


def test_format_rejects_bool() -> None:
  with pytest.raises(TypeError):
    format_int(True)


@pytest.fixture
def digit_limit() -> Iterator[None]:
  if not hasattr(sys, 'set_int_max_str_digits'):
    pytest.skip('interpreter has no int/str digit limit')

  previous = sys.get_int_max_str_digits()
  sys.set_int_max_str_digits(640)
  try:
    yield
  finally:
    sys.set_int_max_str_digits(previous)


def test_decimal_conversion_follows_lowered_digit_limit(digit_limit: None) -> None:
  sevens = 7 * (10**1000 - 1) // 9

  assert parse_int('7' * 1000) == sevens
  assert format_int(sevens, IntFormat.DEC) == '7' * 1000
  assert format_int(10**1000, IntFormat.DEC) == '1' + '0' * 1000
  assert format_int(-(10**1000) - 1, IntFormat.DEC) == '-1' + '0' * 999 + '1'


def test_decimal_conversion_with_limit_disabled(digit_limit: None) -> None:
  sys.set_int_max_str_digits(0)
  value = -(3**20000)

  assert parse_int(format_int(value, IntFormat.DEC)) == value
