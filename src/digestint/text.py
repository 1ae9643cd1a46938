"""
Signed integer text in hexadecimal or decimal form.

Grammar: ``["-"] ( "0x" hexdigits+ | decdigits+ )``. A positive value never carries a sign,
the hex prefix is always a lowercase ``0x`` and hex digits may be of either case. Nothing
else is accepted: no whitespace, no ``+``, no digit grouping.

Values are arbitrary precision. Decimal conversion is done in chunks so that text longer
than the interpreter's int/str conversion limit is still handled.
"""

from __future__ import annotations

import re
import sys
from enum import Enum
from functools import lru_cache

from .error import FormatError

_HEX_DIGITS = re.compile(r'[0-9a-fA-F]+')
_DEC_DIGITS = re.compile(r'[0-9]+')


class IntFormat(str, Enum):
  """Output text format."""

  HEX = 'hex'
  DEC = 'dec'


def _dec_chunk_digits() -> int:
  """Largest decimal digit count the interpreter converts in one go; 0 means unlimited."""
  get_limit = getattr(sys, 'get_int_max_str_digits', None)
  return get_limit() if get_limit is not None else 0


@lru_cache(maxsize=8)
def _dec_chunk_base(digits: int) -> int:
  return 10**digits


def _decimal_to_int(digits: str) -> int:
  chunk_digits = _dec_chunk_digits()

  if not chunk_digits or len(digits) <= chunk_digits:
    return int(digits)

  value = 0

  for start in range(0, len(digits), chunk_digits):
    chunk = digits[start : start + chunk_digits]
    value = value * _dec_chunk_base(len(chunk)) + int(chunk)

  return value


def _int_to_decimal(magnitude: int) -> str:
  chunk_digits = _dec_chunk_digits()

  if not chunk_digits:
    return str(magnitude)

  chunk_base = _dec_chunk_base(chunk_digits)

  if magnitude < chunk_base:
    return str(magnitude)

  chunks: list[int] = []

  while magnitude:
    magnitude, low = divmod(magnitude, chunk_base)
    chunks.append(low)

  head = str(chunks.pop())
  return head + ''.join(str(chunk).zfill(chunk_digits) for chunk in reversed(chunks))


def parse_int(text: str) -> int:
  if not isinstance(text, str):
    raise TypeError(f'Cannot parse {type(text).__name__} as an integer, expected str')

  if not text:
    raise FormatError('Empty string is invalid integer value')

  negative = text.startswith('-')
  body = text[1:] if negative else text

  if not body:
    raise FormatError(f'Sign without digits is invalid integer value: {text!r}')

  if body.startswith('0x'):
    digits = body[2:]

    if not digits:
      raise FormatError(f'Empty hex string is invalid integer value: {text!r}')

    if _HEX_DIGITS.fullmatch(digits) is None:
      raise FormatError(f'Invalid hexadecimal integer value: {text!r}')

    value = int(digits, 16)
  else:
    if _DEC_DIGITS.fullmatch(body) is None:
      raise FormatError(f'Invalid decimal integer value: {text!r}')

    value = _decimal_to_int(body)

  return -value if negative else value


def format_int(value: int, mode: IntFormat = IntFormat.HEX) -> str:
  if isinstance(value, bool) or not isinstance(value, int):
    raise TypeError(f'Cannot format {type(value).__name__} as an integer')

  sign = '-' if value < 0 else ''
  magnitude = abs(value)

  if IntFormat(mode) is IntFormat.HEX:
    return f'{sign}0x{magnitude:x}'

  return sign + _int_to_decimal(magnitude)
