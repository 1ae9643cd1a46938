from __future__ import annotations

import pytest

from digestint.checksum import Adler32
from digestint.error import UnsupportedAlgorithm
from digestint.registry import (
  DEFAULT_ALGORITHM,
  AlgorithmRegistry,
  default_registry,
  ensure_registered,
)


class _EmptyDigest:
  name = 'Empty'
  digest_bits = 0

  def reset(self) -> None:
    pass

  def update(self, data: bytes) -> None:
    pass

  def digest(self) -> bytes:
    return b''


def test_default_registry_provides_adler32_and_hashlib_algorithms() -> None:
  registry = default_registry()

  assert DEFAULT_ALGORITHM == 'Adler-32'
  assert isinstance(registry.create('Adler-32'), Adler32)
  assert registry.create('SHA-256').digest_bits == 256
  assert registry.create('MD5').digest_bits == 128
  assert registry.names() == ['Adler-32', 'MD5', 'SHA-1', 'SHA-256', 'SHA-384', 'SHA-512']


def test_lookup_is_case_insensitive() -> None:
  registry = default_registry()

  assert 'adler-32' in registry
  assert isinstance(registry.create('ADLER-32'), Adler32)


def test_create_returns_independent_instances() -> None:
  registry = default_registry()

  first = registry.create('Adler-32')
  second = registry.create('Adler-32')
  first.update(b'data')

  assert first is not second
  assert second.digest() == b'\x01\x00\x00\x00'


def test_unknown_algorithm_raises() -> None:
  with pytest.raises(UnsupportedAlgorithm, match='Unknown checksum algorithm'):
    default_registry().create('CRC-0')


def test_zero_size_digest_is_rejected() -> None:
  registry = AlgorithmRegistry()
  registry.register('Empty', _EmptyDigest)

  with pytest.raises(UnsupportedAlgorithm, match='not applicable'):
    registry.create('Empty')


def test_duplicate_registration_is_a_no_op() -> None:
  registry = AlgorithmRegistry()

  assert registry.register('Adler-32', Adler32) is True
  assert registry.register('adler-32', _EmptyDigest) is False
  assert isinstance(registry.create('Adler-32'), Adler32)
  assert registry.names() == ['Adler-32']


def test_ensure_registered_is_idempotent() -> None:
  registry = AlgorithmRegistry()

  ensure_registered(registry)
  ensure_registered(registry)
  ensure_registered()

  assert list(registry) == ['Adler-32']
  assert 'Adler-32' in default_registry()


def test_empty_name_is_rejected() -> None:
  with pytest.raises(ValueError):
    AlgorithmRegistry().register('', Adler32)


def test_contains_ignores_non_strings() -> None:
  assert 42 not in default_registry()
