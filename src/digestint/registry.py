from __future__ import annotations

import hashlib
import logging
from functools import partial
from typing import Callable, Iterator

from .checksum import Adler32, Checksum, HashlibChecksum
from .error import UnsupportedAlgorithm

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = 'Adler-32'

ChecksumFactory = Callable[[], Checksum]

_HASHLIB_ALGORITHMS = {
  'MD5': hashlib.md5,
  'SHA-1': hashlib.sha1,
  'SHA-256': hashlib.sha256,
  'SHA-384': hashlib.sha384,
  'SHA-512': hashlib.sha512,
}


def _key(name: str) -> str:
  return name.casefold()


class AlgorithmRegistry:
  """
  Resolves checksum primitives by name.

  Names are matched case-insensitively. Registering a name twice keeps the first factory,
  so concurrent or repeated registration of the same algorithm is harmless.
  """

  def __init__(self) -> None:
    self._factories: dict[str, tuple[str, ChecksumFactory]] = {}

  def register(self, name: str, factory: ChecksumFactory) -> bool:
    if not name:
      raise ValueError('algorithm name must not be empty')

    entry = (name, factory)
    added = self._factories.setdefault(_key(name), entry) is entry

    if added:
      logger.debug('registered checksum algorithm %s', name)

    return added

  def create(self, name: str) -> Checksum:
    entry = self._factories.get(_key(name))

    if entry is None:
      raise UnsupportedAlgorithm(f'Unknown checksum algorithm: {name}')

    checksum = entry[1]()

    if checksum.digest_bits <= 0:
      raise UnsupportedAlgorithm(
        f'Checksum algorithm {name} with {checksum.digest_bits} bit digest is not applicable'
      )

    return checksum

  def names(self) -> list[str]:
    return sorted(display for display, _ in self._factories.values())

  def __contains__(self, name: object) -> bool:
    return isinstance(name, str) and _key(name) in self._factories

  def __iter__(self) -> Iterator[str]:
    return iter(self.names())


_default = AlgorithmRegistry()


def ensure_registered(registry: AlgorithmRegistry | None = None) -> None:
  """Register Adler-32 unless an algorithm with that name is already present."""
  target = registry if registry is not None else _default
  target.register(DEFAULT_ALGORITHM, Adler32)


def default_registry() -> AlgorithmRegistry:
  return _default


ensure_registered()

for _name, _constructor in _HASHLIB_ALGORITHMS.items():
  _default.register(_name, partial(HashlibChecksum, _name, _constructor))
