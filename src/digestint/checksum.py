import hashlib
import zlib
from typing import Callable, Protocol


class Checksum(Protocol):
  """
  Stateful checksum accumulator.

  ``update`` may be called any number of times and is equivalent to a single call over
  the concatenated input. ``digest`` does not consume the state, so calling it twice
  without an intervening ``update`` returns the same bytes.
  """

  name: str
  digest_bits: int

  def reset(self) -> None: ...

  def update(self, data: bytes) -> None: ...

  def digest(self) -> bytes: ...


class Adler32:
  """
  Implements the Adler-32 checksum.

  For additional reading on the algorithm, check out https://www.rfc-editor.org/rfc/rfc1950#section-9.
  The running sums are kept packed as ``(s2 << 16) | s1`` and advanced by ``zlib.adler32``.
  """

  name = 'Adler-32'
  digest_bits = 32

  def __init__(self) -> None:
    self._value = 1

  def reset(self) -> None:
    self._value = 1

  def update(self, data: bytes) -> None:
    self._value = zlib.adler32(data, self._value)

  @property
  def s1(self) -> int:
    return self._value & 0xFFFF

  @property
  def s2(self) -> int:
    return self._value >> 16

  @property
  def value(self) -> int:
    return self._value

  def digest(self) -> bytes:
    return self._value.to_bytes(4, 'little')


class HashlibChecksum:
  """Adapts a ``hashlib`` constructor to the :class:`Checksum` interface."""

  def __init__(self, name: str, constructor: Callable[[], 'hashlib._Hash']) -> None:
    self.name = name
    self._constructor = constructor
    self._hash = constructor()
    self.digest_bits = self._hash.digest_size * 8

  def reset(self) -> None:
    self._hash = self._constructor()

  def update(self, data: bytes) -> None:
    self._hash.update(data)

  def digest(self) -> bytes:
    return self._hash.digest()


def checksum_value(checksum: Checksum, data: bytes) -> int:
  """Reset ``checksum``, absorb ``data`` and read the digest as an unsigned little-endian integer."""
  checksum.reset()
  checksum.update(data)
  return int.from_bytes(checksum.digest(), 'little', signed=False)
