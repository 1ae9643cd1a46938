from __future__ import annotations

from dataclasses import dataclass

from .codec import DigestCodec
from .registry import DEFAULT_ALGORITHM, AlgorithmRegistry
from .text import IntFormat, format_int, parse_int


@dataclass(frozen=True)
class BigIntegerSigned:
  """
  An integer payload protected by a digest of its absolute value.

  Only the payload is stored. The digest is recomputed on every request, and the compound
  text form is produced and verified through a :class:`DigestCodec`.
  """

  payload: int

  def __post_init__(self) -> None:
    if isinstance(self.payload, bool) or not isinstance(self.payload, int):
      raise TypeError(f'payload must be an int, not {type(self.payload).__name__}')

  def get_digest(
    self, algorithm: str = DEFAULT_ALGORITHM, registry: AlgorithmRegistry | None = None
  ) -> int:
    return DigestCodec(algorithm, registry).digest(self.payload)

  def to_compound(self, codec: DigestCodec | None = None) -> int:
    return (codec or DigestCodec()).encode(self.payload)

  @classmethod
  def from_compound(cls, compound: int, codec: DigestCodec | None = None) -> BigIntegerSigned:
    return cls((codec or DigestCodec()).decode(compound))

  @classmethod
  def parse(cls, text: str, codec: DigestCodec | None = None) -> BigIntegerSigned:
    return cls.from_compound(parse_int(text), codec)

  def format(self, mode: IntFormat = IntFormat.HEX, codec: DigestCodec | None = None) -> str:
    return format_int(self.to_compound(codec), mode)
