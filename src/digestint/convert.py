from __future__ import annotations

from .codec import DigestCodec
from .text import IntFormat, format_int, parse_int


def from_text(text: str, *, with_digest: bool = False, codec: DigestCodec | None = None) -> int:
  """
  Parse ``text`` into an integer.

  With ``with_digest`` the parsed value is treated as a compound value: its embedded digest
  is verified and the payload is returned.
  """
  value = parse_int(text)

  if not with_digest:
    return value

  return (codec or DigestCodec()).decode(value)


def to_text(
  value: int,
  mode: IntFormat = IntFormat.HEX,
  *,
  with_digest: bool = False,
  codec: DigestCodec | None = None,
) -> str:
  if with_digest:
    value = (codec or DigestCodec()).encode(value)

  return format_int(value, mode)
