from .codec import DigestCodec, compute_digest, decode_verifying, encode
from .compound import CompoundParts
from .convert import from_text, to_text
from .error import DigestIntError, DigestMismatch, FormatError, UnsupportedAlgorithm
from .registry import DEFAULT_ALGORITHM, AlgorithmRegistry, default_registry, ensure_registered
from .signed import BigIntegerSigned
from .text import IntFormat, format_int, parse_int

__all__ = [
  'DEFAULT_ALGORITHM',
  'AlgorithmRegistry',
  'BigIntegerSigned',
  'CompoundParts',
  'DigestCodec',
  'DigestIntError',
  'DigestMismatch',
  'FormatError',
  'IntFormat',
  'UnsupportedAlgorithm',
  'compute_digest',
  'decode_verifying',
  'default_registry',
  'encode',
  'ensure_registered',
  'format_int',
  'from_text',
  'parse_int',
  'to_text',
]
