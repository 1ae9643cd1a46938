from __future__ import annotations

import logging

from .bytecodec import encode_magnitude
from .checksum import checksum_value
from .compound import CompoundParts
from .error import DigestMismatch
from .registry import DEFAULT_ALGORITHM, AlgorithmRegistry, default_registry

logger = logging.getLogger(__name__)


def _require_int(value: object, label: str) -> int:
  if isinstance(value, bool) or not isinstance(value, int):
    raise TypeError(f'{label} must be an int, not {type(value).__name__}')
  return value


class DigestCodec:
  """
  Embeds the digest of an integer's magnitude in the low bits of a compound integer.

  A payload ``p`` becomes ``sign(p) * (abs(p) * 2**digest_bits + digest(abs(p)))``, where the
  digest is computed over the minimal little-endian bytes of ``abs(p)``. Decoding splits the
  compound value back apart and refuses it unless the embedded digest matches a freshly
  computed one.
  """

  def __init__(
    self, algorithm: str = DEFAULT_ALGORITHM, registry: AlgorithmRegistry | None = None
  ) -> None:
    self.registry = registry if registry is not None else default_registry()
    self.algorithm = algorithm
    self.digest_bits = self.registry.create(algorithm).digest_bits
    self._mask = (1 << self.digest_bits) - 1

  def digest(self, payload: int) -> int:
    magnitude = abs(_require_int(payload, 'payload'))
    # Fresh accumulator per call; checksum instances are never shared.
    checksum = self.registry.create(self.algorithm)
    return checksum_value(checksum, encode_magnitude(magnitude))

  def encode(self, payload: int) -> int:
    payload = _require_int(payload, 'payload')
    compound = (abs(payload) << self.digest_bits) + self.digest(payload)
    return -compound if payload < 0 else compound

  def split(self, compound: int) -> CompoundParts:
    """Decompose ``compound`` without verifying it."""
    compound = _require_int(compound, 'compound')
    absolute = abs(compound)
    magnitude = absolute >> self.digest_bits

    return CompoundParts(
      payload=-magnitude if compound < 0 else magnitude,
      digest=absolute & self._mask,
      expected_digest=self.digest(magnitude),
    )

  def decode(self, compound: int) -> int:
    parts = self.split(compound)

    if not parts.verified:
      logger.debug(
        '%s digest mismatch: embedded %#x, expected %#x',
        self.algorithm,
        parts.digest,
        parts.expected_digest,
      )
      raise DigestMismatch(parts.digest, parts.expected_digest)

    return parts.payload

  def is_valid(self, compound: int) -> bool:
    return self.split(compound).verified

  def __repr__(self) -> str:
    return f'{type(self).__name__}(algorithm={self.algorithm!r}, digest_bits={self.digest_bits})'


def compute_digest(payload: int, algorithm: str = DEFAULT_ALGORITHM) -> int:
  return DigestCodec(algorithm).digest(payload)


def encode(payload: int, algorithm: str = DEFAULT_ALGORITHM) -> int:
  return DigestCodec(algorithm).encode(payload)


def decode_verifying(compound: int, algorithm: str = DEFAULT_ALGORITHM) -> int:
  return DigestCodec(algorithm).decode(compound)
