class DigestIntError(Exception):
  """Base class for every error raised by digestint."""


class FormatError(DigestIntError, ValueError):
  """Text does not match the signed hex/decimal integer grammar."""


class UnsupportedAlgorithm(DigestIntError, LookupError):
  """A checksum algorithm cannot be resolved or has no usable digest size."""


class DigestMismatch(DigestIntError, ValueError):
  """
  A compound value is well formed but its embedded digest does not match the digest
  recomputed from its payload.
  """

  def __init__(self, digest: int, expected: int) -> None:
    super().__init__(
      f'Value is not valid: embedded digest {digest:#x} does not match expected {expected:#x}'
    )
    self.digest = digest
    self.expected = expected
