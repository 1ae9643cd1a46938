from dataclasses import dataclass


@dataclass(frozen=True)
class CompoundParts:
  payload: int
  digest: int
  expected_digest: int

  @property
  def verified(self) -> bool:
    return self.digest == self.expected_digest
