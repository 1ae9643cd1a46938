def encode_magnitude(value: int) -> bytes:
  """
  Encode a non-negative integer as minimal little-endian bytes.

  Zero encodes as ``b''``; no sign byte is ever added.
  """
  if value < 0:
    raise ValueError(f'Cannot encode a negative magnitude: {value}')

  return value.to_bytes((value.bit_length() + 7) // 8, 'little', signed=False)


def decode_magnitude(data: bytes) -> int:
  return int.from_bytes(data, 'little', signed=False)
