from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass

from digestint.codec import DigestCodec
from digestint.text import IntFormat, format_int, parse_int


def _random_payload(size_bytes: int, *, rng: random.Random) -> int:
  if size_bytes <= 0:
    return 0
  value = rng.getrandbits(size_bytes * 8)
  return -value if rng.random() < 0.5 else value


@dataclass(slots=True)
class BenchmarkResult:
  encode_time: float
  decode_time: float
  format_time: float
  parse_time: float
  text_length: int


def run_benchmark(
  *,
  size_kb: int,
  rounds: int,
  algorithm: str,
  mode: IntFormat,
  seed: int,
) -> BenchmarkResult:
  codec = DigestCodec(algorithm)
  rng = random.Random(seed)
  payloads = [_random_payload(size_kb * 1024, rng=rng) for _ in range(rounds)]

  start = time.perf_counter()
  compounds = [codec.encode(payload) for payload in payloads]
  encode_time = time.perf_counter() - start

  start = time.perf_counter()
  texts = [format_int(compound, mode) for compound in compounds]
  format_time = time.perf_counter() - start

  start = time.perf_counter()
  parsed = [parse_int(text) for text in texts]
  parse_time = time.perf_counter() - start

  start = time.perf_counter()
  decoded = [codec.decode(compound) for compound in parsed]
  decode_time = time.perf_counter() - start

  if decoded != payloads:
    raise RuntimeError('Round trip produced different payloads')

  return BenchmarkResult(
    encode_time=encode_time,
    decode_time=decode_time,
    format_time=format_time,
    parse_time=parse_time,
    text_length=sum(len(text) for text in texts),
  )


def main() -> None:
  parser = argparse.ArgumentParser(description='Benchmark the digest codec on large payloads.')
  parser.add_argument('--size-kb', type=int, default=64, help='Payload size in KiB')
  parser.add_argument('--rounds', type=int, default=8, help='Number of payloads to process')
  parser.add_argument('--algorithm', default='Adler-32', help='Checksum algorithm name')
  parser.add_argument(
    '--format', dest='mode', type=IntFormat, default=IntFormat.HEX, help='Text format (hex or dec)'
  )
  parser.add_argument('--seed', type=int, default=1337, help='Seed for payload generation')

  args = parser.parse_args()

  result = run_benchmark(
    size_kb=args.size_kb,
    rounds=args.rounds,
    algorithm=args.algorithm,
    mode=args.mode,
    seed=args.seed,
  )

  print('=== Digest Codec Benchmark ===')
  print(f'Payload size     : {args.size_kb} KiB')
  print(f'Rounds           : {args.rounds}')
  print(f'Algorithm        : {args.algorithm}')
  print(f'Text format      : {args.mode.value}')
  print()
  print(f'Encode time      : {result.encode_time:.3f}s')
  print(f'Format time      : {result.format_time:.3f}s')
  print(f'Parse time       : {result.parse_time:.3f}s')
  print(f'Decode time      : {result.decode_time:.3f}s')
  print(f'  Text produced  : {result.text_length:,} chars')


if __name__ == '__main__':
  main()
