from __future__ import annotations

import logging
from typing import Optional, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from digestint.arguments import Arguments, Command
from digestint.codec import DigestCodec
from digestint.compound import CompoundParts
from digestint.error import DigestIntError, DigestMismatch
from digestint.text import IntFormat, format_int, parse_int


def _configure_logging(console: Console) -> None:
  logging.basicConfig(
    level=logging.DEBUG,
    format='%(message)s',
    handlers=[RichHandler(console=console, show_time=False, show_path=False)],
    force=True,
  )


def _execute(arguments: Arguments, codec: DigestCodec) -> Tuple[str, Optional[CompoundParts]]:
  mode = arguments.output_format
  value = parse_int(arguments.value)

  if arguments.command == Command.ENCODE:
    compound = codec.encode(value)
    return format_int(compound, mode), codec.split(compound)

  if arguments.command == Command.DECODE:
    payload = codec.decode(value)
    return format_int(payload, mode), codec.split(value)

  if arguments.command == Command.DIGEST:
    return format_int(codec.digest(value), mode), codec.split(codec.encode(value))

  return format_int(value, mode), None


def _print_parts(
  parts: CompoundParts, codec: DigestCodec, mode: IntFormat, console: Console
) -> None:
  table = Table(title=f'{codec.algorithm} ({codec.digest_bits} bit digest)', show_lines=True)
  table.add_column('Field')
  table.add_column('Value', overflow='fold')

  table.add_row('payload', format_int(parts.payload, mode))
  table.add_row('digest', format_int(parts.digest, IntFormat.HEX))
  table.add_row('expected digest', format_int(parts.expected_digest, IntFormat.HEX))
  table.add_row('verified', '[green]yes[/]' if parts.verified else '[red]no[/]')

  console.print(table)


def main() -> int:
  arguments = Arguments.from_args()

  console, err_console = Console(), Console(stderr=True)

  if arguments.verbose:
    _configure_logging(err_console)

  try:
    codec = DigestCodec(arguments.algorithm)
    text, parts = _execute(arguments, codec)
  except DigestMismatch as exc:
    if arguments.verbose:
      _print_parts(codec.split(parse_int(arguments.value)), codec, arguments.output_format, console)
    err_console.print(f'[bold red]error:[/] {escape(str(exc))}', highlight=False)
    return 1
  except DigestIntError as exc:
    err_console.print(f'[bold red]error:[/] {escape(str(exc))}', highlight=False)
    return 1
  except Exception as exc:  # pragma: no cover - CLI guardrail
    err_console.print(f'[bold red]error:[/] {escape(str(exc))}', highlight=False)
    return 1

  if arguments.verbose and parts is not None:
    _print_parts(parts, codec, arguments.output_format, console)

  console.print(text, highlight=False, soft_wrap=True)

  return 0


if __name__ == '__main__':
  raise SystemExit(main())
