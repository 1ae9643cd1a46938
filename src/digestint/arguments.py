from __future__ import annotations

import argparse
import re
import typing as t
from dataclasses import dataclass
from enum import Enum

from .registry import DEFAULT_ALGORITHM, default_registry
from .text import IntFormat


class HelpFormatter(argparse.HelpFormatter):
  """
  Help formatter that prints one line per option, with its choices and default appended.
  """

  def __init__(
    self,
    prog: str,
    indent_increment: int = 2,
    max_help_position: int = 50,
    width: t.Optional[int] = None,
  ):
    super().__init__(prog, indent_increment, max_help_position, width)

  def _format_action_invocation(self, action: argparse.Action) -> str:
    if not action.option_strings:
      return self._format_args(action, action.dest)

    if isinstance(action, argparse._HelpAction):
      return '-h --help'

    if action.nargs == 0:
      return action.option_strings[-1]

    metavar = self._metavar_formatter(action, action.dest)(1)[0]
    return f'{action.option_strings[-1]} {metavar}'

  def _format_action(self, action: argparse.Action) -> str:
    if isinstance(action, argparse._HelpAction):
      help_text = 'Show this help message and exit'
    else:
      help_text = action.help or ''

    if action.choices is not None and action.option_strings:
      choices = ', '.join(getattr(c, 'value', str(c)) for c in action.choices)
      help_text = f'{help_text} (one of: {choices})'

    if action.default is not None and action.default != argparse.SUPPRESS:
      default = action.default.value if isinstance(action.default, Enum) else action.default
      help_text = f'{help_text} (default: {default})'

    return f'  {self._format_action_invocation(action)} {help_text}\n'


class Command(str, Enum):
  """Enum for the operation to run on the input value."""

  ENCODE = 'encode'
  DECODE = 'decode'
  DIGEST = 'digest'
  CONVERT = 'convert'

  def __str__(self) -> str:
    return self.value


@dataclass
class Arguments:
  """
  A wrapper class providing concrete types for parsed command-line arguments.
  """

  command: Command
  value: str
  output_format: IntFormat
  algorithm: str
  verbose: bool

  @staticmethod
  def from_args() -> Arguments:
    parser = argparse.ArgumentParser(
      prog='digestint',
      description='Embed and verify checksums of arbitrary-precision integers.',
      formatter_class=HelpFormatter,
    )

    # Treat "-0x2a" like "-42": a negative value, not an unknown option.
    parser._negative_number_matcher = re.compile(r'^-\d')

    parser.add_argument(
      'command',
      type=Command,
      choices=list(Command),
      metavar='command',
      help='Operation to run on the value.',
    )

    parser.add_argument('value', help='Integer text, decimal or "0x"-prefixed hexadecimal')

    parser.add_argument(
      '--format',
      dest='output_format',
      type=IntFormat,
      choices=list(IntFormat),
      default=IntFormat.HEX,
      metavar='FORMAT',
      help='Output text format.',
    )

    parser.add_argument(
      '--algorithm',
      default=DEFAULT_ALGORITHM,
      help=f'Checksum algorithm ({", ".join(default_registry().names())}).',
    )

    parser.add_argument(
      '-v',
      '--verbose',
      action='store_true',
      help='Show the decomposed value and debug logging.',
    )

    return Arguments(**vars(parser.parse_args()))
