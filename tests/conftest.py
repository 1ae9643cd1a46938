from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable

import pytest

from digestint.__main__ import main as cli_main
from digestint.codec import DigestCodec


@dataclass(slots=True)
class CompletedRun:
  exit_code: int
  stdout: str
  stderr: str


@pytest.fixture
def adler_codec() -> DigestCodec:
  return DigestCodec('Adler-32')


@pytest.fixture
def run_cli(
  monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> Callable[..., CompletedRun]:
  """
  Execute the CLI with arguments while capturing output.

  Positional arguments are converted to strings and passed to the CLI in order.
  """

  def _run_cli(*args: object) -> CompletedRun:
    argv = ['digestint', *(str(arg) for arg in args)]
    monkeypatch.setattr(sys, 'argv', argv)

    exit_code = cli_main()
    captured = capsys.readouterr()

    return CompletedRun(exit_code=exit_code, stdout=captured.out, stderr=captured.err)

  return _run_cli
