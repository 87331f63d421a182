"""Streams of graphs from the nauty generators geng, genrang and gentreeg."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Iterator, Sequence
from typing import Union

Options = Union[str, Sequence[str]]


class NautyError(RuntimeError):
    """A nauty generator could not be run or failed."""


def strip_line(line: str) -> str:
    """The characters of line before its first newline."""
    return line.split("\n", 1)[0]


def _options(options: Options) -> list[str]:
    if isinstance(options, str):
        return shlex.split(options)
    return [str(option) for option in options]


def _stream(command: list[str]) -> Iterator[str]:
    try:
        process = subprocess.Popen(command, stdout=subprocess.PIPE, text=True)
    except OSError as exc:
        raise NautyError(f"cannot run {command[0]}: {exc}") from exc
    with process:
        assert process.stdout is not None
        for line in process.stdout:
            yield strip_line(line)
    if process.returncode != 0:
        raise NautyError(f"{command[0]} exited with status {process.returncode}")


def geng(order: int, options: Options = "", executable: str = "geng") -> Iterator[str]:
    """Graph strings for the non-isomorphic graphs of the given order."""
    return _stream([executable, str(order), *_options(options)])


def genrang(n: int, num: int, p: int, executable: str = "genrang") -> Iterator[str]:
    """graph6 strings of num random graphs of order n with edge probability p/10."""
    if not 0 <= p <= 10:
        raise ValueError("edge probability must be given in tenths, from 0 to 10")
    return _stream([executable, str(n), str(num), "-g", f"-P{p}/10"])


def gentreeg(order: int, options: Options = "", executable: str = "gentreeg") -> Iterator[str]:
    """sparse6 strings for the non-isomorphic trees of the given order."""
    return _stream([executable, str(order), *_options(options)])