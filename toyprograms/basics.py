"""The smallest programs: a greeting and an argument lister."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence


def greeting() -> str:
    """Return the classic greeting."""
    return "Hello, World!"


def format_arguments(args: Iterable[str]) -> Iterator[str]:
    """Yield one numbered line per argument."""
    for position, arg in enumerate(args):
        yield f"Argument {position}: {arg}"


def _emit(lines: Iterable[str]) -> int:
    """Write each line to standard output and report success."""
    out = sys.stdout
    for line in lines:
        out.write(f"{line}\n")
    out.flush()
    return 0


def main_hello(argv: Sequence[str] | None = None) -> int:
    """Print the greeting; any arguments are ignored."""
    return _emit([greeting()])


def main_arguments(argv: Sequence[str] | None = None) -> int:
    """Print every argument, the program name first."""
    return _emit(format_arguments(sys.argv if argv is None else argv))