"""A menu-driven integer calculator."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from typing import TextIO

ADD, SUBTRACT, MULTIPLY, DIVIDE, QUIT = 1, 2, 3, 4, 5

MENU = (
    "Please make a selection: \n"
    "1. Add \n"
    "2. Subtract \n"
    "3. Multiply \n"
    "4. Divide \n"
    "5. Quit \n"
)


def _truncating_divide(x: int, y: int) -> int:
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def calculate(choice: int, x: int, y: int) -> int:
    """Apply the menu operation ``choice`` to ``x`` and ``y``.

    Division truncates toward zero. Raises ZeroDivisionError when dividing
    by zero and ValueError for an unknown choice.
    """
    if choice == ADD:
        return x + y
    if choice == SUBTRACT:
        return x - y
    if choice == MULTIPLY:
        return x * y
    if choice == DIVIDE:
        if y == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_divide(x, y)
    raise ValueError(f"invalid selection: {choice}")


class _Scanner:
    """Reads whitespace-separated integers from a stream of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._tokens: deque[str] = deque()

    def next_int(self) -> int:
        while not self._tokens:
            line = next(self._lines, None)
            if line is None:
                raise EOFError("no more input")
            self._tokens.extend(line.split())
        token = self._tokens.popleft()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def discard_line(self) -> None:
        self._tokens.clear()


def run(lines: Iterable[str], output: TextIO) -> None:
    """Run the calculator session over ``lines``, writing to ``output``.

    The session ends on the quit selection or when input runs out.
    """
    scanner = _Scanner(lines)
    try:
        while True:
            output.write(MENU)
            choice = scanner.next_int()
            if choice == QUIT:
                output.write("Exiting the program.\n")
                return
            output.write("Enter first number: \n")
            x = scanner.next_int()
            output.write("Enter second number: \n")
            y = scanner.next_int()
            scanner.discard_line()
            try:
                output.write(f"Total: {calculate(choice, x, y)} \n")
            except ZeroDivisionError:
                output.write("Error: Divsion by zero!\n")
            except ValueError:
                output.write("Invalid selection. \n")
    except EOFError:
        return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on standard input."""
    try:
        run(sys.stdin, sys.stdout)
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    return 0