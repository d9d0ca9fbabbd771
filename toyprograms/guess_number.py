"""Number guessing games: a classic one-to-ten game and a one-to-a-hundred game."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TextIO

CLASSIC_MAX_NUMBER = 10
CLASSIC_MAX_ATTEMPTS = 10
MAX_NUMBER = 100
MAX_ATTEMPTS = 25

_INT = re.compile(r"[+-]?\d+")


class Feedback(Enum):
    """How a guess relates to the secret number."""

    TOO_HIGH = "Too high!"
    TOO_LOW = "Too low!"
    CORRECT = "Correct!"


def judge(guess: int, secret: int) -> Feedback:
    """Compare ``guess`` with ``secret``."""
    if guess > secret:
        return Feedback.TOO_HIGH
    if guess < secret:
        return Feedback.TOO_LOW
    return Feedback.CORRECT


class _Scanner:
    """Reads integers the way a formatted integer read does, across lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._rest = ""

    def read_int(self) -> int | None:
        """Return the next integer, or None when the input there is not one."""
        while not self._rest.strip():
            line = next(self._lines, None)
            if line is None:
                raise EOFError("input exhausted")
            self._rest = line
        self._rest = self._rest.lstrip()
        match = _INT.match(self._rest)
        if match is None:
            return None
        self._rest = self._rest[match.end():]
        return int(match.group())

    def discard_line(self) -> None:
        self._rest = ""


def read_guess(lines: Iterable[str], output: TextIO) -> int:
    """Prompt for a guess until a line starting with a number is read.

    Raises EOFError when the input runs out.
    """
    scanner = _Scanner(lines)
    while True:
        output.write("? ")
        guess = scanner.read_int()
        scanner.discard_line()
        if guess is not None:
            return guess
        output.write(f"Invalid input. Please enter a number between 1 and {MAX_NUMBER}")


def play_classic(secret: int, lines: Iterable[str], output: TextIO) -> int:
    """Play the one-to-ten game and return the number of attempts used."""
    scanner = _Scanner(lines)
    attempts = 0
    while attempts <= CLASSIC_MAX_ATTEMPTS:
        output.write(f"Guess a number from 1 to {CLASSIC_MAX_NUMBER}:\n")
        while (guess := scanner.read_int()) is None:
            output.write("Invalid input please try again!\n")
            scanner.discard_line()
        attempts += 1
        feedback = judge(guess, secret)
        if feedback is Feedback.CORRECT:
            break
        output.write(f"{feedback.value}\n")
    output.write(
        f"It took {attempts} attempts to guess right. "
        "See if you can get it in one try!\n"
    )
    return attempts


def play(secret: int, lines: Iterable[str], output: TextIO) -> bool:
    """Play the one-to-a-hundred game; return True if the secret was found."""
    source = iter(lines)
    output.write(f"Guess a number between 1 and {MAX_NUMBER}\n")
    for attempt in range(1, MAX_ATTEMPTS + 1):
        guess = read_guess(source, output)
        output.write(f"debug {guess}, secret={secret}\n")
        feedback = judge(guess, secret)
        if feedback is Feedback.CORRECT:
            output.write(
                f"Congratulations! You guessed the number in {attempt} attempts.\n"
            )
            return True
        output.write(f"{feedback.value}\n")
    output.write(
        f"Sorry! Even after {MAX_ATTEMPTS + 1} guess, "
        "you failed to guess the number.\n"
    )
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Play the classic game on standard input."""
    secret = random.randint(1, CLASSIC_MAX_NUMBER)
    try:
        play_classic(secret, sys.stdin, sys.stdout)
    except EOFError:
        return 1
    return 0


def main_v2(argv: Sequence[str] | None = None) -> int:
    """Play the one-to-a-hundred game on standard input."""
    secret = random.randint(1, MAX_NUMBER)
    try:
        play(secret, sys.stdin, sys.stdout)
    except EOFError:
        return 1
    return 0