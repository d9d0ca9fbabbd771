"""Small console programs for learning: greetings, guessing games, a calculator, an anagram check, calendar arithmetic and a race simulator."""

__version__ = "0.1.0"