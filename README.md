# toyprograms

Small console programs for learning, each usable as a command or as a library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `toy-hello` | Prints `Hello, World!` |
| `toy-print-arguments` | Prints each command-line argument with its position, the program name first |
| `toy-anagrams` | Checks whether two strings are anagrams over the letters `a` to `d`; with no arguments it compares a built-in pair, or takes `FIRST SECOND` |
| `toy-calculator` | Menu-driven integer calculator on standard input: add, subtract, multiply, divide (division truncates toward zero) |
| `toy-guess` | Guess a number from 1 to 10, with hints after each wrong guess |
| `toy-guess-v2` | Guess a number from 1 to 100 within 25 attempts |
| `toy-calendar` | Takes a date (`mm dd yy`) and a day count, prints the new date and its weekday |
| `toy-race` | Simulates a five-lap race between two cars with random lap times |

`toy-calendar` reads its four numbers from the command line if given,
otherwise it prompts and reads them from standard input:

```
$ toy-calendar
Please enter a date between the years 1800 and 10000 in the format mm dd yy and provide the number of days to add to this date:
2 28 2024 1
New date: Feb 29 2024. It falls on a Thursday.

$ toy-calendar 12 31 1999 1
New date: Jan 1 2000. It falls on a Saturday.
```

## Library use

```python
from toyprograms.mini_calendar import add_days, weekday_index, is_leap_year, describe
from toyprograms.calculator import calculate
from toyprograms.anagrams import is_anagram, letter_counts

add_days(12, 31, 1999, 1)      # (1, 1, 2000)
weekday_index(1, 1, 2000)      # 6 (Saturday; 0 is Sunday)
is_leap_year(1900)             # False
describe(2, 28, 2024, 1)       # 'New date: Feb 29 2024. It falls on a Thursday.'
calculate(4, 7, 2)             # 3
calculate(4, -7, 2)            # -3
is_anagram("abcd", "dcba")     # True
letter_counts("abba c")        # (2, 2, 1, 0)
```

`calculate` raises `ZeroDivisionError` when dividing by zero and `ValueError`
for an unknown menu choice. `add_days` and `weekday_index` raise `ValueError`
for an invalid month or day.

The games and the calculator take their input as an iterable of lines and
write to a text stream, so they can be driven from code:

```python
import io
from toyprograms.guess_number import play, play_classic, judge, Feedback
from toyprograms.calculator import run

out = io.StringIO()
play(42, ["50", "40", "42"], out)      # True: found on the third attempt
play_classic(7, ["3", "9", "7"], out)  # 3 attempts
judge(5, 3)                            # Feedback.TOO_HIGH

run(["1", "2 3", "5"], out)            # writes "Total: 5 \n" among the prompts
```

The race simulator takes a `random.Random` instance, so a seeded race is
reproducible:

```python
import random, sys
from toyprograms.race_simulator import RaceCar, run_race

race = run_race(RaceCar("Mike", "red"), RaceCar("Kevin", "blue"), random.Random(1), sys.stdout)
race.leader.driver_name
```

Ties in total time go to the first car.

## Limitations

- `weekday_index` only works for dates on or after 1 January 2000; earlier
  dates raise `ValueError`, so `toy-calendar` reports an error for them.
- The anagram check only counts the letters `a`, `b`, `c` and `d`; every
  other character is ignored.
- The calculator works on integers only.