"""A two-car race with random lap times."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

LAPS = 5

INTRO = (
    "Welcome to our main event digital race fans! I hope everybody has their "
    "snacks because we are about to begin! "
)
COUNTDOWN = "Racers Ready! In...\n5\n4\n3\n2\n1\nRace!\n\n"


@dataclass
class RaceCar:
    """A car, its driver and the time it has taken so far."""

    driver_name: str
    color: str
    total_lap_time: int = 0


@dataclass
class Race:
    """The state of a race: its length, current lap and current leader."""

    number_of_laps: int = LAPS
    current_lap: int = 1
    leader: RaceCar | None = None


def lap_time(rng: random.Random) -> int:
    """Return a lap time: speed, acceleration and nerves, each from 1 to 3."""
    return sum(rng.randint(1, 3) for _ in range(3))


def leader(first: RaceCar, second: RaceCar) -> RaceCar:
    """Return the car with the lower total time; ties go to ``first``."""
    return first if first.total_lap_time <= second.total_lap_time else second


def run_race(
    first: RaceCar, second: RaceCar, rng: random.Random, output: TextIO
) -> Race:
    """Run every lap, report the leader after each, and return the race."""
    race = Race()
    for lap in range(1, race.number_of_laps + 1):
        race.current_lap = lap
        for car in (first, second):
            car.total_lap_time += lap_time(rng)
        race.leader = leader(first, second)
        output.write(
            f"After lap number {lap}\nFirst Place Is: {race.leader.driver_name} "
            f"in the {race.leader.color} race car!\n\n"
        )
    winner = race.leader
    output.write(
        f"Let's all congratulate {winner.driver_name} in the {winner.color} race "
        "car for an amazing performance.\n\n"
        "It truly was a great race and everybody have a goodnight!\n"
    )
    return race


def main(argv: Sequence[str] | None = None) -> int:
    """Run a race between the two default drivers."""
    sys.stdout.write(INTRO)
    sys.stdout.write(COUNTDOWN)
    run_race(RaceCar("Mike", "red"), RaceCar("Kevin", "blue"), random.Random(), sys.stdout)
    return 0