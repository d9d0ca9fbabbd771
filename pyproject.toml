[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toyprograms"
version = "0.1.0"
description = "A collection of small teaching programs: calculator, guessing games, calendar arithmetic, anagram check and a race simulator."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "examples", "games", "calendar", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
toy-anagrams = "toyprograms.anagrams:main"
toy-calculator = "toyprograms.calculator:main"
toy-guess = "toyprograms.guess_number:main"
toy-guess-v2 = "toyprograms.guess_number:main_v2"
toy-hello = "toyprograms.basics:main_hello"
toy-print-arguments = "toyprograms.basics:main_arguments"
toy-calendar = "toyprograms.mini_calendar:main"
toy-race = "toyprograms.race_simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["toyprograms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
