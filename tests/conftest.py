import pytest
from rich.console import Console

from wordle_solver.patterns import PatternTable
from wordle_solver.words import Dictionary

SMALL_WORDS = ["abide", "speed", "crane", "adieu", "stone"]

MEDIUM_WORDS = [
    "abide", "speed", "crane", "adieu", "stone", "eerie", "robin", "geese",
    "crate", "trace", "react", "caret", "slate", "stale", "least", "steal",
    "allow", "llama", "mamma", "sassy", "tests", "shell", "spell", "smell",
]


@pytest.fixture
def small_dictionary():
    return Dictionary(SMALL_WORDS)


@pytest.fixture
def medium_dictionary():
    return Dictionary(MEDIUM_WORDS)


@pytest.fixture
def medium_table(medium_dictionary):
    return PatternTable.build(medium_dictionary, progress=False)


@pytest.fixture
def quiet_console():
    return Console(quiet=True)
