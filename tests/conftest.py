from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
# Make the package importable without installing it
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

COMMON_WORDS = [
    "rest",
    "restart",
    "restaurant",
    "restaurants",
    "restaurateur",
    "tarantula",
    "aunt",
    "table",
    "menu",
    "waiter",
    "kitchen",
    "thin",
    "thing",
    "things",
    "think",
    "kitten",
    "sitting",
    "saturday",
    "sunday",
    "dictionary",
    "spelling",
]


@pytest.fixture(scope="session")
def large_dictionary():
    """Thousands of filler entries followed by a few real words."""
    filler = ["".join(chars) for chars in itertools.product("bcdfghjklm", repeat=4)]
    return filler + COMMON_WORDS


@pytest.fixture(scope="session")
def large_dictionary_text(large_dictionary):
    return "\n".join(large_dictionary) + "\n"


@pytest.fixture
def word_sample():
    return [
        "",
        "a",
        "ab",
        "ba",
        "abc",
        "kitten",
        "sitting",
        "saturday",
        "sunday",
        "thin",
        "thing",
        "thinga",
        "restaraunt",
        "restaurant",
        "aaaa",
        "aaab",
        "baaa",
        "à",
        "café",
        "cafe",
        "naïve",
    ]
