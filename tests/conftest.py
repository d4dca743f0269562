import json
import logging
import random

import pytest

from wordgen.core.wordsearch import Word
from wordgen.utils.logger import configure_logging


ANIMALS = [
    ("CAT", "Purrs on the sofa"),
    ("DOG", "Man's best friend"),
    ("HAMSTER", "Runs on a wheel"),
    ("New York", "Not an animal, but a city"),
    ("PARROT", "Repeats what you say"),
    ("RABBIT", "Long ears"),
    ("GOAT", "Eats anything"),
    ("HORSE", "Gallops"),
]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def animal_words():
    return [Word(text, clue) for text, clue in ANIMALS]


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "data" / "wordlists" / "animals.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps([{"text": t, "clue": c} for t, c in ANIMALS]), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_logging():
    # the CLI binds a handler to the runner's stream; rebind after each test
    yield
    configure_logging(logging.WARNING)
