import random

import pytest

from wordle.wordle import Wordle


WORDS = [
    'crate', 'react', 'trace', 'cater', 'plane', 'slate', 'speed',
    'eerie', 'level', 'geese', 'apple', 'mount', 'blind', 'fudge',
]


@pytest.fixture
def words():
    return set(WORDS)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def game(words):
    return Wordle(words, 'crate')


@pytest.fixture
def dictpath(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('\n'.join(WORDS) + '\n')
    return path
