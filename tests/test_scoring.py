import pytest

from wordle.state import LetterResult
from wordle.wordle import check_word, check_word_strict

E = LetterResult.EXACT
P = LetterResult.PRESENT
A = LetterResult.ABSENT


def test_react_against_crate():
    assert check_word('react', 'crate') == (P, P, E, P, P)


def test_answer_scores_all_exact():
    assert check_word('crate', 'crate') == (E,) * 5


def test_case_is_ignored():
    assert check_word('CrAtE', 'crate') == (E,) * 5
    assert check_word('react', 'CRATE') == check_word('REACT', 'crate')


def test_nothing_in_common():
    assert check_word('blind', 'crate') == (A,) * 5


@pytest.mark.parametrize("guess,answer,expected", [
    # every copy of a repeated letter is marked, counts are not checked
    ("geese", "crate", (A, P, P, A, E)),
    ("speed", "plane", (A, P, P, P, A)),
    ("eerie", "level", (P, E, A, A, P)),
    ("apple", "plane", (P, P, P, P, E)),
])
def test_repeated_letters_are_judged_one_at_a_time(guess, answer, expected):
    assert check_word(guess, answer) == expected


@pytest.mark.parametrize("guess,answer,expected", [
    ("geese", "crate", (A, A, A, A, E)),
    ("speed", "plane", (A, P, P, A, A)),
    ("eerie", "level", (P, E, A, A, A)),
    ("apple", "plane", (P, P, A, P, E)),
    ("react", "crate", (P, P, E, P, P)),
])
def test_strict_scoring_counts_repeated_letters(guess, answer, expected):
    assert check_word_strict(guess, answer) == expected


def test_scoring_is_pure():
    first = check_word('speed', 'plane')
    assert check_word('speed', 'plane') == first
    assert check_word_strict('speed', 'plane') == check_word_strict('speed', 'plane')


@pytest.mark.parametrize("guess", ['cat', 'crates'])
def test_guess_must_match_answer_length(guess):
    with pytest.raises(ValueError):
        check_word(guess, 'crate')

    with pytest.raises(ValueError):
        check_word_strict(guess, 'crate')
