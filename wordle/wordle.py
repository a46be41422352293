import random
import string
from dataclasses import dataclass
from typing import Dict, Optional

import logging
logger = logging.getLogger(__name__)

from . import WORD_LENGTH, NUMBER_OF_GUESSES, is_word
from .errors import (
    EmptyDictionary,
    InvalidLength,
    InvalidCharacters,
    NotInDictionary,
    SessionAlreadyTerminal,
)
from .state import Attempt, GameState, GameStatus, LetterResult


def check_length(guess, answer):
    if len(guess) != len(answer):
        raise ValueError(f"guess {guess!r} must be as long as the answer ({len(answer)} letters)")


def check_word(guess, answer):
    """
    return the result of each letter in guess

    each letter is judged on its own: exact if it's in the same spot in the
    answer, present if it's anywhere else in the answer, absent otherwise.
    repeated letters in a guess can all be marked present even when the
    answer only has one of them, see check_word_strict for the alternative.
    """
    check_length(guess, answer)

    guess = guess.lower()
    answer = answer.lower()

    resp = []

    for i in range(len(answer)):
        if guess[i] == answer[i]:
            resp.append(LetterResult.EXACT)
        elif guess[i] in answer:
            resp.append(LetterResult.PRESENT)
        else:
            resp.append(LetterResult.ABSENT)

    return tuple(resp)


def check_word_strict(guess, answer):
    """
    return the result of each letter in guess, counting repeated letters

    each letter of the answer can only back one exact or present mark, exact
    matches claim their letter first
    """
    check_length(guess, answer)

    guess = guess.lower()
    remaining = list(answer.lower())

    resp = [None] * len(remaining)

    for i in range(len(remaining)):
        if guess[i] == remaining[i]:
            resp[i] = LetterResult.EXACT
            remaining[i] = None

    for i in range(len(remaining)):
        if resp[i] is not None:
            continue

        if guess[i] in remaining:
            resp[i] = LetterResult.PRESENT
            remaining[remaining.index(guess[i])] = None
        else:
            resp[i] = LetterResult.ABSENT

    assert None not in resp, f"invalid response generated: {resp=}"
    return tuple(resp)


@dataclass(frozen=True)
class AttemptOutcome:
    """
    what submit_guess hands back for an accepted guess
    """
    attempt: Attempt
    knowledge: Dict[str, Optional[LetterResult]]
    status: GameStatus

    ok = True


class Wordle:
    """
    a single game against one answer

    every change goes through submit_guess, which validates the guess,
    scores it and records it. guess errors are returned, not raised.
    """

    def __init__(self, dictionary, answer, strict=False):
        self.words = frozenset(
            word for word in (w.lower() for w in dictionary) if is_word(word)
        )

        if not self.words:
            raise EmptyDictionary("can't pick an answer from an empty dictionary")

        answer = answer.lower()
        if answer not in self.words:
            raise ValueError(f"answer is not in the dictionary: {answer}")

        self.strict = strict
        self.state = GameState(answer, NUMBER_OF_GUESSES)

    @classmethod
    def pick_word(cls, words, rng=None):
        # sorted so a seeded rng always picks the same word
        rng = rng or random.Random()
        return rng.choice(sorted(words))

    @property
    def answer(self):
        return self.state.answer

    @property
    def status(self):
        return self.state.status

    @property
    def attempts(self):
        return self.state.attempts

    @property
    def progress(self):
        return self.state.progress

    @property
    def knowledge(self):
        return self.state.knowledge

    @property
    def attempt_number(self):
        """
        1 based number of the next attempt
        """
        return len(self.state.attempts) + 1

    def is_terminal(self):
        return self.state.is_terminal()

    def validate_guess(self, guess):
        """
        return the reason guess can't be played or None if it can
        """
        if self.is_terminal():
            return SessionAlreadyTerminal(self.status)

        if len(guess) != WORD_LENGTH:
            return InvalidLength(guess, WORD_LENGTH)

        if any(c in string.digits for c in guess):
            return InvalidCharacters(guess, has_digits=True)

        if not all(c in string.ascii_letters for c in guess):
            return InvalidCharacters(guess, has_digits=False)

        if guess.lower() not in self.words:
            return NotInDictionary(guess)

        return None

    def score(self, guess):
        if self.strict:
            return check_word_strict(guess, self.answer)
        return check_word(guess, self.answer)

    def submit_guess(self, guess):
        """
        play guess, returns an AttemptOutcome or the GuessError explaining
        why it wasn't played
        """
        if error := self.validate_guess(guess):
            logger.debug(f"rejected guess {guess!r}: {error}")
            return error

        guess = guess.lower()

        attempt = Attempt(
            number=self.attempt_number,
            guess=guess,
            results=self.score(guess),
            is_win=guess == self.answer,
        )
        self.state.record_attempt(attempt)

        logger.debug(f"attempt {attempt.number}: {guess}, status: {self.status.value}")

        return AttemptOutcome(attempt, self.knowledge, self.status)


def create_session(dictionary, rng=None, strict=False):
    """
    start a game with an answer picked at random from dictionary

    pass a seeded random.Random as rng for a repeatable answer
    """
    words = {w.lower() for w in dictionary}
    words = {w for w in words if is_word(w)}

    if not words:
        raise EmptyDictionary("can't pick an answer from an empty dictionary")

    answer = Wordle.pick_word(words, rng)
    logger.debug(f"picked an answer from {len(words)} words")

    return Wordle(words, answer, strict=strict)
