import enum
import string
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from . import NUMBER_OF_GUESSES


class LetterResult(enum.IntEnum):
    """
    result of one letter of a guess

    ordered by how much it tells you about the answer so the best known
    result for a letter is simply the max
    """
    ABSENT  = 0 # not in word
    PRESENT = 1 # in word but wrong spot
    EXACT   = 2 # exact spot


class GameStatus(enum.Enum):
    IN_PROGRESS = 'in progress'
    WON         = 'won'
    LOST        = 'lost'

    @property
    def is_terminal(self):
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class Attempt:
    """
    one accepted guess, never changes once made
    """
    number: int                        # 1 based
    guess: str
    results: Tuple[LetterResult, ...]
    is_win: bool

    def __iter__(self):
        return iter(zip(self.guess, self.results))


class AlphabetKnowledge:
    """
    best known result for every letter of the alphabet

    a letter that has never been guessed maps to None
    """

    def __init__(self):
        self._letters: Dict[str, Optional[LetterResult]] = {
            c: None for c in string.ascii_lowercase
        }

    def __getitem__(self, letter):
        return self._letters[letter.lower()]

    def __len__(self):
        return len(self._letters)

    def update(self, letter, result):
        """
        only ever upgrade a letter: exact is never replaced, present never
        replaces exact, absent only fills in an unknown letter
        """
        letter = letter.lower()
        current = self._letters[letter]

        if current is None or result > current:
            self._letters[letter] = result

    def fold(self, guess, results):
        for letter, result in zip(guess, results):
            self.update(letter, result)

    def letters(self, result):
        """
        letters currently classified as result, None for unguessed letters
        """
        return [c for c, r in self._letters.items() if r is result]

    def snapshot(self):
        return dict(self._letters)

    def copy(self):
        other = AlphabetKnowledge()
        other._letters.update(self._letters)
        return other


class GameState:
    """
    answer, attempts so far and what's known about the alphabet

    only Wordle should call record_attempt, everything else is read only
    """

    def __init__(self, answer, max_attempts=NUMBER_OF_GUESSES):
        self._answer = answer
        self.max_attempts = max_attempts
        self._attempts: List[Attempt] = []
        self._knowledge = AlphabetKnowledge()
        self._status = GameStatus.IN_PROGRESS

    @property
    def answer(self):
        return self._answer

    @property
    def attempts(self):
        return tuple(self._attempts)

    @property
    def progress(self):
        """
        one slot per turn, None for turns not taken yet
        """
        return self._attempts + [None] * (self.max_attempts - len(self._attempts))

    @property
    def knowledge(self):
        return self._knowledge.snapshot()

    def alphabet_knowledge(self):
        return self._knowledge.copy()

    @property
    def status(self):
        return self._status

    def is_terminal(self):
        return self._status.is_terminal

    def record_attempt(self, attempt):
        if self.is_terminal():
            raise RuntimeError(f"game is over ({self._status.value}), can't record: {attempt.guess}")

        self._attempts.append(attempt)
        self._knowledge.fold(attempt.guess, attempt.results)

        if attempt.is_win:
            self._status = GameStatus.WON
        elif len(self._attempts) >= self.max_attempts:
            self._status = GameStatus.LOST
