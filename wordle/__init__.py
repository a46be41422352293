import pathlib

dictfile = pathlib.Path(__file__).parent / 'dictionary.txt'

WORD_LENGTH = 5
NUMBER_OF_GUESSES = 6
LETTERS_IN_ALPHABET = 26

import logging
logger = logging.getLogger(__name__)

from .errors import EmptyDictionary


def is_word(word, wordlen=WORD_LENGTH):
    """
    True if word is exactly wordlen ascii letters
    """
    return len(word) == wordlen and word.isascii() and word.isalpha()


def read_dict(dictpath=dictfile, wordlen=WORD_LENGTH):
    """
    read a newline delimited word list, case insensitive

    returns the set of lowercase words that are wordlen letters long
    """
    dictionary = pathlib.Path(dictpath).open().read().splitlines()
    logger.debug(f"dictionary contains {len(dictionary)} lines")

    words = set()

    for word in dictionary:
        word = word.strip().lower()
        if is_word(word, wordlen):
            words.add(word)

    logger.debug(f"our word list contains {len(words)}, {wordlen} letter words")

    if not words:
        raise EmptyDictionary(f"no {wordlen} letter words found in: {dictpath}")

    return words


from .state import LetterResult, GameStatus, Attempt, AlphabetKnowledge, GameState  # noqa: E402
from .wordle import Wordle, AttemptOutcome, create_session, check_word, check_word_strict  # noqa: E402
