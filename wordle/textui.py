import random

from rich.console import Console
from rich.markup import escape
print = Console(color_system='truecolor', highlight=False).print

import logging
logger = logging.getLogger(__name__)

from . import WORD_LENGTH, read_dict
from .state import LetterResult, GameStatus
from .utils import dotdict
from .wordle import Wordle, create_session


class WordleUI:

    EMOJI_IN     = '🟨'
    EMOJI_OUT    = '⬜'
    EMOJI_EXACT  = '🟩'

    # alphabet summary, in the order it's printed
    CATEGORIES = [
        ('Unguessed', None),
        ('Absent', LetterResult.ABSENT),
        ('Exact', LetterResult.EXACT),
        ('Present', LetterResult.PRESENT),
    ]

    @classmethod
    def colorize(cls, result, text):
        """
        colorize text using rich color tags
        result: a LetterResult
        text: the text to wrap with color tags
        """
        if result == LetterResult.PRESENT:
            color = 'bold dark_goldenrod'
        elif result == LetterResult.ABSENT:
            color = 'grey50'
        elif result == LetterResult.EXACT:
            color = 'bold green'
        else:
            raise RuntimeError(f"unknown result: {result}")

        return f"[{color}]{text}[/{color}]"

    @classmethod
    def emoji(cls, result):
        return {
            LetterResult.PRESENT: cls.EMOJI_IN,
            LetterResult.ABSENT: cls.EMOJI_OUT,
            LetterResult.EXACT: cls.EMOJI_EXACT,
        }[result]

    @classmethod
    def format_letter(cls, letter, result):
        """
        exact letters are upper case, present lower case, absent a blank
        """
        if result == LetterResult.EXACT:
            text = letter.upper()
        elif result == LetterResult.PRESENT:
            text = letter.lower()
        else:
            text = '_'

        return cls.colorize(result, text)

    def __init__(self, args):
        args = dotdict(args)

        self.args  = args
        self.words = args.words or read_dict(args.dict)
        self.rng   = random.Random(args.seed)
        self.game  = None

    def new_game(self):
        if self.args.start_word:
            game = Wordle(self.words, self.args.start_word, strict=self.args.strict)
            print(f"using given word: {self.args.start_word}")
        else:
            game = create_session(self.words, self.rng, strict=self.args.strict)
            print("I picked a word, what's your guess?")

        logger.debug(f"new game, strict scoring: {bool(self.args.strict)}")

        self.game = game
        return game

    def get_guess(self):
        """
        ask until the game accepts a guess, returns the AttemptOutcome
        """
        while True:
            word = input("Enter a guess: ").strip()

            outcome = self.game.submit_guess(word)
            if not outcome.ok:
                print(f"[red]{escape(outcome.message)}[/red]\n")
                continue

            return outcome

    def show_progress(self):
        for attempt in self.game.progress:
            if attempt is None:
                print(' '.join('_' * WORD_LENGTH))
                continue

            print(' '.join(self.format_letter(c, r) for c, r in attempt))
        print()

    def show_alphabet(self):
        knowledge = self.game.state.alphabet_knowledge()

        for name, result in self.CATEGORIES:
            letters = knowledge.letters(result)
            if not letters:
                continue

            print(escape(f"{name} [{', '.join(c.upper() for c in letters)}]"))
        print()

    def show_summary(self):
        for attempt in self.game.attempts:
            print(''.join(self.emoji(r) for r in attempt.results))
        print()

    def play(self):
        game = self.new_game()

        while not game.is_terminal():
            self.get_guess()
            self.show_progress()
            self.show_alphabet()

        if game.status == GameStatus.WON:
            print(f"[bold green]You got it in {len(game.attempts)} tries![/bold green]")
        else:
            print("[bold yellow]You ran out of tries.[/bold yellow]")

        print(f"Good game! The word was [blue]{game.answer.upper()}[/blue]")
        self.show_summary()

    def play_again(self):
        while True:
            answer = input("Would you like to play again? (yes/no) ").strip().lower()

            if answer in ('yes', 'no'):
                return answer == 'yes'

            print("\nYou didn't answer with yes or no. Answer again.\n")

    def run(self):
        while True:
            self.play()

            if not self.play_again():
                return
