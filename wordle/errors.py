"""
errors a player can cause

guess errors are returned from Wordle.submit_guess rather than raised so
any ui can show them however it likes. EmptyDictionary is raised since a
game can't start without an answer.
"""


class GuessError(Exception):

    ok = False

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class InvalidLength(GuessError):

    def __init__(self, guess, wordlen):
        self.guess = guess
        self.wordlen = wordlen

        if self.too_short:
            reason = "it's too short"
        else:
            reason = "it's too long"

        super().__init__(f"Guess is invalid because {reason}, it must be {wordlen} letters.")

    @property
    def too_short(self):
        return len(self.guess) < self.wordlen

    @property
    def too_long(self):
        return len(self.guess) > self.wordlen


class InvalidCharacters(GuessError):

    def __init__(self, guess, has_digits):
        self.guess = guess
        self.has_digits = has_digits

        if has_digits:
            message = "Guess is invalid because it contains digits."
        else:
            message = "Guess is invalid because it has characters that are not allowed."

        super().__init__(message)


class NotInDictionary(GuessError):

    def __init__(self, guess):
        self.guess = guess
        super().__init__(f"Guess is not a valid word in the dictionary: {guess}")


class SessionAlreadyTerminal(GuessError):

    def __init__(self, status):
        self.status = status
        super().__init__(f"The game is already over ({status.value}).")


class EmptyDictionary(Exception):
    """
    nothing to pick an answer from
    """
