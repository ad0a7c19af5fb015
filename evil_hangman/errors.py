"""Exceptions raised by the Evil Hangman engine."""


class EvilHangmanError(Exception):
    """Base class for all engine errors."""


class EmptyDictionaryError(EvilHangmanError):
    """No usable words for the requested length (or the length itself is invalid)."""


class DictionaryReadError(EvilHangmanError):
    """The word source could not be read."""


class GuessAlreadyMadeError(EvilHangmanError):
    """The letter was already guessed in this game."""

    def __init__(self, letter: str):
        super().__init__(f"'{letter}' has already been guessed")
        self.letter = letter


class InvalidGuessError(EvilHangmanError, ValueError):
    """A guess must be exactly one alphabetic character."""


class GameNotInProgressError(EvilHangmanError):
    """A guess was made before start_game() or after the game ended."""
