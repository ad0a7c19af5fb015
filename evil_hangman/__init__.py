"""
Evil Hangman
============

Hangman where the computer keeps changing its mind: it never picks a secret
word, it keeps the largest family of dictionary words consistent with every
guess so far.
"""

__version__ = "1.0.0"

from .errors import (
    EvilHangmanError,
    EmptyDictionaryError,
    DictionaryReadError,
    GuessAlreadyMadeError,
    InvalidGuessError,
    GameNotInProgressError,
)
from .game import EvilHangmanGame, GameStatus
from .patterns import PLACEHOLDER
