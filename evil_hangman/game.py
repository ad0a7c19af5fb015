"""
Evil Hangman Game Engine
========================

The computer never commits to a secret word. After each guess it keeps the
largest family of words consistent with everything guessed so far (see
patterns.py for the exact selection order) and only reveals what that family
has in common.

Lifecycle: NOT_STARTED -> IN_PROGRESS -> WON | LOST
- start_game() is the only way into IN_PROGRESS. Calling it again
  re-initializes the game with the new word list.
- make_guess() is only accepted IN_PROGRESS, otherwise GameNotInProgressError.
"""

import logging
from enum import Enum
from typing import List, Optional, Set

import numpy as np

from .dictionary import WordSource, load_words
from .errors import (
    GameNotInProgressError,
    GuessAlreadyMadeError,
    InvalidGuessError,
)
from .patterns import PLACEHOLDER, choose_family, words_to_chars


logger = logging.getLogger(__name__)


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class EvilHangmanGame:
    """
    Adversarial hangman engine.

    Owns the candidate words (sorted list plus a code point array for the
    partitioning kernels), the guessed letters, the guess budget and the
    revealed word.
    """

    def __init__(self, guesses: int):
        """
        Args:
            guesses: Number of missed guesses allowed before the player loses
        """
        if guesses < 1:
            raise ValueError(f"Guess budget must be at least 1, got {guesses}")
        self.max_guesses = guesses
        self._guesses_left = guesses
        self._words: List[str] = []
        self._word_chars = np.zeros((0, 0), dtype=np.int32)
        self._guessed: Set[str] = set()
        self._revealed: List[str] = []
        self._last_pattern: Optional[str] = None
        self._started = False

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def start_game(self, source: WordSource, word_length: int) -> None:
        """
        Start a new game with the words of word_length found in source.

        Args:
            source: Path to a dictionary file, or a readable text stream
            word_length: Number of letters in the word to guess (>= 2)

        Raises:
            EmptyDictionaryError: Bad length, empty source, or no word of that length
            DictionaryReadError: If the source cannot be read
        """
        # Load before touching state so a failed start leaves the old game intact
        words = load_words(source, word_length)

        self._words = words
        self._word_chars = words_to_chars(words)
        self._guessed = set()
        self._guesses_left = self.max_guesses
        self._revealed = [PLACEHOLDER] * word_length
        self._last_pattern = None
        self._started = True
        logger.debug("Started game: %d candidates of length %d, %d guesses",
                     len(words), word_length, self.max_guesses)

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def make_guess(self, guess: str) -> List[str]:
        """
        Make a guess in the current game.

        Args:
            guess: A single letter, case-insensitive

        Returns:
            Sorted list of every word still consistent with all guesses so
            far, including this one

        Raises:
            GameNotInProgressError: Before start_game() or after the game ended
            InvalidGuessError: If guess is not exactly one alphabetic character
            GuessAlreadyMadeError: If the letter was already guessed
        """
        status = self.status
        if status is not GameStatus.IN_PROGRESS:
            raise GameNotInProgressError(f"Cannot guess, game is {status.value}")

        letter = guess.lower() if isinstance(guess, str) else guess
        # Some letters lower-case to more than one character
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
            raise InvalidGuessError(f"Guess must be a single letter, got {guess!r}")

        if letter in self._guessed:
            raise GuessAlreadyMadeError(letter)

        self._guessed.add(letter)

        pattern, keep = choose_family(self._word_chars, letter)
        self._word_chars = self._word_chars[keep]
        self._words = [self._words[i] for i in keep]
        self._last_pattern = pattern

        for i, c in enumerate(pattern):
            if c != PLACEHOLDER and self._revealed[i] == PLACEHOLDER:
                self._revealed[i] = c

        if letter not in pattern:
            self._guesses_left -= 1

        logger.debug("Guess %r -> %s (%d candidates, %d guesses left)",
                     letter, pattern, len(self._words), self._guesses_left)
        return list(self._words)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        if not self._started:
            return GameStatus.NOT_STARTED
        if PLACEHOLDER not in self._revealed:
            return GameStatus.WON
        if self._guesses_left <= 0:
            return GameStatus.LOST
        return GameStatus.IN_PROGRESS

    def has_won(self) -> bool:
        return self.status is GameStatus.WON

    def has_lost(self) -> bool:
        return self.status is GameStatus.LOST

    @property
    def guessed_letters(self) -> List[str]:
        """Previously guessed letters in alphabetical order."""
        return sorted(self._guessed)

    @property
    def guesses_left(self) -> int:
        return self._guesses_left

    @property
    def revealed_word(self) -> str:
        return ''.join(self._revealed)

    @property
    def word_length(self) -> int:
        return len(self._revealed)

    @property
    def candidates(self) -> List[str]:
        return list(self._words)

    @property
    def last_pattern(self) -> Optional[str]:
        """Winning pattern of the most recent guess (None before any guess)."""
        return self._last_pattern

    def get_character_count(self, letter: str) -> int:
        """
        How many positions the most recent winning pattern revealed for letter.

        Returns 0 before any guess, and for anything that is not a single letter.
        """
        letter = letter.lower()
        if self._last_pattern is None or len(letter) != 1 or not letter.isalpha():
            return 0
        return self._last_pattern.count(letter)

    def get_valid_word(self) -> str:
        """
        A word to present as the secret word.

        Every remaining candidate fits all guesses equally well; the
        lexicographically last one is reported.
        """
        if not self._words:
            raise GameNotInProgressError("No game has been started")
        return self._words[-1]
