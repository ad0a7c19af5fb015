"""
Console driver for Evil Hangman.

Usage: evil-hangman dictionary word_length guesses [-v]
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .errors import (
    DictionaryReadError,
    EmptyDictionaryError,
    GuessAlreadyMadeError,
    InvalidGuessError,
)
from .game import EvilHangmanGame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evil-hangman",
        description="Play hangman against a computer that cheats.",
    )
    parser.add_argument("dictionary", help="Word list file (whitespace separated words)")
    parser.add_argument("word_length", type=int, help="Number of letters in the word")
    parser.add_argument("guesses", type=int, help="Number of wrong guesses allowed")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log how the candidate words are partitioned")
    return parser


def play(game: EvilHangmanGame, input_func: Callable[[str], str] = input) -> bool:
    """
    Run the prompt loop until the game is won or the guesses run out.

    Returns:
        True if the player won
    """
    while not game.has_won() and game.guesses_left > 0:
        print(f"\nYou have {game.guesses_left} guesses left")
        print("Used letters:" + "".join(f" {c}" for c in game.guessed_letters))
        print(f"Word: {game.revealed_word}")

        raw = input_func("Enter guess: ").strip()
        if len(raw) != 1:
            print("Invalid input! You may only guess a single character!")
            continue
        if not raw.isalpha():
            print("That is not a valid character! Only characters between A-Z are acceptable.")
            continue

        try:
            game.make_guess(raw)
        except InvalidGuessError:
            print("That is not a valid character! Only characters between A-Z are acceptable.")
            continue
        except GuessAlreadyMadeError:
            print("You already guessed that character!")
            continue

        letter = raw.lower()
        count = game.get_character_count(letter)
        if count == 0:
            print(f"Sorry, there are no {letter}'s")
        else:
            print(f"Yes, there are {count} {letter}'s")

    if game.has_won():
        print(f"You win! You guessed the word: {game.revealed_word}")
        return True

    print("\nYou lose!")
    print(f"The word was {game.get_valid_word()}")
    return False


def main(argv: Optional[List[str]] = None,
         input_func: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        game = EvilHangmanGame(args.guesses)
        game.start_game(args.dictionary, args.word_length)
    except (EmptyDictionaryError, DictionaryReadError, ValueError) as e:
        logging.getLogger(__name__).debug("Setup failed: %s", e)
        print("Empty Dictionary or some sort of I/O exception has occurred.")
        return 1

    try:
        play(game, input_func)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
