"""Debug script for tracing how the engine partitions the candidates."""

import io

from evil_hangman.game import EvilHangmanGame
from evil_hangman.patterns import describe_partition


def trace_game(words, guesses, word_length, budget=6):
    game = EvilHangmanGame(budget)
    game.start_game(io.StringIO(" ".join(words)), word_length)

    print(f"\n=== Tracing {len(game.candidates)} words of length {word_length} ===\n")

    for turn, letter in enumerate(guesses, start=1):
        cands = game.candidates
        print(f"Turn {turn}: {len(cands)} candidates, guess '{letter}'")

        families = describe_partition(cands, letter)
        for pattern, members in families.items():
            shown = members if len(members) <= 8 else members[:8] + ["..."]
            print(f"    {pattern}  size={len(members):4d}  {shown}")

        game.make_guess(letter)
        print(f"  => kept {game.last_pattern}, word {game.revealed_word}, "
              f"{game.guesses_left} guesses left")

        if game.has_won():
            print(f"\n✓ Player wins: {game.revealed_word}")
            return True
        if game.has_lost():
            print(f"\n✗ Player loses, the word was {game.get_valid_word()}")
            return False

    print(f"\nStopped after {len(guesses)} guesses, {len(game.candidates)} candidates left")
    return None


if __name__ == "__main__":
    trace_game(["bad", "bat", "bag", "big", "bug", "dab", "tab"], "batgdu", 3, budget=3)
