"""
Pattern Partitioning
====================

Splits a candidate set by where a guessed letter occurs and picks the family
the adversary keeps.

A pattern is the word with every position that is not the guessed letter
replaced by a placeholder, e.g. guessing 'a' against "bad" gives "-a-".
Internally each pattern is a boolean hit row (True where the letter sits),
so the partition is a single numpy unique over the rows of the candidate
array. False sorts below True, which matches the string order where the
placeholder sorts below every letter: the partition keys come out in
lexicographic order without extra work.

Winning pattern order (first rule that discriminates decides):
1. More words in the family
2. More placeholders in the pattern
3. Fewer occurrences of the guessed letter
4. First occurrence of the guessed letter further to the right
Remaining ties keep the family found first.
"""

from typing import Dict, List, NamedTuple, Sequence, Tuple

import numpy as np
from numba import jit


# ============================================================================
# CONSTANTS
# ============================================================================

PLACEHOLDER = '-'
NO_HIT = -1  # first-hit index of a pattern without the letter


# ============================================================================
# WORD ARRAYS
# ============================================================================

def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """
    Convert equal-length words to a code point array.

    Args:
        words: Words that all share one length

    Returns:
        shape (n_words, word_length) int32 array
    """
    if not words:
        return np.zeros((0, 0), dtype=np.int32)
    length = len(words[0])
    arr = np.zeros((len(words), length), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c)
    return arr


def hit_rows(word_chars: np.ndarray, letter: str) -> np.ndarray:
    """Boolean array marking every position that holds letter."""
    return word_chars == ord(letter)


def row_to_pattern(row: np.ndarray, letter: str) -> str:
    """Render one hit row as a pattern string, e.g. [F, T, F] -> '-a-'."""
    return ''.join(letter if hit else PLACEHOLDER for hit in row)


# ============================================================================
# NUMBA-ACCELERATED SELECTION
# ============================================================================

@jit(nopython=True, cache=True)
def outranks(size_a: int, holes_a: int, hits_a: int, first_a: int,
             size_b: int, holes_b: int, hits_b: int, first_b: int) -> bool:
    """
    True if family a strictly beats family b for the adversary.

    Args:
        size_*: Number of words in the family
        holes_*: Placeholder count of the pattern
        hits_*: Occurrences of the guessed letter in the pattern
        first_*: Index of the first occurrence (NO_HIT when hits is 0)
    """
    if size_a != size_b:
        return size_a > size_b
    if holes_a != holes_b:
        return holes_a > holes_b
    if hits_a != hits_b:
        return hits_a < hits_b
    # Equal counts of zero have no first occurrence to compare
    if hits_a == 0:
        return False
    return first_a > first_b


@jit(nopython=True, cache=True)
def select_winner(sizes: np.ndarray, holes: np.ndarray,
                  hits: np.ndarray, first_hits: np.ndarray) -> int:
    """
    Fold outranks() over the families in key order.

    Returns:
        Index of the winning family (the earliest one among exact ties)
    """
    best = 0
    for i in range(1, len(sizes)):
        if outranks(sizes[i], holes[i], hits[i], first_hits[i],
                    sizes[best], holes[best], hits[best], first_hits[best]):
            best = i
    return best


# ============================================================================
# PARTITIONS
# ============================================================================

class Partition(NamedTuple):
    """
    Candidate families for one guessed letter.

    Attributes:
        rows: shape (n_families, word_length) hit rows, lexicographic order
        members: family index of every candidate (aligned with the input rows)
        sizes: number of candidates per family
    """
    rows: np.ndarray
    members: np.ndarray
    sizes: np.ndarray

    @property
    def n_families(self) -> int:
        return len(self.sizes)

    def stats(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """(sizes, holes, hits, first_hits) per family, all int64."""
        hits = self.rows.sum(axis=1).astype(np.int64)
        holes = self.rows.shape[1] - hits
        first_hits = np.where(hits > 0, self.rows.argmax(axis=1), NO_HIT).astype(np.int64)
        return self.sizes.astype(np.int64), holes, hits, first_hits


def partition_candidates(word_chars: np.ndarray, letter: str) -> Partition:
    """
    Group candidates by their pattern for letter.

    Args:
        word_chars: shape (n_words, word_length) code point array, n_words > 0
        letter: Lower-case guessed letter

    Returns:
        Partition covering every candidate exactly once
    """
    rows, members, sizes = np.unique(
        hit_rows(word_chars, letter), axis=0, return_inverse=True, return_counts=True
    )
    return Partition(rows, members.reshape(-1), sizes)


def choose_family(word_chars: np.ndarray, letter: str) -> Tuple[str, np.ndarray]:
    """
    Pick the family the adversary keeps.

    Args:
        word_chars: shape (n_words, word_length) code point array, n_words > 0
        letter: Lower-case guessed letter

    Returns:
        (winning pattern string, sorted indices of its members in word_chars)
    """
    partition = partition_candidates(word_chars, letter)
    winner = select_winner(*partition.stats())
    pattern = row_to_pattern(partition.rows[winner], letter)
    return pattern, np.flatnonzero(partition.members == winner)


def describe_partition(words: Sequence[str], letter: str) -> Dict[str, List[str]]:
    """Pattern -> member words, in key order. Used for tracing and tests."""
    partition = partition_candidates(words_to_chars(words), letter)
    families: Dict[str, List[str]] = {}
    for family, row in enumerate(partition.rows):
        families[row_to_pattern(row, letter)] = [
            words[i] for i in np.flatnonzero(partition.members == family)
        ]
    return families
