"""
Word source loading.

Reads whitespace separated tokens from a dictionary file (or any open text
stream) and reduces them to the candidate set for one word length.
"""

import logging
import os
from typing import IO, List, Set, Union

from .errors import DictionaryReadError, EmptyDictionaryError


logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 2

WordSource = Union[str, os.PathLike, IO[str]]


def read_tokens(source: WordSource) -> Set[str]:
    """
    Read every whitespace separated token from source, lower-cased.

    Args:
        source: Path to a dictionary file, or a readable text stream

    Returns:
        Set of lower-cased tokens (duplicates collapse)

    Raises:
        DictionaryReadError: If the source cannot be opened or decoded
    """
    try:
        if hasattr(source, 'read'):
            text = source.read()
        else:
            with open(source, 'r', encoding='utf-8') as f:
                text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryReadError(f"Could not read word source {source!r}: {e}") from e

    return {token.lower() for token in text.split()}


def load_words(source: WordSource, word_length: int) -> List[str]:
    """
    Load the candidate words of one length from a word source.

    Args:
        source: Path to a dictionary file, or a readable text stream
        word_length: Required word length (at least MIN_WORD_LENGTH)

    Returns:
        Sorted list of unique lower-case words of exactly word_length

    Raises:
        EmptyDictionaryError: Bad length, empty source, or no word of that length
        DictionaryReadError: If the source cannot be read
    """
    if word_length < MIN_WORD_LENGTH:
        raise EmptyDictionaryError(
            f"Word length must be at least {MIN_WORD_LENGTH}, got {word_length}"
        )

    tokens = read_tokens(source)
    if not tokens:
        raise EmptyDictionaryError("Word source contains no words")

    words = sorted(w for w in tokens if len(w) == word_length)
    if not words:
        raise EmptyDictionaryError(f"No {word_length}-letter words in word source")

    logger.debug("Loaded %d of %d words with length %d", len(words), len(tokens), word_length)
    return words
