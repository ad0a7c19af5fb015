import numpy as np

from evil_hangman.patterns import (
    NO_HIT,
    choose_family,
    describe_partition,
    outranks,
    partition_candidates,
    row_to_pattern,
    words_to_chars,
)


def test_words_to_chars_shape_and_codes():
    arr = words_to_chars(["bad", "bug"])
    assert arr.shape == (2, 3)
    assert arr[1, 1] == ord("u")


def test_row_to_pattern_uses_placeholder():
    assert row_to_pattern(np.array([False, True, False]), "a") == "-a-"


def test_larger_family_wins():
    assert outranks(3, 2, 1, 0, 2, 3, 0, NO_HIT)
    assert not outranks(2, 3, 0, NO_HIT, 3, 2, 1, 0)


def test_more_placeholders_wins_on_size_tie():
    assert outranks(2, 3, 0, NO_HIT, 2, 2, 1, 0)
    assert not outranks(2, 2, 1, 0, 2, 3, 0, NO_HIT)


def test_fewer_occurrences_wins_on_placeholder_tie():
    assert outranks(2, 2, 1, 0, 2, 2, 2, 0)
    assert not outranks(2, 2, 2, 0, 2, 2, 1, 0)


def test_rightmost_first_occurrence_wins_last():
    assert outranks(2, 2, 2, 1, 2, 2, 2, 0)
    assert not outranks(2, 2, 2, 0, 2, 2, 2, 1)


def test_exact_ties_do_not_outrank():
    assert not outranks(2, 2, 2, 1, 2, 2, 2, 1)
    assert not outranks(2, 4, 0, NO_HIT, 2, 4, 0, NO_HIT)


def test_partition_keys_are_lexicographic():
    families = describe_partition(["bad", "bag", "bat", "big", "bug"], "a")
    assert list(families) == ["---", "-a-"]
    assert families["---"] == ["big", "bug"]
    assert families["-a-"] == ["bad", "bag", "bat"]


def test_partition_covers_every_candidate_once():
    words = ["abba", "baca", "cccc", "aaaa", "acca", "dada"]
    partition = partition_candidates(words_to_chars(words), "a")
    assert partition.sizes.sum() == len(words)
    assert len(partition.members) == len(words)
    assert partition.n_families == len(set(describe_partition(words, "a")))


def test_first_occurrence_tiebreak_example():
    # "a--a" and "-a-a": same size, two placeholders, two hits each
    pattern, keep = choose_family(words_to_chars(["abba", "baca"]), "a")
    assert pattern == "-a-a"
    assert keep.tolist() == [1]

    pattern, keep = choose_family(words_to_chars(["baca", "abba"]), "a")
    assert pattern == "-a-a"
    assert keep.tolist() == [0]


def test_exact_ties_keep_lexicographically_first_pattern():
    # "a--a" and "a-a-" tie on size, placeholders, hits and first index
    pattern, keep = choose_family(words_to_chars(["abab", "abba"]), "a")
    assert pattern == "a--a"
    assert keep.tolist() == [1]

    pattern, keep = choose_family(words_to_chars(["abba", "abab"]), "a")
    assert pattern == "a--a"
    assert keep.tolist() == [0]


def test_choose_family_prefers_size():
    words = ["bad", "bag", "bat", "big", "bug"]
    pattern, keep = choose_family(words_to_chars(words), "a")
    assert pattern == "-a-"
    assert [words[i] for i in keep] == ["bad", "bag", "bat"]


def test_choose_family_prefers_miss_on_size_tie():
    pattern, keep = choose_family(words_to_chars(["bag", "bat"]), "t")
    assert pattern == "---"
    assert keep.tolist() == [0]
