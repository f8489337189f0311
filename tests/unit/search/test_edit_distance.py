"""Unit tests for edit distance and vocabulary matching."""

import pytest

from maintenance_search.search.fuzzy import levenshtein_distance, within_distance


@pytest.mark.unit
class TestLevenshteinDistance:
    """Tests for levenshtein_distance function."""

    def test_identical_strings(self):
        assert levenshtein_distance("a", "a") == 0
        assert levenshtein_distance("ポンプ", "ポンプ") == 0

    def test_empty_strings(self):
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("abc", "") == 3
        assert levenshtein_distance("", "abc") == 3

    def test_single_edits(self):
        assert levenshtein_distance("cat", "cats") == 1
        assert levenshtein_distance("cats", "cat") == 1
        assert levenshtein_distance("cat", "bat") == 1

    def test_multiple_edits(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_symmetric(self):
        assert levenshtein_distance("motor", "meter") == levenshtein_distance("meter", "motor")

    def test_case_sensitive(self):
        assert levenshtein_distance("Pump", "pump") == 1

    def test_multibyte_characters_count_once(self):
        assert levenshtein_distance("ポンプ", "ポンポ") == 1

    def test_early_exit_caps_result(self):
        assert levenshtein_distance("abc", "xyzxyz", max_distance=2) == 3
        assert levenshtein_distance("abcdef", "uvwxyz", max_distance=1) == 2

    def test_bound_does_not_change_small_distances(self):
        assert levenshtein_distance("pump", "pumq", max_distance=2) == 1


@pytest.mark.unit
class TestWithinDistance:
    def test_keeps_vocabulary_order(self):
        vocabulary = ["pumps", "motor", "pump", "dump"]
        assert within_distance("pump", vocabulary, 1) == ["pumps", "pump", "dump"]

    def test_length_gap_excludes(self):
        assert within_distance("pump", ["pumping"], 2) == []

    def test_zero_distance_is_exact_match(self):
        assert within_distance("valve", ["valves", "valve"], 0) == ["valve"]
