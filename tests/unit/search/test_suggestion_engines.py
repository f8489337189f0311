"""Unit tests for completions, category hints and "did you mean" alternatives."""

import pytest

from maintenance_search.search.suggestions import alternatives, category_hints, suggest


@pytest.mark.unit
class TestSuggest:
    def test_includes_label_and_path_segment(self, maintenance_index):
        result = suggest(maintenance_index, "ポン", 5)

        assert "ポンプ点検" in result
        assert "冷却水ポンプ" in result
        assert len(result) <= 5

    def test_prefix_matches_rank_first_then_shorter(self, maintenance_index):
        assert suggest(maintenance_index, "ポン", 5) == ["ポンプ", "ポンプ点検", "冷却水ポンプ"]

    def test_mixed_case_candidates(self, english_index):
        assert suggest(english_index, "pum") == ["pump", "Pump inspection", "Cooling water pump"]

    def test_query_itself_is_not_suggested(self, english_index):
        assert suggest(english_index, "PUMP") == ["Pump inspection", "Cooling water pump"]

    def test_attribute_values(self, maintenance_index):
        assert suggest(maintenance_index, "abc") == ["ABC-123", "abc-123"]

    def test_respects_max(self, english_index):
        assert suggest(english_index, "pum", 1) == ["pump"]

    @pytest.mark.parametrize("query", ["", "p", "ポ"])
    def test_short_query_yields_nothing(self, maintenance_index, english_index, query):
        assert suggest(maintenance_index, query) == []
        assert suggest(english_index, query) == []

    def test_no_candidates(self, english_index):
        assert suggest(english_index, "zzz") == []


@pytest.mark.unit
class TestCategoryHints:
    def test_first_distinct_long_segments(self, english_index):
        assert category_hints(english_index) == ["Plant", "Cooling", "Cooling water pump"]
        assert category_hints(english_index, 2) == ["Plant", "Cooling"]

    def test_two_character_segments_skipped(self, maintenance_index):
        assert category_hints(maintenance_index) == ["ポンプ", "冷却水ポンプ", "モーター"]


@pytest.mark.unit
class TestAlternatives:
    def test_close_keywords_and_hints(self, english_index):
        assert alternatives(english_index, "pumq") == ["pump", "Plant", "Cooling", "Cooling water pump"]

    def test_respects_max(self, english_index):
        assert alternatives(english_index, "pumq", 2) == ["pump", "Plant"]

    def test_hints_without_close_keywords(self, english_index):
        assert alternatives(english_index, "zzzzzzzz") == ["Plant", "Cooling", "Cooling water pump"]

    def test_sorted_by_length(self, english_index):
        result = alternatives(english_index, "valvo", 10)
        assert result == sorted(result, key=len)
        assert "valve" in result

    @pytest.mark.parametrize("query", ["", "x"])
    def test_short_query_yields_nothing(self, english_index, query):
        assert alternatives(english_index, query) == []

    def test_empty_index(self):
        assert alternatives([], "pump") == []
