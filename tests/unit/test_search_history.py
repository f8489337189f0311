"""Unit tests for search history."""

import orjson
import pytest

from maintenance_search.adapters.storage import InMemoryKeyValueStore
from maintenance_search.service_layer.history import SearchHistory


KEY = "hoshitori_search_history"


@pytest.mark.unit
class TestSearchHistory:
    def test_newest_first(self, memory_store):
        history = SearchHistory(memory_store)
        history.add("pump")
        history.add("valve")

        assert history.items == ["valve", "pump"]
        assert orjson.loads(memory_store.get(KEY)) == ["valve", "pump"]

    def test_repeat_moves_to_front(self, memory_store):
        history = SearchHistory(memory_store)
        for term in ("pump", "valve", "pump"):
            history.add(term)

        assert history.items == ["pump", "valve"]

    def test_bounded(self, memory_store):
        history = SearchHistory(memory_store, max_items=3)
        for term in ("aa", "bb", "cc", "dd"):
            history.add(term)

        assert history.items == ["dd", "cc", "bb"]

    def test_default_bound_is_ten(self, memory_store):
        history = SearchHistory(memory_store)
        for number in range(15):
            history.add(f"term{number}")

        assert len(history.items) == 10
        assert history.items[0] == "term14"

    @pytest.mark.parametrize("term", ["", "   ", "p"])
    def test_ignores_blank_and_short_terms(self, memory_store, term):
        history = SearchHistory(memory_store)

        assert history.add(term) is False
        assert history.items == []
        assert memory_store.get(KEY) is None

    def test_loads_existing(self):
        store = InMemoryKeyValueStore({KEY: '["pump", "valve"]'})
        assert SearchHistory(store).items == ["pump", "valve"]

    def test_loads_truncated_to_bound(self):
        store = InMemoryKeyValueStore({KEY: orjson.dumps([f"t{n}" for n in range(5)]).decode()})
        assert SearchHistory(store, max_items=2).items == ["t0", "t1"]

    @pytest.mark.parametrize("raw", ["not json", '{"a": 1}', "[1, 2]"])
    def test_malformed_payload_loads_empty(self, raw):
        assert SearchHistory(InMemoryKeyValueStore({KEY: raw})).items == []

    def test_clear(self, memory_store):
        history = SearchHistory(memory_store)
        history.add("pump")
        history.clear()

        assert history.items == []
        assert orjson.loads(memory_store.get(KEY)) == []

    def test_interleaved_writers_share_one_history(self, memory_store):
        first = SearchHistory(memory_store)
        second = SearchHistory(memory_store)

        first.add("pump")
        second.add("valve")
        first.add("motor")

        assert SearchHistory(memory_store).items == ["motor", "valve", "pump"]
        assert second.items == ["motor", "valve", "pump"]

    def test_clear_is_seen_by_other_writers(self, memory_store):
        first = SearchHistory(memory_store)
        second = SearchHistory(memory_store)
        first.add("pump")
        assert second.items == ["pump"]

        first.clear()
        second.add("valve")

        assert first.items == ["valve"]
