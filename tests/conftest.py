"""Shared test fixtures and configuration."""

import os

import pytest

from maintenance_search.adapters.storage import InMemoryKeyValueStore
from maintenance_search.search.indexer import build_search_index


# Environment that pins every setting the engine reads
TEST_ENV = {
    "MAINTENANCE_SEARCH_DEBOUNCE_MS": "300",
    "MAINTENANCE_SEARCH_MIN_QUERY_LENGTH": "2",
    "MAINTENANCE_SEARCH_MAX_RESULTS": "1000",
    "MAINTENANCE_SEARCH_MAX_SUGGESTIONS": "8",
    "MAINTENANCE_SEARCH_MAX_ALTERNATIVES": "5",
    "MAINTENANCE_SEARCH_MAX_HISTORY_ITEMS": "10",
    "MAINTENANCE_SEARCH_LOG_LEVEL": "info",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset engine settings for each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def maintenance_records():
    """Grid rows as the maintenance grid produces them."""
    return [
        {
            "id": "1",
            "task": "ポンプ点検",
            "hierarchyPath": "設備 > ポンプ > 冷却水ポンプ",
            "bomCode": "P001",
            "cycle": "月次",
            "specifications": [
                {"key": "型式", "value": "ABC-123", "order": 0},
                {"key": "容量", "value": "100L/min", "order": 1},
            ],
            "results": {},
        },
        {
            "id": "2",
            "task": "モーター点検",
            "hierarchyPath": "設備 > モーター > 駆動モーター",
            "bomCode": "M001",
            "cycle": "年次",
            "specifications": [
                {"key": "型式", "value": "XYZ-456", "order": 0},
                {"key": "出力", "value": "5kW", "order": 1},
            ],
            "results": {},
        },
        {
            "id": "3",
            "task": "",
            "hierarchyPath": "設備 > バルブ > 制御バルブ",
            "bomCode": "V001",
            "cycle": "月次",
            "specifications": [],
            "results": {},
        },
    ]


@pytest.fixture
def four_records():
    return [
        {"id": 1, "task": "ポンプ点検", "cycle": "月次"},
        {"id": 2, "task": "モーター点検", "cycle": "年次"},
        {"id": 3, "task": "バルブ点検", "cycle": "月次"},
        {"id": 4, "task": "センサー点検", "cycle": "週次"},
    ]


@pytest.fixture
def english_records():
    return [
        {
            "id": "e1",
            "task": "Pump inspection",
            "hierarchyPath": "Plant > Cooling > Cooling water pump",
            "bomCode": "P-100",
            "cycle": "monthly",
            "specifications": [{"key": "model", "value": "ABC-123"}],
        },
        {
            "id": "e2",
            "task": "Motor overhaul",
            "hierarchyPath": "Plant > Drive > Main motor",
            "bomCode": "M-200",
            "cycle": "yearly",
            "specifications": [{"key": "output", "value": "5kW"}],
        },
        {
            "id": "e3",
            "task": "Valve check",
            "hierarchyPath": "Plant > Cooling > Control valve",
            "bomCode": "V-300",
            "cycle": "monthly",
            "specifications": [{"key": "pump", "value": "none"}],
        },
    ]


@pytest.fixture
def maintenance_index(maintenance_records):
    return build_search_index(maintenance_records)


@pytest.fixture
def english_index(english_records):
    return build_search_index(english_records)


@pytest.fixture
def memory_store():
    return InMemoryKeyValueStore()
