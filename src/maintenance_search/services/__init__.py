"""Scheduling services used by the search session."""

from maintenance_search.services.debounce import DebounceCoordinator


__all__ = ["DebounceCoordinator"]
