"""Centralized configuration for maintenance-search using Pydantic Settings."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maintenance_search.search.fields import RecordFieldMap


class Settings(BaseSettings):
    """Strictly typed engine configuration loaded from environment variables.

    Every variable is prefixed with ``MAINTENANCE_SEARCH_`` (for example
    ``MAINTENANCE_SEARCH_DEBOUNCE_MS=150``).
    """

    model_config = SettingsConfigDict(
        env_prefix="MAINTENANCE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Query handling
    debounce_ms: int = Field(default=300, ge=0, description="Idle time before a typed query is searched")
    min_query_length: int = Field(default=2, ge=1, description="Shortest query that triggers scoring")
    max_results: int = Field(default=1000, ge=1, description="Maximum ranked search results")
    max_suggestions: int = Field(default=8, ge=1, description="Maximum search-as-you-type completions")
    max_alternatives: int = Field(default=5, ge=1, description="Maximum 'did you mean' alternatives")
    max_edit_distance: int = Field(default=2, ge=0, description="Edit distance allowed for alternatives")
    category_hint_limit: int = Field(default=3, ge=0, description="Hierarchy segments offered as hints")

    # Persistence
    max_history_items: int = Field(default=10, ge=1, description="Search history entries kept")
    saved_filters_key: str = Field(default="hoshitori_saved_filters", min_length=1)
    search_history_key: str = Field(default="hoshitori_search_history", min_length=1)

    # Record field names
    label_field: str = Field(default="task", min_length=1)
    path_field: str = Field(default="hierarchyPath", min_length=1)
    code_field: str = Field(default="bomCode", min_length=1)
    category_field: str = Field(default="cycle", min_length=1)
    attributes_field: str = Field(default="specifications", min_length=1)
    path_separator: str = Field(default=" > ", description="Separator between hierarchy path segments")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @model_validator(mode="after")
    def _check_keys(self) -> "Settings":
        if not self.path_separator:
            raise ValueError("PATH_SEPARATOR must not be empty")
        if self.saved_filters_key == self.search_history_key:
            raise ValueError("SAVED_FILTERS_KEY and SEARCH_HISTORY_KEY must differ")
        return self

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    def field_map(self) -> RecordFieldMap:
        """Build the record field map the index reads."""
        return RecordFieldMap(
            label=self.label_field,
            path=self.path_field,
            code=self.code_field,
            category=self.category_field,
            attributes=self.attributes_field,
            path_separator=self.path_separator,
        )
