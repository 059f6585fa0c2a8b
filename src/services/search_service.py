# src/services/search_service.py
# Responsibility: Orchestrates attendee search (Roster -> Text search -> Status filter -> Attribute filter).

from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence

from src.config.settings import settings
from src.services.attendee_filters import (
    StatusFilter,
    filter_by_attributes,
    filter_by_status,
    unique_attributes,
)
from src.services.field_policy import SearchConfig
from src.services.roster import load_roster
from src.services.search_filter import SearchFilter


class UnknownFieldError(ValueError):
    """Raised when a caller asks to search a field that is not searchable."""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)
        super().__init__(f"Unknown search field(s): {', '.join(self.fields)}")


class SearchService:
    """
    Main service class for attendee lookups.
    Integrates the roster, the text search engine and the dashboard filters.
    """

    def __init__(self, roster_path: Optional[str] = None):
        self.roster_path = roster_path or settings.ROSTER_FILE_PATH
        self.phonetic_fields = frozenset(settings.SEARCH.PHONETIC_FIELDS)
        self.searchable_fields = list(settings.SEARCH.SEARCHABLE_FIELDS)

    def build_config(self, fields: Optional[Sequence[str]] = None) -> SearchConfig:
        """
        Builds the search configuration for one request.
        Falls back to the configured default fields when none are requested.
        """
        requested = list(fields) if fields else list(settings.SEARCH.DEFAULT_FIELDS)

        unknown = [f for f in requested if f not in self.searchable_fields]
        if unknown:
            raise UnknownFieldError(unknown)

        return SearchConfig(
            fields=tuple(requested),
            normalize=settings.SEARCH.NORMALIZE,
            phonetic_fields=self.phonetic_fields,
        )

    def search(
        self,
        query: str,
        fields: Optional[Sequence[str]] = None,
        status: StatusFilter = StatusFilter.ALL,
        attributes: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        """
        Executes an attendee search with full pipeline processing.
        """
        config = self.build_config(fields)

        # 1. Roster (read per call, never cached)
        attendees = load_roster(self.roster_path)

        # 2. Text search
        matched = SearchFilter.filter(attendees, query, config)

        # 3. Check-in status
        matched = filter_by_status(matched, status)

        # 4. Attributes (AND)
        matched = filter_by_attributes(matched, attributes or [])

        return {
            "attendees": matched,
            "attributes": unique_attributes(attendees),
        }

    def list_fields(self) -> List[str]:
        return list(self.searchable_fields)


@lru_cache()
def get_search_service() -> SearchService:
    """Dependency injection provider for SearchService."""
    return SearchService()
