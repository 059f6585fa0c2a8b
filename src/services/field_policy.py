# src/services/field_policy.py
# Responsibility: Declares which record fields are searched and which of them hold phonetic (kana) readings.

from enum import Enum
from typing import FrozenSet, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SEARCH_FIELDS: Tuple[str, ...] = ("name", "nameKana", "affiliation", "affiliationKana")
DEFAULT_PHONETIC_FIELDS: FrozenSet[str] = frozenset({"nameKana", "affiliationKana"})


class FieldKind(str, Enum):
    """How a field is compared against the query."""

    # Normalized query only
    DIRECT = "direct"
    # Normalized query or its romaji -> hiragana rendering
    PHONETIC = "phonetic"


class SearchConfig(BaseModel):
    """
    Per-invocation search configuration.

    The phonetic/direct split is fixed here, by field name, and never inferred
    from the values being searched.
    """

    model_config = ConfigDict(frozen=True)

    fields: Tuple[str, ...] = DEFAULT_SEARCH_FIELDS
    normalize: bool = True
    phonetic_fields: FrozenSet[str] = Field(default=DEFAULT_PHONETIC_FIELDS)

    def kind_of(self, field: str) -> FieldKind:
        if field in self.phonetic_fields:
            return FieldKind.PHONETIC
        return FieldKind.DIRECT

    def field_plan(self) -> List[Tuple[str, FieldKind]]:
        """Configured fields in order, each paired with its kind."""
        return [(field, self.kind_of(field)) for field in self.fields]


DEFAULT_SEARCH_CONFIG = SearchConfig()
