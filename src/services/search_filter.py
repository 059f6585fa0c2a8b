# src/services/search_filter.py
# Responsibility: Filters a sequence of records by a typed query across several fields (OR search).

from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from src.services.field_policy import DEFAULT_SEARCH_CONFIG, FieldKind, SearchConfig
from src.services.query_normalizer import CharacterNormalizer
from src.services.transliterator import RomajiTransliterator

T = TypeVar("T")

Accessor = Callable[[Any, str], Any]


def default_accessor(record: Any, field: str) -> Any:
    """
    Reads `field` from a mapping or an attribute-style object (e.g. a pydantic model).
    """
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


class SearchFilter:
    """
    Partial-match search over records, tolerant of script differences.

    - Every configured field is tried; any match keeps the record (OR).
    - Phonetic fields also accept the romaji query rendered as hiragana.
    - Records keep their input order and appear at most once.
    """

    @staticmethod
    def filter(
        records: Sequence[T],
        query: str,
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        accessor: Optional[Accessor] = None,
    ) -> List[T]:
        """
        Returns the records matching `query`.

        Args:
            records (Sequence): Records to search. Never mutated.
            query (str): Raw user query (untrimmed).
            config (SearchConfig): Fields to search and how to compare them.
            accessor (Callable): Reads a field value from a record. Defaults to
                mapping lookup / attribute lookup.

        Returns:
            List: Matching records in their original order. An empty query returns
            every record.
        """
        # Empty query means no filtering at all
        if not query or not query.strip():
            return list(records)

        read = accessor or default_accessor

        if config.normalize:
            normalized_query = CharacterNormalizer.normalize(query)
            phonetic_query = RomajiTransliterator.to_phonetic_form(normalized_query)
        else:
            normalized_query = query.lower()
            phonetic_query = normalized_query

        plan = config.field_plan()

        def matches(record: T) -> bool:
            for field, kind in plan:
                if kind is FieldKind.PHONETIC:
                    candidates = (normalized_query, phonetic_query)
                else:
                    candidates = (normalized_query,)
                if SearchFilter._field_matches(read(record, field), candidates, config.normalize):
                    return True
            return False

        return [record for record in records if matches(record)]

    @staticmethod
    def _field_matches(value: Any, candidates: Sequence[str], normalize: bool) -> bool:
        """
        Checks one field value (a string or a list of strings) against the query variants.
        None and non-string values never match.
        """
        if value is None:
            return False

        if isinstance(value, (list, tuple)):
            return any(
                SearchFilter._text_matches(element, candidates, normalize)
                for element in value
                if isinstance(element, str)
            )

        if isinstance(value, str):
            return SearchFilter._text_matches(value, candidates, normalize)

        return False

    @staticmethod
    def _text_matches(text: str, candidates: Sequence[str], normalize: bool) -> bool:
        if not text:
            return False
        haystack = CharacterNormalizer.normalize(text) if normalize else text.lower()
        return any(needle in haystack for needle in candidates)
