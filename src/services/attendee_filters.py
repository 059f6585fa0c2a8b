# src/services/attendee_filters.py
# Responsibility: Narrows text-search results by check-in status and attendee attributes.

from enum import Enum
from typing import Iterable, List, Sequence

from src.services.roster import Attendee

GENERAL_ATTRIBUTE = "general"

# Chip order of the check-in dashboard
ATTRIBUTE_DISPLAY_ORDER = ("speaker", "sponsor", "staff", "press", "vip", GENERAL_ATTRIBUTE)


class StatusFilter(str, Enum):
    ALL = "all"
    CHECKED_IN = "checked-in"
    NOT_CHECKED_IN = "not-checked-in"


def filter_by_status(attendees: Sequence[Attendee], status: StatusFilter) -> List[Attendee]:
    status = StatusFilter(status)
    if status is StatusFilter.ALL:
        return list(attendees)
    wanted = status is StatusFilter.CHECKED_IN
    return [a for a in attendees if a.checkedIn == wanted]


def filter_by_attributes(attendees: Sequence[Attendee], selected: Iterable[str]) -> List[Attendee]:
    """
    Keeps attendees carrying ALL selected attributes (case-insensitive).

    Attendees without attributes count as "General": they are kept only when
    "general" is the one and only selected attribute.
    """
    wanted = {label.lower() for label in selected}
    if not wanted:
        return list(attendees)

    only_general = wanted == {GENERAL_ATTRIBUTE}

    result = []
    for attendee in attendees:
        labels = attendee.attributes or []
        if not labels:
            if only_general:
                result.append(attendee)
            continue
        owned = {label.lower() for label in labels}
        if wanted <= owned:
            result.append(attendee)
    return result


def unique_attributes(attendees: Iterable[Attendee]) -> List[str]:
    """
    Distinct attribute labels for the filter chips.

    Known labels follow ATTRIBUTE_DISPLAY_ORDER (case-insensitive); unknown labels go
    last. Labels of equal rank keep their first-seen order.
    """
    seen = {}
    for attendee in attendees:
        for label in attendee.attributes or []:
            seen.setdefault(label, None)
    return sorted(seen, key=_display_rank)


def _display_rank(label: str) -> int:
    try:
        return ATTRIBUTE_DISPLAY_ORDER.index(label.lower())
    except ValueError:
        return len(ATTRIBUTE_DISPLAY_ORDER)
