# src/services/roster.py
# Responsibility: Loads the attendee roster from a JSON file into validated Attendee models.

import json
import os
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

AttributeLabel = Annotated[str, Field(min_length=1, max_length=50)]


class Attendee(BaseModel):
    """
    One conference attendee as consumed by search.
    Field names follow the roster keys so they can be used directly as search fields.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    nameKana: Optional[str] = None
    affiliation: Optional[str] = None
    affiliationKana: Optional[str] = None
    attributes: Optional[List[AttributeLabel]] = Field(default=None, max_length=5)
    items: List[str] = []
    checkedIn: bool = False
    checkedInAt: Optional[str] = None
    staffName: Optional[str] = None
    memo: Optional[str] = None
    novelties: Optional[str] = None

    def novelty_items(self) -> List[str]:
        """Splits `novelties` on "," or "、" into trimmed, non-empty item names."""
        if not self.novelties:
            return []
        parts = self.novelties.replace("、", ",").split(",")
        return [part.strip() for part in parts if part.strip()]


def load_roster(path: str) -> List[Attendee]:
    """
    Loads attendees from a JSON array file.

    Returns an empty list if the file is missing or unreadable, so a bad roster
    never takes the service down. Entries failing validation are skipped.

    Args:
        path (str): Path to the roster JSON file.

    Returns:
        List[Attendee]: Valid attendees in file order.
    """
    if not os.path.exists(path):
        print(f"[Roster] WARNING: Roster file not found: {path}")
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw: Any = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"[Roster] ERROR: Failed to load roster: {e}")
        return []

    if not isinstance(raw, list):
        print(f"[Roster] ERROR: Roster must be a JSON array, got {type(raw).__name__}")
        return []

    attendees = []
    for index, entry in enumerate(raw):
        try:
            attendees.append(Attendee.model_validate(entry))
        except ValidationError as e:
            print(f"[Roster] ERROR: Skipping entry {index}: {e.error_count()} validation error(s)")
    return attendees
