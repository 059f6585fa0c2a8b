# src/routers/search.py
# Responsibility: Handles attendee search API endpoints. Validates input and formats output.

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from src.services.attendee_filters import StatusFilter
from src.services.roster import Attendee
from src.services.search_service import SearchService, UnknownFieldError, get_search_service

router = APIRouter(
    prefix="/attendees",
    tags=["Search"]
)

# --- Pydantic Models ---
class SearchResponse(BaseModel):
    query: str
    count: int
    attendees: List[Attendee]
    attributes: List[str] = []

class FieldsResponse(BaseModel):
    fields: List[str]

# --- Endpoints ---
@router.get("/search/fields", response_model=FieldsResponse)
def list_fields_endpoint(
    service: SearchService = Depends(get_search_service)
):
    """
    Lists the field names accepted by the `fields` search parameter.
    """
    return FieldsResponse(fields=service.list_fields())

@router.get("/search", response_model=SearchResponse)
def search_endpoint(
    q: str = Query("", description="Search query (kanji, kana, Latin or romaji)"),
    fields: Optional[List[str]] = Query(None, description="Fields to search (repeatable)"),
    status: StatusFilter = Query(StatusFilter.ALL, description="Check-in status filter"),
    attributes: Optional[List[str]] = Query(None, description="Required attributes (repeatable, AND)"),
    service: SearchService = Depends(get_search_service)
):
    """
    Attendee search endpoint.
    An empty query returns the whole roster (subject to the status/attribute filters).
    """
    try:
        service_response = service.search(q, fields=fields, status=status, attributes=attributes)
    except UnknownFieldError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        print(f"[Search] Search failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error during search")

    matched = service_response["attendees"]

    return SearchResponse(
        query=q,
        count=len(matched),
        attendees=matched,
        attributes=service_response.get("attributes", [])
    )
