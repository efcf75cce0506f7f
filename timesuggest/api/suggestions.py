"""Suggestion endpoints for time autocomplete.

Provides the endpoint UI clients call as the user types a fuzzy time
phrase.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, Field

from timesuggest.config import settings
from timesuggest.suggestions.schemas import TimeSuggestion
from timesuggest.suggestions.service import TimeSuggester

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


class SuggestionsResponse(BaseModel):
    """Response for the suggestions endpoint."""

    query: str = Field(description="Input phrase as received")
    suggestions: list[TimeSuggestion] = Field(
        default_factory=list,
        description="Candidate instants in rule order",
    )


def get_suggester(request: Request) -> TimeSuggester:
    """Get TimeSuggester from app state."""
    if not hasattr(request.app.state, "suggester"):
        raise HTTPException(status_code=500, detail="TimeSuggester not initialized")
    return request.app.state.suggester


@router.get("", response_model=SuggestionsResponse)
async def get_suggestions(
    q: str = Query(
        default="",
        max_length=settings.max_query_length,
        description="Fuzzy time phrase, e.g. 'next tue'",
    ),
    now: datetime | None = Query(
        default=None,
        description="Reference instant (ISO 8601). Defaults to the server clock.",
    ),
    suggester: TimeSuggester = Depends(get_suggester),
) -> SuggestionsResponse:
    """Suggest future instants the phrase might refer to.

    An unmatched phrase is not an error; it returns an empty list.
    """
    if now is not None:
        # instants are naive local times
        now = now.replace(tzinfo=None)
    return SuggestionsResponse(query=q, suggestions=suggester.suggest(q, now=now))
