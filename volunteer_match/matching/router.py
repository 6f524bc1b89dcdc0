"""
Match API routes.

GET /matches/{volunteer_id} returns every event ranked for the volunteer.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from volunteer_match.core.config import get_settings
from volunteer_match.db.base import get_db
from volunteer_match.matching.config import MatchingConfig
from volunteer_match.matching.engine import MatchingEngine
from volunteer_match.matching.models import EventMatch
from volunteer_match.matching.store import BaseMatchStore, SqlMatchStore

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/matches", tags=["matches"])


def get_match_store(db: AsyncSession = Depends(get_db)) -> BaseMatchStore:
    """Store used by the match routes; overridden in tests."""
    return SqlMatchStore(db)


def get_matching_config() -> MatchingConfig:
    """Matching configuration derived from the application settings."""
    return MatchingConfig(debug=settings.DEBUG)


@router.get(
    "/{volunteer_id}",
    response_model=list[EventMatch],
    response_model_by_alias=True,
)
async def get_matches(
    volunteer_id: str,
    store: BaseMatchStore = Depends(get_match_store),
    config: MatchingConfig = Depends(get_matching_config),
):
    """
    Rank all events for a volunteer, best match first.

    The id is the volunteer's user account id. Events with the same
    matchScore are ordered by title.

    Errors:
        400: invalid id
        404: no volunteer profile for the id
        500: store failure
    """
    engine = MatchingEngine(store, config)
    return await engine.match_volunteer(volunteer_id)
