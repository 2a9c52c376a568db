# backend/tripboard/api/routes_suggestions.py

from fastapi import APIRouter, Depends
from typing import List, Optional

from tripboard.api.deps import get_store, guard
from tripboard.core.logger import get_logger
from tripboard.core.validation import normalize_status
from tripboard.db.sqlite_store import TripStore
from tripboard.models.suggestion_models import SuggestionCreate, StatusUpdate, SuggestionOut

router = APIRouter(prefix="/api/suggestions", tags=["suggestions"])
logger = get_logger("suggestions")


# --------------------------
# Submit suggestion (public)
# --------------------------
@router.post(
    "",
    response_model=SuggestionOut,
    status_code=201,
    dependencies=[Depends(guard("suggestion", "create"))],
)
def create_suggestion(data: SuggestionCreate, store: TripStore = Depends(get_store)):
    suggestion = store.create_suggestion(data.user_id, data.title, data.text)
    logger.info("New suggestion %s from user %s", suggestion["id"], data.user_id)
    return suggestion


# --------------------------
# Inbox
# --------------------------
@router.get("", response_model=List[SuggestionOut], dependencies=[Depends(guard("suggestion", "list"))])
def list_suggestions(status: Optional[str] = None, store: TripStore = Depends(get_store)):
    # blank filter lists everything
    status_filter = normalize_status(status) if status and status.strip() else None
    return store.list_suggestions(status_filter)


# --------------------------
# Moderate
# --------------------------
@router.patch(
    "/{suggestion_id}",
    response_model=SuggestionOut,
    dependencies=[Depends(guard("suggestion", "update_status"))],
)
def update_suggestion_status(
    suggestion_id: str,
    data: StatusUpdate,
    store: TripStore = Depends(get_store),
):
    status = normalize_status(data.status)
    suggestion = store.update_suggestion_status(suggestion_id, status)
    logger.info("Suggestion %s set to %s", suggestion_id, status.value)
    return suggestion
