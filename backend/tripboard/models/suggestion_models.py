# backend/tripboard/models/suggestion_models.py

from pydantic import BaseModel, Field
from typing import Optional

from tripboard.core.validation import SuggestionStatus
from tripboard.models.common import CamelModel


class SuggestionCreate(CamelModel):
    # any "status" sent by the client is ignored; new suggestions start Pending
    user_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)


class StatusUpdate(BaseModel):
    # left as raw text; normalize_status resolves it
    status: Optional[str] = None


class SuggestionOut(CamelModel):
    id: str
    user_id: str
    title: str
    text: str
    status: SuggestionStatus
    created_at: str
    updated_at: str
