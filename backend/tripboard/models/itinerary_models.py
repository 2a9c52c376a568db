# backend/tripboard/models/itinerary_models.py

from pydantic import Field, model_validator
from typing import Optional

from tripboard.models.common import CamelModel


# fields that may be omitted from an update but never set to null
NON_NULLABLE_FIELDS = ("day", "time", "name", "purpose", "latitude", "longitude")

# largest value a sqlite INTEGER column holds
MAX_DAY = 2**63 - 1


# -------------------------
# Create stop
# -------------------------
class StopCreate(CamelModel):
    day: int = Field(1, ge=1, le=MAX_DAY)
    time: str = Field(..., min_length=1)      # "HH:MM", free-form
    name: str = Field(..., min_length=1)
    purpose: str = Field(..., min_length=1)   # category label: food, museum...
    notes: Optional[str] = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


# -------------------------
# Partial update
# -------------------------
class StopUpdate(CamelModel):
    day: Optional[int] = Field(None, ge=1, le=MAX_DAY)
    time: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    purpose: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

    @model_validator(mode="after")
    def _reject_null_required(self):
        for field in NON_NULLABLE_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


# -------------------------
# Response
# -------------------------
class StopOut(CamelModel):
    id: str
    day: int
    time: str
    name: str
    purpose: str
    notes: Optional[str] = None
    latitude: float
    longitude: float
    created_at: str
    updated_at: str
