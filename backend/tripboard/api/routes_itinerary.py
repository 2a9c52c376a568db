# backend/tripboard/api/routes_itinerary.py

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from tripboard.api.deps import get_store, guard
from tripboard.core.logger import get_logger
from tripboard.db.sqlite_store import TripStore
from tripboard.models.itinerary_models import MAX_DAY, StopCreate, StopUpdate, StopOut

router = APIRouter(prefix="/api/itinerary", tags=["itinerary"])
logger = get_logger("itinerary")


# --------------------------
# List stops (public)
# --------------------------
@router.get("", response_model=List[StopOut], dependencies=[Depends(guard("itinerary", "list"))])
def list_stops(
    day: Optional[int] = Query(None, ge=1, le=MAX_DAY),
    store: TripStore = Depends(get_store),
):
    return store.list_stops(day)


# --------------------------
# Single stop (public)
# --------------------------
@router.get("/{stop_id}", response_model=StopOut, dependencies=[Depends(guard("itinerary", "get"))])
def get_stop(stop_id: str, store: TripStore = Depends(get_store)):
    return store.get_stop(stop_id)


# --------------------------
# Create stop
# --------------------------
@router.post(
    "",
    response_model=StopOut,
    status_code=201,
    dependencies=[Depends(guard("itinerary", "create"))],
)
def create_stop(data: StopCreate, store: TripStore = Depends(get_store)):
    stop = store.create_stop(data.model_dump())
    logger.info("Created stop %s (day %s, %s)", stop["id"], stop["day"], stop["name"])
    return stop


# --------------------------
# Update stop (partial; PUT kept for older clients)
# --------------------------
@router.put("/{stop_id}", response_model=StopOut, dependencies=[Depends(guard("itinerary", "update"))])
@router.patch("/{stop_id}", response_model=StopOut, dependencies=[Depends(guard("itinerary", "update"))])
def update_stop(stop_id: str, data: StopUpdate, store: TripStore = Depends(get_store)):
    changes = data.changes()
    stop = store.update_stop(stop_id, changes)
    logger.info("Updated stop %s: %s", stop_id, sorted(changes))
    return stop


# --------------------------
# Delete stop
# --------------------------
@router.delete("/{stop_id}", response_model=StopOut, dependencies=[Depends(guard("itinerary", "delete"))])
def delete_stop(stop_id: str, store: TripStore = Depends(get_store)):
    stop = store.delete_stop(stop_id)
    logger.info("Deleted stop %s", stop_id)
    return stop
