# backend/tripboard/core/policy.py

from enum import Enum
from typing import Dict, Optional, Tuple

from tripboard.core.config_loader import Settings
from tripboard.core.security import is_admin, is_admin_or_trusted


class Requirement(str, Enum):
    PUBLIC = "public"
    ADMIN_OR_TRUSTED = "admin or trusted"
    ADMIN = "admin"


# strictness order, used to compare rules
RANK = {
    Requirement.PUBLIC: 0,
    Requirement.ADMIN_OR_TRUSTED: 1,
    Requirement.ADMIN: 2,
}


# ---------------------------------------------------------------------------
# (resource, verb) -> required check
# ---------------------------------------------------------------------------
ENDPOINT_POLICY: Dict[Tuple[str, str], Requirement] = {
    ("itinerary", "list"): Requirement.PUBLIC,
    ("itinerary", "get"): Requirement.PUBLIC,
    ("itinerary", "create"): Requirement.ADMIN_OR_TRUSTED,
    ("itinerary", "update"): Requirement.ADMIN_OR_TRUSTED,
    ("itinerary", "delete"): Requirement.ADMIN,
    ("suggestion", "create"): Requirement.PUBLIC,
    ("suggestion", "list"): Requirement.ADMIN,
    ("suggestion", "update_status"): Requirement.ADMIN_OR_TRUSTED,
}


def requirement_for(resource: str, verb: str) -> Requirement:
    try:
        return ENDPOINT_POLICY[(resource, verb)]
    except KeyError:
        raise KeyError(f"no authorization rule for {resource}.{verb}") from None


def is_allowed(requirement: Requirement, presented: Optional[str], settings: Settings) -> bool:
    if requirement is Requirement.PUBLIC:
        return True
    if requirement is Requirement.ADMIN:
        return is_admin(presented, settings)
    return is_admin_or_trusted(presented, settings)
