# backend/tripboard/core/security.py

import hmac
from enum import Enum
from typing import Optional

from tripboard.core.config_loader import Settings
from tripboard.core.errors import ConfigurationMissing
from tripboard.core.logger import get_logger


logger = get_logger("security")


class Role(str, Enum):
    ADMIN = "admin"
    TRUSTED = "trusted"
    NONE = "none"


# ---------------------------------------------------------------------------
# SECRET COMPARISON
# ---------------------------------------------------------------------------
def _reference_secret(settings: Settings, setting: str) -> str:
    value = getattr(settings, setting)
    if not value:
        raise ConfigurationMissing(setting)
    return value


def _matches(presented: Optional[str], settings: Settings, setting: str) -> bool:
    """
    Exact match of the presented header value against one configured secret.

    No trimming or case folding. An unset secret fails closed.
    """
    try:
        reference = _reference_secret(settings, setting)
    except ConfigurationMissing as exc:
        logger.error("%s; every check against it is denied", exc.message)
        return False

    if presented is None:
        return False

    return hmac.compare_digest(presented.encode("utf-8"), reference.encode("utf-8"))


# ---------------------------------------------------------------------------
# PREDICATES
# ---------------------------------------------------------------------------
def is_admin(presented: Optional[str], settings: Settings) -> bool:
    return _matches(presented, settings, "ADMIN_SECRET_KEY")


def is_admin_or_trusted(presented: Optional[str], settings: Settings) -> bool:
    # evaluate both so a missing secret is always reported
    admin = _matches(presented, settings, "ADMIN_SECRET_KEY")
    trusted = _matches(presented, settings, "TRUSTED_SECRET_KEY")
    return admin or trusted


def derive_role(presented: Optional[str], settings: Settings) -> Role:
    """Highest role the presented secret satisfies. Admin wins if both secrets are equal."""
    if is_admin(presented, settings):
        return Role.ADMIN
    if _matches(presented, settings, "TRUSTED_SECRET_KEY"):
        return Role.TRUSTED
    return Role.NONE
