# backend/tripboard/api/deps.py

import logging
from typing import Callable, Optional

from fastapi import Depends, Request

from tripboard.core.config_loader import Settings
from tripboard.core.errors import AuthorizationDenied
from tripboard.core.logger import get_logger
from tripboard.core.policy import Requirement, is_allowed, requirement_for
from tripboard.core.security import derive_role
from tripboard.db.sqlite_store import TripStore


logger = get_logger("api")


# --------------------------------------------------------
# App-scoped objects, built once by create_app()
# --------------------------------------------------------
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> TripStore:
    return request.app.state.store


def presented_secret(request: Request, settings: Settings = Depends(get_settings)) -> Optional[str]:
    return request.headers.get(settings.AUTH_HEADER)


# --------------------------------------------------------
# Guard → one per (resource, verb) from ENDPOINT_POLICY
# --------------------------------------------------------
def guard(resource: str, verb: str) -> Callable[..., None]:
    """
    Build a dependency enforcing the policy rule for ``resource.verb``.

    The rule is looked up when the router is built, so a route without an
    entry in ENDPOINT_POLICY fails at import time rather than at request time.
    Raises AuthorizationDenied; the predicate itself only returns a bool.
    """
    requirement = requirement_for(resource, verb)

    def _check(
        request: Request,
        settings: Settings = Depends(get_settings),
        secret: Optional[str] = Depends(presented_secret),
    ) -> None:
        if requirement is Requirement.PUBLIC:
            return
        if not is_allowed(requirement, secret, settings):
            logger.info(
                "Denied %s %s (%s.%s requires %s)",
                request.method, request.url.path, resource, verb, requirement.value,
            )
            raise AuthorizationDenied(requirement.value)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Allowed %s.%s as %s", resource, verb, derive_role(secret, settings).value
            )

    return _check
