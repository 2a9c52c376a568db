# backend/tripboard/core/errors.py

from typing import List, Optional


class TripboardError(Exception):
    """Base class for every error the service turns into an HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthorizationDenied(TripboardError):
    status_code = 403

    def __init__(self, requirement: str):
        # names the role generically, never the configured secret
        super().__init__(f"Forbidden: {requirement} access required.")
        self.requirement = requirement


class ValidationFailed(TripboardError):
    status_code = 400

    def __init__(self, message: str, allowed: Optional[List[str]] = None):
        super().__init__(message)
        self.allowed = allowed


class ConfigurationMissing(TripboardError):
    """A reference secret is unset. Logged for operators, never sent to callers."""

    def __init__(self, setting: str):
        super().__init__(f"{setting} is not configured")
        self.setting = setting


class NotFound(TripboardError):
    status_code = 404

    def __init__(self, resource: str, item_id: str):
        super().__init__(f"{resource} not found with ID: {item_id}")
        self.resource = resource
        self.item_id = item_id
