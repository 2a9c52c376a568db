# backend/tripboard/core/validation.py

from enum import Enum
from typing import Optional, Union

from tripboard.core.errors import ValidationFailed


class SuggestionStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


ALLOWED_STATUSES = [s.value.lower() for s in SuggestionStatus]

_BY_TOKEN = {s.value.lower(): s for s in SuggestionStatus}


def _allowed_text() -> str:
    return ", ".join(f'"{v}"' for v in ALLOWED_STATUSES)


def normalize_status(
    token: Union[str, SuggestionStatus, None],
    default: Optional[SuggestionStatus] = None,
) -> SuggestionStatus:
    """
    Resolve a free-form status token to its canonical value.

    Matching is case-insensitive after trimming surrounding whitespace.
    ``None`` falls back to ``default``; an empty token never does.

    >>> normalize_status(" approved ")
    <SuggestionStatus.APPROVED: 'Approved'>
    """
    if isinstance(token, SuggestionStatus):
        return token

    if token is None:
        if default is not None:
            return default
        raise ValidationFailed(
            f"Missing required field: status. Must be one of {_allowed_text()}.",
            allowed=ALLOWED_STATUSES,
        )

    if not isinstance(token, str):
        raise ValidationFailed(
            f"Invalid status value. Must be one of {_allowed_text()}.",
            allowed=ALLOWED_STATUSES,
        )

    cleaned = token.strip()
    if not cleaned:
        raise ValidationFailed(
            f"Status must not be empty. Must be one of {_allowed_text()}.",
            allowed=ALLOWED_STATUSES,
        )

    status = _BY_TOKEN.get(cleaned.lower())
    if status is None:
        raise ValidationFailed(
            f'Invalid status value "{cleaned}". Must be one of {_allowed_text()}.',
            allowed=ALLOWED_STATUSES,
        )
    return status
