"""Unit tests for suggestion status normalization."""

import pytest

from tripboard.core.errors import ValidationFailed
from tripboard.core.validation import ALLOWED_STATUSES, SuggestionStatus, normalize_status


class TestNormalizeStatus:
    def test_case_insensitive(self):
        assert normalize_status("PENDING") == normalize_status("pending") == normalize_status("Pending")
        assert normalize_status("pending") is SuggestionStatus.PENDING

    @pytest.mark.parametrize("status", list(SuggestionStatus))
    def test_idempotent(self, status):
        once = normalize_status(status.value.upper())
        assert normalize_status(once) is once
        assert normalize_status(once.value) is once

    def test_surrounding_whitespace_is_trimmed(self):
        assert normalize_status(" Approved ") is SuggestionStatus.APPROVED
        assert normalize_status("\trejected\n") is SuggestionStatus.REJECTED

    def test_none_uses_default(self):
        assert normalize_status(None, default=SuggestionStatus.PENDING) is SuggestionStatus.PENDING

    def test_none_without_default_fails(self):
        with pytest.raises(ValidationFailed) as exc_info:
            normalize_status(None)
        assert "required" in exc_info.value.message

    @pytest.mark.parametrize("token", ["", "   "])
    def test_empty_is_never_defaulted(self, token):
        with pytest.raises(ValidationFailed):
            normalize_status(token, default=SuggestionStatus.PENDING)

    @pytest.mark.parametrize("token", ["archived", "approve", "pend", "Approved!", "0"])
    def test_unknown_token_lists_legal_values(self, token):
        with pytest.raises(ValidationFailed) as exc_info:
            normalize_status(token)
        for value in ("pending", "approved", "rejected"):
            assert value in exc_info.value.message
        assert exc_info.value.allowed == ALLOWED_STATUSES

    def test_non_string_rejected(self):
        with pytest.raises(ValidationFailed):
            normalize_status(3)
