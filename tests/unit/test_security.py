"""Unit tests for the shared-secret role predicates."""

import logging

import pytest

from tripboard.core.config_loader import Settings
from tripboard.core.security import Role, derive_role, is_admin, is_admin_or_trusted


ADMIN = "alpha-key"
TRUSTED = "bravo-key"


def make_settings(admin=ADMIN, trusted=TRUSTED):
    return Settings(_env_file=None, ADMIN_SECRET_KEY=admin, TRUSTED_SECRET_KEY=trusted)


class TestPredicates:
    """Admin satisfies both checks, trusted only the wider one."""

    def test_admin_secret_satisfies_both(self):
        settings = make_settings()
        assert is_admin(ADMIN, settings) is True
        assert is_admin_or_trusted(ADMIN, settings) is True

    def test_trusted_secret_is_not_admin(self):
        settings = make_settings()
        assert is_admin(TRUSTED, settings) is False
        assert is_admin_or_trusted(TRUSTED, settings) is True

    @pytest.mark.parametrize("presented", [None, "", "nope", "alpha", "alpha-key-extra"])
    def test_other_values_satisfy_neither(self, presented):
        settings = make_settings()
        assert is_admin(presented, settings) is False
        assert is_admin_or_trusted(presented, settings) is False

    @pytest.mark.parametrize("presented", [" alpha-key", "alpha-key ", "ALPHA-KEY", "Alpha-Key"])
    def test_comparison_is_exact(self, presented):
        """No trimming or case folding."""
        settings = make_settings()
        assert is_admin(presented, settings) is False
        assert is_admin_or_trusted(presented, settings) is False

    def test_non_ascii_secret(self):
        settings = make_settings(admin="clé-secrète")
        assert is_admin("clé-secrète", settings) is True
        assert is_admin("cle-secrete", settings) is False

    def test_same_inputs_same_result(self):
        settings = make_settings()
        results = {is_admin_or_trusted(TRUSTED, settings) for _ in range(5)}
        assert results == {True}


class TestMissingSecrets:
    """An unset secret fails closed and is reported to operators."""

    @pytest.mark.parametrize("presented", [None, "", "anything", ADMIN])
    def test_unset_admin_secret_denies_everything(self, presented):
        settings = make_settings(admin=None)
        assert is_admin(presented, settings) is False

    def test_empty_admin_secret_counts_as_unset(self):
        settings = make_settings(admin="")
        assert is_admin("", settings) is False

    def test_unset_trusted_secret_still_allows_admin(self):
        settings = make_settings(trusted=None)
        assert is_admin_or_trusted(ADMIN, settings) is True
        assert is_admin_or_trusted("", settings) is False

    def test_missing_secret_is_logged(self, caplog):
        settings = make_settings(admin=None)
        with caplog.at_level(logging.ERROR, logger="tripboard"):
            is_admin("whatever", settings)
        assert any("ADMIN_SECRET_KEY" in r.getMessage() for r in caplog.records)
        assert all("whatever" not in r.getMessage() for r in caplog.records)


class TestDeriveRole:
    def test_roles(self):
        settings = make_settings()
        assert derive_role(ADMIN, settings) is Role.ADMIN
        assert derive_role(TRUSTED, settings) is Role.TRUSTED
        assert derive_role(None, settings) is Role.NONE

    def test_admin_wins_when_secrets_are_equal(self):
        settings = make_settings(admin="same", trusted="same")
        assert derive_role("same", settings) is Role.ADMIN
