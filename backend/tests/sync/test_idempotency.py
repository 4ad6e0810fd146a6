"""
Tests for natural-key idempotent creates.
"""

from unittest.mock import patch

import pytest
from django.db import IntegrityError

from apps.clinic.models import Client, Pet
from apps.sync.idempotency import create_idempotent, find_existing, is_unique_violation
from apps.sync.registry import SyncRegistry
from apps.sync.store import DjangoEntityStore
from tests.accounts.factories import OrganizationFactory
from tests.clinic.factories import ClientFactory


class _DriverError(Exception):
    """Stands in for a psycopg error, which carries the SQLSTATE code."""

    def __init__(self, message: str, sqlstate: str) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity_error(message: str, sqlstate: str | None = None) -> IntegrityError:
    exc = IntegrityError(message)
    if sqlstate is not None:
        exc.__cause__ = _DriverError(message, sqlstate)
    return exc


class TestIsUniqueViolation:
    def test_postgres_sqlstate(self):
        assert is_unique_violation(_integrity_error("boom", sqlstate="23505"))

    def test_sqlite_message(self):
        assert is_unique_violation(
            _integrity_error("UNIQUE constraint failed: clinic_client.organization_id")
        )

    def test_other_integrity_errors(self):
        assert not is_unique_violation(_integrity_error("NOT NULL constraint failed", "23502"))


@pytest.mark.django_db
class TestFindExisting:
    def test_no_natural_key_means_no_lookup(self, store):
        config = SyncRegistry.get_config("pet")

        assert find_existing(config, {"name": "Rex"}, store) is None

    def test_blank_key_value_means_no_lookup(self, store, organization):
        ClientFactory.create(organization=organization, email="")

        assert find_existing(SyncRegistry.get_config("client"), {"email": ""}, store) is None

    def test_finds_live_record_in_same_practice(self, store, organization):
        existing = ClientFactory.create(organization=organization, email="ada@example.com")

        found = find_existing(
            SyncRegistry.get_config("client"), {"email": "ada@example.com"}, store
        )

        assert found == existing

    def test_ignores_other_practices(self, store):
        ClientFactory.create(organization=OrganizationFactory.create(), email="ada@example.com")

        assert (
            find_existing(SyncRegistry.get_config("client"), {"email": "ada@example.com"}, store)
            is None
        )

    def test_ignores_soft_deleted_records(self, store, organization):
        ClientFactory.create(organization=organization, email="ada@example.com").soft_delete()

        assert (
            find_existing(SyncRegistry.get_config("client"), {"email": "ada@example.com"}, store)
            is None
        )


@pytest.mark.django_db
class TestCreateIdempotent:
    def test_inserts_when_key_is_free(self, store, organization, member):
        config = SyncRegistry.get_config("client")

        record, replayed = create_idempotent(
            config, {"first_name": "Ada", "email": "ada@example.com"}, store
        )

        assert replayed is False
        assert record.organization == organization
        assert record.last_modified_by == member
        assert record.sync_version == 1

    def test_returns_existing_record_when_key_is_taken(self, store, organization):
        existing = ClientFactory.create(organization=organization, email="ada@example.com")
        config = SyncRegistry.get_config("client")

        with patch("apps.sync.idempotency.logger") as mock_logger:
            record, replayed = create_idempotent(
                config, {"first_name": "Someone else", "email": "ada@example.com"}, store
            )

        assert replayed is True
        assert record.pk == existing.pk
        assert Client.objects.filter(organization=organization).count() == 1
        assert mock_logger.info.call_args.args == ("sync_operation_replayed",)

    def test_recovers_from_a_lost_race(self, store, organization):
        """A uniqueness violation on insert resolves to the record that won."""
        winner = ClientFactory.create(organization=organization, email="ada@example.com")
        config = SyncRegistry.get_config("client")

        # First lookup misses, as if the winner committed just after it
        with patch.object(DjangoEntityStore, "find_by", side_effect=[None, winner]):
            record, replayed = create_idempotent(
                config, {"first_name": "Ada", "email": "ada@example.com"}, store
            )

        assert replayed is True
        assert record.pk == winner.pk
        assert Client.objects.filter(organization=organization).count() == 1

    def test_unrecoverable_violation_propagates(self, store, organization):
        ClientFactory.create(organization=organization, email="ada@example.com")
        config = SyncRegistry.get_config("client")

        with (
            patch.object(DjangoEntityStore, "find_by", return_value=None),
            pytest.raises(IntegrityError),
        ):
            create_idempotent(config, {"first_name": "Ada", "email": "ada@example.com"}, store)

    def test_non_unique_integrity_error_propagates(self, store):
        config = SyncRegistry.get_config("client")

        with (
            patch.object(
                DjangoEntityStore,
                "insert",
                side_effect=IntegrityError("FOREIGN KEY constraint failed"),
            ),
            patch.object(DjangoEntityStore, "find_by", return_value=None) as mock_find_by,
            pytest.raises(IntegrityError),
        ):
            create_idempotent(config, {"first_name": "Ada", "email": "ada@example.com"}, store)

        # Only the lookup before the insert; no recovery attempt
        mock_find_by.assert_called_once()

    def test_entities_without_natural_key_always_insert(self, store, organization):
        owner = ClientFactory.create(organization=organization)
        config = SyncRegistry.get_config("pet")

        first, _ = create_idempotent(config, {"owner_id": owner.pk, "name": "Rex"}, store)
        second, replayed = create_idempotent(config, {"owner_id": owner.pk, "name": "Rex"}, store)

        assert replayed is False
        assert first.pk != second.pk
        assert Pet.objects.filter(owner=owner).count() == 2
