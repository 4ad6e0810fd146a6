"""
Tests for soft delete infrastructure.

Tests cover:
- SoftDeleteMixin behavior (soft_delete, restore, hard_delete)
- SoftDeleteManager filtering
- SoftDeleteAllManager access to all records
- SoftDeleteQuerySet bulk operations
- Partial unique constraints that ignore deleted rows
"""

import time

import pytest

from apps.clinic.models import Client, Pet
from tests.accounts.factories import OrganizationFactory
from tests.clinic.factories import ClientFactory, KennelFactory, PetFactory


@pytest.mark.django_db
class TestSoftDeleteMixin:
    """Tests for SoftDeleteMixin methods and properties."""

    def test_is_deleted_false_by_default(self) -> None:
        """New records should not be marked as deleted."""
        client = ClientFactory.create()

        assert client.is_deleted is False
        assert client.deleted_at is None

    def test_soft_delete_sets_timestamp(self) -> None:
        """soft_delete() should set deleted_at to current time."""
        client = ClientFactory.create()

        client.soft_delete()

        client.refresh_from_db()
        assert client.is_deleted is True
        assert client.deleted_at is not None

    def test_soft_delete_updates_updated_at(self) -> None:
        """soft_delete() should also update the updated_at field."""
        client = ClientFactory.create()
        original_updated_at = client.updated_at
        time.sleep(0.01)  # Ensure time difference

        client.soft_delete()

        client.refresh_from_db()
        assert client.updated_at > original_updated_at

    def test_soft_delete_bumps_sync_version(self) -> None:
        client = ClientFactory.create()

        client.soft_delete()

        client.refresh_from_db()
        assert client.sync_version == 2

    def test_restore_clears_deleted_at(self) -> None:
        """restore() should clear the deleted_at timestamp."""
        client = ClientFactory.create()
        client.soft_delete()
        assert client.is_deleted is True

        client.restore()

        client.refresh_from_db()
        assert client.is_deleted is False
        assert client.deleted_at is None

    def test_hard_delete_removes_from_database(self) -> None:
        """hard_delete() should permanently remove the record."""
        client = ClientFactory.create()
        client_id = client.pk

        client.hard_delete()

        assert not Client.all_objects.filter(pk=client_id).exists()


@pytest.mark.django_db
class TestSoftDeleteManagers:
    """Tests for objects (live only) and all_objects (everything)."""

    def test_objects_excludes_soft_deleted_records(self) -> None:
        org = OrganizationFactory.create()
        active = ClientFactory.create(organization=org)
        deleted = ClientFactory.create(organization=org)
        deleted.soft_delete()

        clients = Client.objects.filter(organization=org)

        assert list(clients) == [active]

    def test_get_raises_for_deleted_record(self) -> None:
        """get() should raise DoesNotExist for soft-deleted records."""
        client = ClientFactory.create()
        client.soft_delete()

        with pytest.raises(Client.DoesNotExist):
            Client.objects.get(pk=client.pk)

    def test_all_objects_includes_deleted(self) -> None:
        org = OrganizationFactory.create()
        active = ClientFactory.create(organization=org)
        deleted = ClientFactory.create(organization=org)
        deleted.soft_delete()

        clients = Client.all_objects.filter(organization=org)

        assert clients.count() == 2
        assert active in clients
        assert deleted in clients

    def test_dead_returns_only_deleted(self) -> None:
        org = OrganizationFactory.create()
        ClientFactory.create(organization=org)
        deleted = ClientFactory.create(organization=org)
        deleted.soft_delete()

        assert list(Client.all_objects.dead()) == [deleted]

    def test_deleted_parent_still_reachable_from_child(self) -> None:
        """Forward relations use the base manager, so history stays readable."""
        pet = PetFactory.create()
        pet.owner.soft_delete()

        pet = Pet.objects.get(pk=pet.pk)

        assert pet.owner.is_deleted is True


@pytest.mark.django_db
class TestSoftDeleteQuerySet:
    """Tests for SoftDeleteQuerySet bulk operations."""

    def test_bulk_delete_soft_deletes_all(self) -> None:
        """delete() on queryset should soft delete all matching records."""
        org = OrganizationFactory.create()
        ClientFactory.create(organization=org, last_name="Test")
        ClientFactory.create(organization=org, last_name="Test")
        ClientFactory.create(organization=org, last_name="Other")

        count, details = Client.objects.filter(organization=org, last_name="Test").delete()

        assert count == 2
        assert details["clinic.Client"] == 2
        assert Client.objects.filter(organization=org).count() == 1
        assert Client.all_objects.filter(organization=org).count() == 3

    def test_bulk_hard_delete_removes_permanently(self) -> None:
        """hard_delete() on queryset should permanently remove records."""
        org = OrganizationFactory.create()
        ClientFactory.create(organization=org, last_name="Test")
        ClientFactory.create(organization=org, last_name="Other")

        stale = Client.all_objects.filter(organization=org, last_name="Test")
        stale.hard_delete()  # type: ignore[attr-defined]

        assert Client.all_objects.filter(organization=org).count() == 1


@pytest.mark.django_db
class TestLiveUniqueness:
    """Natural keys are unique among live rows only."""

    def test_deleted_client_frees_its_email(self) -> None:
        org = OrganizationFactory.create()
        old = ClientFactory.create(organization=org, email="ada@example.com")
        old.soft_delete()

        new = ClientFactory.create(organization=org, email="ada@example.com")

        assert new.pk != old.pk

    def test_blank_emails_do_not_collide(self) -> None:
        org = OrganizationFactory.create()
        ClientFactory.create(organization=org, email="")
        ClientFactory.create(organization=org, email="")

        assert Client.objects.filter(organization=org, email="").count() == 2

    def test_same_kennel_name_in_two_practices(self) -> None:
        KennelFactory.create(name="K-1")
        KennelFactory.create(name="K-1")
