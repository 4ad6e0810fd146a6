"""
Tests for clinic model constraints.
"""

import pytest
from django.db import IntegrityError, transaction

from apps.clinic.normalizers import AppointmentNormalizer
from tests.clinic.factories import AppointmentFactory


@pytest.mark.django_db
class TestAppointmentDuration:
    """Stored appointments always satisfy the payload shape."""

    def test_zero_duration_rejected_by_database(self) -> None:
        with pytest.raises(IntegrityError), transaction.atomic():
            AppointmentFactory.create(duration_minutes=0)

    def test_stored_appointment_snapshots_cleanly(self) -> None:
        appointment = AppointmentFactory.create(duration_minutes=1)

        snapshot = AppointmentNormalizer().snapshot(appointment)

        assert snapshot["duration_minutes"] == 1
        assert snapshot["status"] == "pending"
