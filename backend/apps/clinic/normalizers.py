"""
Per-entity payload shapes and normalizers for clinic records.

Payload schemas list only writable fields, all optional; required-on-create
fields are enforced by the normalizer so that updates can stay partial.
Ownership keys that follow from a parent (an appointment's client is its
pet's owner) are not accepted from the client at all; they are derived.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Any
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.utils import timezone
from ninja import Schema
from pydantic import AfterValidator, Field

from apps.clinic.models import (
    Admission,
    Appointment,
    BoardingStay,
    Client,
    Invoice,
    Kennel,
    Pet,
    SoapNote,
)
from apps.sync.exceptions import PayloadValidationError
from apps.sync.normalizers import EntityNormalizer, ParentLink, UTCDateTime
from apps.sync.store import EntityStore


def _cents(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


Money = Annotated[Decimal, AfterValidator(_cents)]


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if value:
        try:
            validate_email(value)
        except DjangoValidationError:
            raise ValueError("Enter a valid email address.") from None
    return value


# Emails are case-insensitive natural keys; blank means "no email"
NormalizedEmail = Annotated[str, AfterValidator(_normalize_email)]


class ClientPayload(Schema):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: NormalizedEmail | None = None
    phone: str | None = Field(default=None, max_length=32)
    address: str | None = None
    notes: str | None = None


class PetPayload(Schema):
    owner_id: UUID | None = None
    name: str | None = Field(default=None, max_length=100)
    species: Pet.Species | None = None
    breed: str | None = None
    sex: str | None = None
    date_of_birth: date | None = None
    weight_kg: Money | None = None
    microchip_number: str | None = None
    notes: str | None = None


class AppointmentPayload(Schema):
    pet_id: UUID | None = None
    date: UTCDateTime | None = None
    duration_minutes: int | None = Field(default=None, ge=1)
    appointment_type: str | None = None
    description: str | None = None
    status: Appointment.Status | None = None


class SoapNotePayload(Schema):
    pet_id: UUID | None = None
    appointment_id: UUID | None = None
    subjective: str | None = None
    objective: str | None = None
    assessment: str | None = None
    plan: str | None = None
    recorded_at: UTCDateTime | None = None


class AdmissionPayload(Schema):
    pet_id: UUID | None = None
    reason: str | None = None
    room: str | None = None
    admitted_at: UTCDateTime | None = None


class KennelPayload(Schema):
    name: str | None = Field(default=None, max_length=64)
    size: Kennel.Size | None = None
    status: Kennel.Status | None = None
    daily_rate: Money | None = None


class BoardingStayPayload(Schema):
    pet_id: UUID | None = None
    kennel_id: UUID | None = None
    start_date: date | None = None
    end_date: date | None = None
    feeding_instructions: str | None = None
    notes: str | None = None


class InvoicePayload(Schema):
    client_id: UUID | None = None
    number: str | None = Field(default=None, max_length=32)
    issue_date: date | None = None
    due_date: date | None = None
    total: Money | None = None
    status: Invoice.Status | None = None
    notes: str | None = None


class ClientNormalizer(EntityNormalizer):
    model = Client
    payload_schema = ClientPayload
    required_fields = ("first_name",)


class PetNormalizer(EntityNormalizer):
    model = Pet
    payload_schema = PetPayload
    required_fields = ("owner_id", "name")
    defaults = {"species": Pet.Species.OTHER}
    parents = (ParentLink(field="owner_id", model=Client, name="client"),)


class AppointmentNormalizer(EntityNormalizer):
    """
    Appointments belong to the pet's owner.

    client_id is always copied from the referenced pet, so an appointment can
    never pair one owner with another owner's pet. Status starts as pending
    and moves only through the approve/reject transitions.
    """

    model = Appointment
    payload_schema = AppointmentPayload
    required_fields = ("pet_id", "date")
    defaults = {"status": Appointment.Status.PENDING, "duration_minutes": 30}
    state_fields = ("status",)
    parents = (
        ParentLink(field="pet_id", model=Pet, name="pet", copy={"owner_id": "client_id"}),
    )


class SoapNoteNormalizer(EntityNormalizer):
    """SOAP notes take their pet from the linked appointment when there is one."""

    model = SoapNote
    payload_schema = SoapNotePayload
    required_fields = ("pet_id",)
    parents = (
        ParentLink(
            field="appointment_id",
            model=Appointment,
            name="appointment",
            copy={"pet_id": "pet_id"},
        ),
        ParentLink(field="pet_id", model=Pet, name="pet"),
    )


class AdmissionNormalizer(EntityNormalizer):
    model = Admission
    payload_schema = AdmissionPayload
    required_fields = ("pet_id",)
    parents = (
        ParentLink(field="pet_id", model=Pet, name="pet", copy={"owner_id": "client_id"}),
    )

    def clean(self, kind: str, values: dict[str, Any], store: EntityStore) -> dict[str, Any]:
        if kind == "create" and values.get("admitted_at") is None:
            values["admitted_at"] = timezone.now()
        return values


class KennelNormalizer(EntityNormalizer):
    model = Kennel
    payload_schema = KennelPayload
    required_fields = ("name",)


class BoardingStayNormalizer(EntityNormalizer):
    model = BoardingStay
    payload_schema = BoardingStayPayload
    required_fields = ("pet_id", "kennel_id", "start_date", "end_date")
    parents = (
        ParentLink(field="pet_id", model=Pet, name="pet", copy={"owner_id": "client_id"}),
        ParentLink(field="kennel_id", model=Kennel, name="kennel"),
    )

    def clean(self, kind: str, values: dict[str, Any], store: EntityStore) -> dict[str, Any]:
        start, end = values.get("start_date"), values.get("end_date")
        if start is not None and end is not None and end < start:
            raise PayloadValidationError(
                "Validation failed",
                details={"end_date": ["End date must not be before start date."]},
            )
        return values


class InvoiceNormalizer(EntityNormalizer):
    model = Invoice
    payload_schema = InvoicePayload
    required_fields = ("client_id", "number", "issue_date")
    defaults = {"status": Invoice.Status.DRAFT}
    parents = (ParentLink(field="client_id", model=Client, name="client"),)
