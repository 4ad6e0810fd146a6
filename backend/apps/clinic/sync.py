"""
Sync registrations for clinic entities.

EntityType is the closed set of entity kinds the push endpoint accepts.
register_entities() wires each one to its model, normalizer, natural key and
workflow transitions; ClinicConfig.ready() calls it and refuses to start if
any member is left unregistered.
"""

from enum import StrEnum
from typing import Any

from django.utils import timezone

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
from apps.clinic.normalizers import (
    AdmissionNormalizer,
    AppointmentNormalizer,
    BoardingStayNormalizer,
    ClientNormalizer,
    InvoiceNormalizer,
    KennelNormalizer,
    PetNormalizer,
    SoapNoteNormalizer,
)
from apps.sync.models import SyncableModel
from apps.sync.registry import EntityConfig, SyncRegistry, Transition


class EntityType(StrEnum):
    CLIENT = "client"
    PET = "pet"
    APPOINTMENT = "appointment"
    SOAP_NOTE = "soap_note"
    ADMISSION = "admission"
    KENNEL = "kennel"
    BOARDING_STAY = "boarding_stay"
    INVOICE = "invoice"


def _rejection_fields(record: SyncableModel, payload: dict) -> dict[str, Any]:
    return {"rejection_reason": payload.get("rejection_reason") or "No reason provided"}


def _discharge_fields(record: SyncableModel, payload: dict) -> dict[str, Any]:
    return {
        "discharged_at": timezone.now(),
        "discharge_notes": payload.get("discharge_notes") or "",
    }


def _check_in_fields(record: SyncableModel, payload: dict) -> dict[str, Any]:
    return {"checked_in_at": timezone.now()}


def _check_out_fields(record: SyncableModel, payload: dict) -> dict[str, Any]:
    return {"checked_out_at": timezone.now()}


APPOINTMENT_TRANSITIONS = {
    "approve": Transition(
        name="approve",
        source_states=(Appointment.Status.PENDING,),
        target_state=Appointment.Status.APPROVED,
    ),
    "reject": Transition(
        name="reject",
        source_states=(Appointment.Status.PENDING,),
        target_state=Appointment.Status.REJECTED,
        apply=_rejection_fields,
    ),
}

ADMISSION_TRANSITIONS = {
    "discharge": Transition(
        name="discharge",
        source_states=(Admission.Status.ADMITTED,),
        target_state=Admission.Status.DISCHARGED,
        apply=_discharge_fields,
    ),
}

BOARDING_STAY_TRANSITIONS = {
    "check_in": Transition(
        name="check_in",
        source_states=(BoardingStay.Status.RESERVED,),
        target_state=BoardingStay.Status.CHECKED_IN,
        apply=_check_in_fields,
    ),
    "check_out": Transition(
        name="check_out",
        source_states=(BoardingStay.Status.CHECKED_IN,),
        target_state=BoardingStay.Status.CHECKED_OUT,
        apply=_check_out_fields,
    ),
}


def entity_configs() -> list[EntityConfig]:
    return [
        EntityConfig(
            entity_type=EntityType.CLIENT,
            model=Client,
            normalizer=ClientNormalizer(),
            natural_key="email",
            aliases=("clients",),
        ),
        EntityConfig(
            entity_type=EntityType.PET,
            model=Pet,
            normalizer=PetNormalizer(),
            aliases=("pets",),
        ),
        EntityConfig(
            entity_type=EntityType.APPOINTMENT,
            model=Appointment,
            normalizer=AppointmentNormalizer(),
            transitions=APPOINTMENT_TRANSITIONS,
            aliases=("appointments",),
        ),
        EntityConfig(
            entity_type=EntityType.SOAP_NOTE,
            model=SoapNote,
            normalizer=SoapNoteNormalizer(),
            aliases=("soap_notes", "soapNote", "soapNotes"),
        ),
        EntityConfig(
            entity_type=EntityType.ADMISSION,
            model=Admission,
            normalizer=AdmissionNormalizer(),
            transitions=ADMISSION_TRANSITIONS,
            aliases=("admissions",),
        ),
        EntityConfig(
            entity_type=EntityType.KENNEL,
            model=Kennel,
            normalizer=KennelNormalizer(),
            natural_key="name",
            aliases=("kennels",),
        ),
        EntityConfig(
            entity_type=EntityType.BOARDING_STAY,
            model=BoardingStay,
            normalizer=BoardingStayNormalizer(),
            transitions=BOARDING_STAY_TRANSITIONS,
            aliases=("boarding_stays", "boardingStay", "boardingStays"),
        ),
        EntityConfig(
            entity_type=EntityType.INVOICE,
            model=Invoice,
            normalizer=InvoiceNormalizer(),
            natural_key="number",
            aliases=("invoices",),
        ),
    ]


def register_entities() -> None:
    """Register every clinic entity type with the sync registry."""
    for config in entity_configs():
        SyncRegistry.register(config)
