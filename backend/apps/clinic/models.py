"""
Clinic models - the practice records offline clients edit.

All of them are SyncableModels: UUIDv7 ids, tenant-scoped, soft-deleted,
versioned on every save.
"""

from django.core.validators import MinValueValidator
from django.db import models

from apps.sync.models import SyncableModel


class Client(SyncableModel):
    """A pet owner. Email is the natural key used for idempotent creates."""

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100, blank=True, default="")
    email = models.EmailField(blank=True, default="")
    phone = models.CharField(max_length=32, blank=True, default="")
    address = models.TextField(blank=True, default="")
    notes = models.TextField(blank=True, default="")

    class Meta(SyncableModel.Meta):
        constraints = [
            models.UniqueConstraint(
                fields=["organization", "email"],
                condition=models.Q(deleted_at__isnull=True) & ~models.Q(email=""),
                name="clinic_client_unique_live_email",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Pet(SyncableModel):
    class Species(models.TextChoices):
        DOG = "dog"
        CAT = "cat"
        BIRD = "bird"
        RABBIT = "rabbit"
        REPTILE = "reptile"
        OTHER = "other"

    owner = models.ForeignKey(Client, on_delete=models.CASCADE, related_name="pets")
    name = models.CharField(max_length=100)
    species = models.CharField(max_length=16, choices=Species.choices, default=Species.OTHER)
    breed = models.CharField(max_length=100, blank=True, default="")
    sex = models.CharField(max_length=16, blank=True, default="")
    date_of_birth = models.DateField(null=True, blank=True)
    weight_kg = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    microchip_number = models.CharField(max_length=32, blank=True, default="")
    notes = models.TextField(blank=True, default="")

    def __str__(self) -> str:
        return self.name


class Appointment(SyncableModel):
    """
    A booked or requested visit.

    Requests start as 'pending' and leave that state only through the
    approve/reject transitions.
    """

    class Status(models.TextChoices):
        PENDING = "pending"
        APPROVED = "approved"
        REJECTED = "rejected"
        COMPLETED = "completed"
        CANCELLED = "cancelled"

    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name="appointments")
    client = models.ForeignKey(Client, on_delete=models.CASCADE, related_name="appointments")
    date = models.DateTimeField()
    duration_minutes = models.PositiveIntegerField(default=30, validators=[MinValueValidator(1)])
    appointment_type = models.CharField(max_length=64, blank=True, default="")
    description = models.TextField(blank=True, default="")
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    rejection_reason = models.TextField(blank=True, default="")

    class Meta(SyncableModel.Meta):
        constraints = [
            models.CheckConstraint(
                condition=models.Q(duration_minutes__gte=1),
                name="clinic_appointment_duration_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.pet} @ {self.date:%Y-%m-%d %H:%M} ({self.status})"


class SoapNote(SyncableModel):
    """Clinical note in SOAP form (subjective, objective, assessment, plan)."""

    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name="soap_notes")
    appointment = models.ForeignKey(
        Appointment,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="soap_notes",
    )
    subjective = models.TextField(blank=True, default="")
    objective = models.TextField(blank=True, default="")
    assessment = models.TextField(blank=True, default="")
    plan = models.TextField(blank=True, default="")
    recorded_at = models.DateTimeField(null=True, blank=True)


class Admission(SyncableModel):
    class Status(models.TextChoices):
        ADMITTED = "admitted"
        DISCHARGED = "discharged"

    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name="admissions")
    client = models.ForeignKey(Client, on_delete=models.CASCADE, related_name="admissions")
    reason = models.TextField(blank=True, default="")
    room = models.CharField(max_length=64, blank=True, default="")
    admitted_at = models.DateTimeField(null=True, blank=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.ADMITTED)
    discharged_at = models.DateTimeField(null=True, blank=True)
    discharge_notes = models.TextField(blank=True, default="")


class Kennel(SyncableModel):
    class Size(models.TextChoices):
        SMALL = "small"
        MEDIUM = "medium"
        LARGE = "large"

    class Status(models.TextChoices):
        AVAILABLE = "available"
        MAINTENANCE = "maintenance"

    name = models.CharField(max_length=64)
    size = models.CharField(max_length=16, choices=Size.choices, default=Size.MEDIUM)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.AVAILABLE)
    daily_rate = models.DecimalField(max_digits=8, decimal_places=2, default=0)

    class Meta(SyncableModel.Meta):
        constraints = [
            models.UniqueConstraint(
                fields=["organization", "name"],
                condition=models.Q(deleted_at__isnull=True),
                name="clinic_kennel_unique_live_name",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class BoardingStay(SyncableModel):
    class Status(models.TextChoices):
        RESERVED = "reserved"
        CHECKED_IN = "checked_in"
        CHECKED_OUT = "checked_out"
        CANCELLED = "cancelled"

    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name="boarding_stays")
    client = models.ForeignKey(Client, on_delete=models.CASCADE, related_name="boarding_stays")
    kennel = models.ForeignKey(Kennel, on_delete=models.PROTECT, related_name="stays")
    start_date = models.DateField()
    end_date = models.DateField()
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.RESERVED)
    checked_in_at = models.DateTimeField(null=True, blank=True)
    checked_out_at = models.DateTimeField(null=True, blank=True)
    feeding_instructions = models.TextField(blank=True, default="")
    notes = models.TextField(blank=True, default="")


class Invoice(SyncableModel):
    """Invoice header. Number is the natural key."""

    class Status(models.TextChoices):
        DRAFT = "draft"
        ISSUED = "issued"
        PAID = "paid"
        VOID = "void"

    client = models.ForeignKey(Client, on_delete=models.CASCADE, related_name="invoices")
    number = models.CharField(max_length=32)
    issue_date = models.DateField()
    due_date = models.DateField(null=True, blank=True)
    total = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.DRAFT)
    notes = models.TextField(blank=True, default="")

    class Meta(SyncableModel.Meta):
        constraints = [
            models.UniqueConstraint(
                fields=["organization", "number"],
                condition=models.Q(deleted_at__isnull=True),
                name="clinic_invoice_unique_live_number",
            ),
        ]

    def __str__(self) -> str:
        return self.number
