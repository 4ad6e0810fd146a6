"""Django admin for inspecting synced clinic records."""

from django.contrib import admin

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


class SyncedRecordAdmin(admin.ModelAdmin):
    """Read-mostly admin; sync metadata is never edited by hand."""

    readonly_fields = [
        "id",
        "organization",
        "sync_version",
        "last_modified_by",
        "created_at",
        "updated_at",
        "deleted_at",
    ]
    list_filter = ["organization", "deleted_at"]
    ordering = ["-updated_at"]

    def get_queryset(self, request):
        # Include soft-deleted rows so support can see tombstones
        return self.model.all_objects.all()


@admin.register(Client)
class ClientAdmin(SyncedRecordAdmin):
    list_display = ["first_name", "last_name", "email", "organization", "updated_at"]
    search_fields = ["first_name", "last_name", "email"]


@admin.register(Pet)
class PetAdmin(SyncedRecordAdmin):
    list_display = ["name", "species", "owner", "updated_at"]
    search_fields = ["name", "microchip_number"]


@admin.register(Appointment)
class AppointmentAdmin(SyncedRecordAdmin):
    list_display = ["pet", "client", "date", "status", "updated_at"]
    list_filter = ["organization", "status", "deleted_at"]


admin.site.register([SoapNote, Admission, Kennel, BoardingStay, Invoice], SyncedRecordAdmin)
