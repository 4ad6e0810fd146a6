"""Clinic app configuration."""

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class ClinicConfig(AppConfig):
    """Practice records that offline clients push changes to."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.clinic"
    verbose_name = "Clinic"

    def ready(self) -> None:
        from apps.clinic.sync import EntityType, register_entities
        from apps.sync.registry import SyncRegistry

        register_entities()
        missing = SyncRegistry.missing(EntityType)
        if missing:
            raise ImproperlyConfigured(f"Entity types without a sync registration: {missing}")
