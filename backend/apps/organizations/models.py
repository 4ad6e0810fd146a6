"""
Organizations models - multi-tenancy foundation.
"""

from django.db import models


class Organization(models.Model):
    """
    A veterinary practice - the tenant isolation boundary.

    Every syncable record belongs to exactly one organization and every
    pushed operation must declare this organization's tenant_id.
    """

    name = models.CharField(max_length=255)
    slug = models.SlugField(
        max_length=255,
        unique=True,
        help_text="URL-safe identifier, e.g. 'riverside-vets'",
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name

    @property
    def tenant_id(self) -> str:
        """Tenant identifier clients embed in every operation."""
        return str(self.pk)
