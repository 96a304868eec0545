"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Shared abstract base for GestAJ models: a public UUID and
             creation/modification timestamps.
-------------------------------------------------------------------------
"""
import uuid

from django.db import models


class TimeStampedMixin(models.Model):
    """
    Abstract base of every GestAJ record.

    Attributes:
        public_id: Identifier exposed to clients instead of the integer key.
        created_at: Insertion time. Dossiers are attributed to a year
                    through this field.
        updated_at: Time of the last save.
    """

    public_id = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        db_index=True,
        verbose_name="Public ID",
        help_text="Stable identifier exposed outside the database."
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Created At",
        help_text="Set once when the row is inserted."
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Updated At",
        help_text="Refreshed on every save."
    )

    class Meta:
        abstract = True

    @classmethod
    def created_in_year(cls, annee: int) -> models.QuerySet:
        """Rows inserted during calendar year ``annee`` (local time)."""
        return cls.objects.filter(created_at__year=annee)
