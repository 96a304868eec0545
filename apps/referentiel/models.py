"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Master data models: paying authorities (SGAMI) and the
             budget nomenclature (PCE) with its display sequence.
-------------------------------------------------------------------------
"""
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import TimeStampedMixin


class Sgami(TimeStampedMixin):
    """
    Paying authority responsible for settling payments.

    Examples: SGAMI Ouest, SGAMI Sud, SGAMI Île-de-France.
    """

    nom = models.CharField(
        max_length=100,
        unique=True,
        verbose_name=_('Name')
    )

    class Meta:
        verbose_name = _('SGAMI')
        verbose_name_plural = _('SGAMI')
        ordering = ['nom']

    def __str__(self) -> str:
        return self.nom


class Pce(TimeStampedMixin):
    """
    Budget nomenclature line used to categorize an expenditure.

    The ``ordre`` field is the sequence number maintained by the
    administrators; every listing and statistics breakdown by PCE
    follows it rather than amounts or alphabetical order.
    """

    ordre = models.PositiveIntegerField(
        unique=True,
        verbose_name=_('Order'),
        help_text=_('Display sequence of the budget line.')
    )
    pce_detaille = models.CharField(
        max_length=255,
        verbose_name=_('Detailed label')
    )
    pce_numerique = models.CharField(
        max_length=50,
        unique=True,
        verbose_name=_('Numeric code')
    )
    code_marchandise = models.CharField(
        max_length=50,
        blank=True,
        verbose_name=_('Goods code')
    )

    class Meta:
        verbose_name = _('PCE')
        verbose_name_plural = _('PCE')
        ordering = ['ordre']

    def __str__(self) -> str:
        return self.libelle

    @property
    def libelle(self) -> str:
        """Label shown in reports, e.g. "6227 - Frais d'actes et de contentieux"."""
        return f"{self.pce_numerique} - {self.pce_detaille}"
