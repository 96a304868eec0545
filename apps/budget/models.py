"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Annual budget allocated to legal-aid expenditure.
-------------------------------------------------------------------------
"""
from decimal import Decimal
from typing import Optional
from django.db import models
from django.core.validators import MinValueValidator
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import TimeStampedMixin


class BudgetAnnuel(TimeStampedMixin):
    """
    Budget allocated for a calendar year.

    The amount available for the year is the base allocation plus any
    top-ups (abondements) voted during the year.

    Attributes:
        annee: Calendar year (unique)
        budget_base: Initial allocation
        abondements: Cumulated top-ups
    """

    annee = models.PositiveIntegerField(
        unique=True,
        verbose_name=_('Year')
    )
    budget_base = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name=_('Base Budget')
    )
    abondements = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name=_('Top-ups')
    )

    class Meta:
        verbose_name = _('Annual Budget')
        verbose_name_plural = _('Annual Budgets')
        ordering = ['-annee']

    def __str__(self) -> str:
        return f"Budget {self.annee}"

    @property
    def total(self) -> Decimal:
        """Total allocation for the year (base + top-ups)."""
        return self.budget_base + self.abondements

    @classmethod
    def total_for_year(cls, annee: int) -> Optional[Decimal]:
        """
        Get the total allocation configured for a year.

        Returns:
            The total amount, or None when no budget is configured.
        """
        budget = cls.objects.filter(annee=annee).first()
        if budget is None:
            return None
        return budget.total
