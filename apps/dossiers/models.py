"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Legal-aid case files and their financial records:
             fee agreements (engagements) and payments.
-------------------------------------------------------------------------
"""
from decimal import Decimal
from django.db import models
from django.core.validators import MinValueValidator
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import TimeStampedMixin


class ConventionType(models.TextChoices):
    """
    Kind of fee agreement signed with the lawyer.
    """
    CONVENTION = 'CONVENTION', _('Fee Agreement')
    AVENANT = 'AVENANT', _('Amendment')


class Dossier(TimeStampedMixin):
    """
    Legal-aid case file grouping one or more requests.

    Attributes:
        numero: Case reference (unique)
        sgami: Paying authority in charge of the file
    """

    numero = models.CharField(
        max_length=30,
        unique=True,
        verbose_name=_('File Number')
    )
    sgami = models.ForeignKey(
        'referentiel.Sgami',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='dossiers',
        verbose_name=_('SGAMI')
    )

    class Meta:
        verbose_name = _('File')
        verbose_name_plural = _('Files')
        ordering = ['-created_at']

    def __str__(self) -> str:
        return self.numero


class Convention(TimeStampedMixin):
    """
    Fee agreement (or amendment) committing budget against a dossier.

    The pre-tax amount of a convention is the engagement (gage) recorded
    on its creation date.
    """

    dossier = models.ForeignKey(
        Dossier,
        on_delete=models.CASCADE,
        related_name='conventions',
        verbose_name=_('File')
    )
    type = models.CharField(
        max_length=15,
        choices=ConventionType.choices,
        default=ConventionType.CONVENTION,
        verbose_name=_('Type')
    )
    montant_ht = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name=_('Amount (pre-tax)')
    )
    date_creation = models.DateField(
        verbose_name=_('Creation Date')
    )
    date_retour_signe = models.DateField(
        null=True,
        blank=True,
        verbose_name=_('Signed Return Date')
    )

    class Meta:
        verbose_name = _('Convention')
        verbose_name_plural = _('Conventions')
        ordering = ['-date_creation']

    def __str__(self) -> str:
        return f"{self.get_type_display()} {self.dossier.numero}"


class Paiement(TimeStampedMixin):
    """
    Payment ordered on a dossier, settled by a SGAMI and charged to a PCE.
    """

    dossier = models.ForeignKey(
        Dossier,
        on_delete=models.CASCADE,
        related_name='paiements',
        verbose_name=_('File')
    )
    sgami = models.ForeignKey(
        'referentiel.Sgami',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='paiements',
        verbose_name=_('SGAMI')
    )
    pce = models.ForeignKey(
        'referentiel.Pce',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='paiements',
        verbose_name=_('PCE')
    )
    montant_ht = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name=_('Amount (pre-tax)')
    )
    montant_ttc = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name=_('Amount (tax-inclusive)')
    )
    date_emission = models.DateField(
        verbose_name=_('Issue Date')
    )

    class Meta:
        verbose_name = _('Payment')
        verbose_name_plural = _('Payments')
        ordering = ['date_emission', 'pk']

    def __str__(self) -> str:
        return f"Paiement {self.dossier.numero} - {self.montant_ttc}"
