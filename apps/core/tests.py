"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Test cases for the shared exception hierarchy and model
             mixins
-------------------------------------------------------------------------
"""
from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from apps.core.exceptions import (
    GestAJException,
    InvalidAmount,
    InvalidDimension,
    InvalidRecord,
    InvalidYear,
    UpstreamFetchFailure,
)
from apps.dossiers.models import Dossier


class ExceptionsTest(SimpleTestCase):
    """Test cases for GestAJException and its subclasses"""

    def test_default_message(self):
        exc = InvalidYear()
        self.assertEqual(exc.message, InvalidYear.default_message)
        self.assertEqual(str(exc), InvalidYear.default_message)

    def test_to_dict(self):
        exc = InvalidDimension("Unknown grouping dimension 'region'.", details={'dimension': 'region'})

        self.assertEqual(exc.to_dict(), {
            'error_code': 'ERR_INVALID_DIMENSION',
            'message': "Unknown grouping dimension 'region'.",
            'details': {'dimension': 'region'},
        })

    def test_http_status(self):
        self.assertEqual(InvalidYear.http_status, 400)
        self.assertEqual(InvalidRecord.http_status, 400)
        self.assertEqual(InvalidAmount.http_status, 400)
        self.assertEqual(UpstreamFetchFailure.http_status, 500)

    def test_hierarchy(self):
        for cls in (InvalidYear, InvalidDimension, InvalidRecord, InvalidAmount, UpstreamFetchFailure):
            self.assertTrue(issubclass(cls, GestAJException))
        self.assertTrue(issubclass(InvalidAmount, InvalidRecord))


class TimeStampedMixinTest(TestCase):
    """Test cases for TimeStampedMixin"""

    def test_created_in_year(self):
        recent = Dossier.objects.create(numero='AJ-0001')
        older = Dossier.objects.create(numero='AJ-0002')
        Dossier.objects.filter(pk=older.pk).update(
            created_at=timezone.now().replace(year=2021, month=3, day=1)
        )

        self.assertEqual(list(Dossier.created_in_year(timezone.now().year)), [recent])
        self.assertEqual(list(Dossier.created_in_year(2021)), [older])
        self.assertFalse(Dossier.created_in_year(2019).exists())

    def test_public_id_is_set(self):
        first = Dossier.objects.create(numero='AJ-0003')
        second = Dossier.objects.create(numero='AJ-0004')

        self.assertIsNotNone(first.public_id)
        self.assertNotEqual(first.public_id, second.public_id)
