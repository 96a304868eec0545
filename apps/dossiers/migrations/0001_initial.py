# Generated migration for dossiers, conventions and payments

from decimal import Decimal
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('referentiel', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Dossier',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('public_id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, help_text='Stable identifier exposed outside the database.', unique=True, verbose_name='Public ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Set once when the row is inserted.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Refreshed on every save.', verbose_name='Updated At')),
                ('numero', models.CharField(max_length=30, unique=True, verbose_name='File Number')),
                ('sgami', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='dossiers', to='referentiel.sgami', verbose_name='SGAMI')),
            ],
            options={
                'verbose_name': 'File',
                'verbose_name_plural': 'Files',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='Convention',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('public_id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, help_text='Stable identifier exposed outside the database.', unique=True, verbose_name='Public ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Set once when the row is inserted.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Refreshed on every save.', verbose_name='Updated At')),
                ('type', models.CharField(choices=[('CONVENTION', 'Fee Agreement'), ('AVENANT', 'Amendment')], default='CONVENTION', max_length=15, verbose_name='Type')),
                ('montant_ht', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Amount (pre-tax)')),
                ('date_creation', models.DateField(verbose_name='Creation Date')),
                ('date_retour_signe', models.DateField(blank=True, null=True, verbose_name='Signed Return Date')),
                ('dossier', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='conventions', to='dossiers.dossier', verbose_name='File')),
            ],
            options={
                'verbose_name': 'Convention',
                'verbose_name_plural': 'Conventions',
                'ordering': ['-date_creation'],
            },
        ),
        migrations.CreateModel(
            name='Paiement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('public_id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, help_text='Stable identifier exposed outside the database.', unique=True, verbose_name='Public ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Set once when the row is inserted.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Refreshed on every save.', verbose_name='Updated At')),
                ('montant_ht', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Amount (pre-tax)')),
                ('montant_ttc', models.DecimalField(decimal_places=2, max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Amount (tax-inclusive)')),
                ('date_emission', models.DateField(verbose_name='Issue Date')),
                ('dossier', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='paiements', to='dossiers.dossier', verbose_name='File')),
                ('pce', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='paiements', to='referentiel.pce', verbose_name='PCE')),
                ('sgami', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='paiements', to='referentiel.sgami', verbose_name='SGAMI')),
            ],
            options={
                'verbose_name': 'Payment',
                'verbose_name_plural': 'Payments',
                'ordering': ['date_emission', 'pk'],
            },
        ),
    ]
