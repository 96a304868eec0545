# Generated migration for the annual budget model

from decimal import Decimal
import django.core.validators
from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='BudgetAnnuel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('public_id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, help_text='Stable identifier exposed outside the database.', unique=True, verbose_name='Public ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Set once when the row is inserted.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Refreshed on every save.', verbose_name='Updated At')),
                ('annee', models.PositiveIntegerField(unique=True, verbose_name='Year')),
                ('budget_base', models.DecimalField(decimal_places=2, max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Base Budget')),
                ('abondements', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Top-ups')),
            ],
            options={
                'verbose_name': 'Annual Budget',
                'verbose_name_plural': 'Annual Budgets',
                'ordering': ['-annee'],
            },
        ),
    ]
