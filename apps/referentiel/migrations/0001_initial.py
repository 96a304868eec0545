# Generated migration for the master data models

from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Sgami',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('public_id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, help_text='Stable identifier exposed outside the database.', unique=True, verbose_name='Public ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Set once when the row is inserted.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Refreshed on every save.', verbose_name='Updated At')),
                ('nom', models.CharField(max_length=100, unique=True, verbose_name='Name')),
            ],
            options={
                'verbose_name': 'SGAMI',
                'verbose_name_plural': 'SGAMI',
                'ordering': ['nom'],
            },
        ),
        migrations.CreateModel(
            name='Pce',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('public_id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, help_text='Stable identifier exposed outside the database.', unique=True, verbose_name='Public ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, help_text='Set once when the row is inserted.', verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, help_text='Refreshed on every save.', verbose_name='Updated At')),
                ('ordre', models.PositiveIntegerField(help_text='Display sequence of the budget line.', unique=True, verbose_name='Order')),
                ('pce_detaille', models.CharField(max_length=255, verbose_name='Detailed label')),
                ('pce_numerique', models.CharField(max_length=50, unique=True, verbose_name='Numeric code')),
                ('code_marchandise', models.CharField(blank=True, max_length=50, verbose_name='Goods code')),
            ],
            options={
                'verbose_name': 'PCE',
                'verbose_name_plural': 'PCE',
                'ordering': ['ordre'],
            },
        ),
    ]
