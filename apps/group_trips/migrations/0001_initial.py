# Generated manually for the travel diary group_trips app

import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import apps.group_trips.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='GroupTrip',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('start_date', models.DateField(blank=True, null=True)),
                ('end_date', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('creator', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='created_group_trips', to=settings.AUTH_USER_MODEL)),
                ('members', models.ManyToManyField(blank=True, related_name='group_trips', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'group_trips',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='ItineraryItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('date', models.DateField()),
                ('location', models.CharField(blank=True, max_length=200)),
                ('description', models.TextField(blank=True)),
                ('added_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('group_trip', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='itinerary', to='group_trips.grouptrip')),
            ],
            options={
                'db_table': 'group_trip_itinerary_items',
                'ordering': ['date', 'name'],
            },
        ),
        migrations.CreateModel(
            name='TripExpense',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('description', models.CharField(max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('category', models.CharField(blank=True, max_length=100)),
                ('date', models.DateTimeField(auto_now_add=True)),
                ('added_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='group_trip_expenses', to=settings.AUTH_USER_MODEL)),
                ('group_trip', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='expenses', to='group_trips.grouptrip')),
            ],
            options={
                'db_table': 'group_trip_expenses',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='TripDocument',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('file', models.FileField(upload_to=apps.group_trips.models.trip_document_path)),
                ('file_type', models.CharField(choices=[('image', 'Image'), ('pdf', 'PDF'), ('other', 'Other')], default='other', max_length=10)),
                ('upload_date', models.DateTimeField(auto_now_add=True)),
                ('group_trip', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='group_trips.grouptrip')),
                ('uploaded_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='uploaded_trip_documents', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'group_trip_documents',
                'ordering': ['-upload_date'],
            },
        ),
    ]
