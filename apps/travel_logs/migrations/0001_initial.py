# Generated manually for the travel diary travel_logs app

import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('group_trips', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='TravelLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('destination', models.CharField(db_index=True, max_length=200)),
                ('description', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('public', 'Public'), ('private', 'Private'), ('visited', 'Visited'), ('wishlist', 'Wishlist'), ('ongoing', 'Ongoing'), ('dream', 'Dream')], db_index=True, default='private', max_length=20)),
                ('is_public', models.BooleanField(default=False)),
                ('latitude', models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(-90), django.core.validators.MaxValueValidator(90)])),
                ('longitude', models.FloatField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(-180), django.core.validators.MaxValueValidator(180)])),
                ('date', models.DateTimeField(default=django.utils.timezone.now)),
                ('group_trip', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='shared_travel_logs', to='group_trips.grouptrip')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='travel_logs', to=settings.AUTH_USER_MODEL)),
                ('likes', models.ManyToManyField(blank=True, related_name='liked_travel_logs', to=settings.AUTH_USER_MODEL)),
                ('bookmarks', models.ManyToManyField(blank=True, related_name='bookmarked_travel_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'travel_logs',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='TravelLogMembership',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('note', models.TextField(blank=True)),
                ('added_at', models.DateTimeField(auto_now_add=True)),
                ('travel_log', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='travel_logs.travellog')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='travel_log_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'travel_log_members',
                'ordering': ['added_at'],
            },
        ),
        migrations.AddField(
            model_name='travellog',
            name='members',
            field=models.ManyToManyField(blank=True, related_name='shared_travel_logs', through='travel_logs.TravelLogMembership', to=settings.AUTH_USER_MODEL),
        ),
        migrations.AddIndex(
            model_name='travellog',
            index=models.Index(fields=['user', '-date'], name='travel_log_user_date_idx'),
        ),
        migrations.AddConstraint(
            model_name='travellogmembership',
            constraint=models.UniqueConstraint(fields=('travel_log', 'user'), name='unique_travel_log_member'),
        ),
    ]
