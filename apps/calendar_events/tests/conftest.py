import pytest
from datetime import datetime, timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.calendar_events.models import CalendarEvent


def client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def user(db):
    return User.objects.create_user(email='planner@example.com', username='planner', password='TestPass123!')


@pytest.fixture
def other_user(db):
    return User.objects.create_user(email='guest@example.com', username='guest', password='TestPass123!')


@pytest.fixture
def authenticated_client(user):
    return client_for(user)


@pytest.fixture
def other_client(other_user):
    return client_for(other_user)


@pytest.fixture
def events(user):
    """Three events in May, June and July."""
    return [
        CalendarEvent.objects.create(
            user=user,
            title=title,
            start=datetime(2026, month, 10, 9, tzinfo=timezone.utc),
            end=datetime(2026, month, 12, 18, tzinfo=timezone.utc),
        )
        for title, month in [('July flight', 7), ('May museum', 5), ('June festival', 6)]
    ]
