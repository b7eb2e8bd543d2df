import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.group_trips.models import GroupTrip, ItineraryItem, TripExpense


def client_for(user):
    """Return an API client authenticated as the given user."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def creator(db):
    """Create and return the trip creator."""
    return User.objects.create_user(
        email='creator@example.com',
        username='creator',
        password='TestPass123!',
    )


@pytest.fixture
def member_user(db):
    """Create and return a trip member."""
    return User.objects.create_user(
        email='member@example.com',
        username='member',
        password='TestPass123!',
    )


@pytest.fixture
def other_user(db):
    """Create and return a user outside the trip."""
    return User.objects.create_user(
        email='other@example.com',
        username='outsider',
        password='TestPass123!',
    )


@pytest.fixture
def creator_client(creator):
    return client_for(creator)


@pytest.fixture
def member_client(member_user):
    return client_for(member_user)


@pytest.fixture
def other_client(other_user):
    return client_for(other_user)


@pytest.fixture
def trip(db, creator, member_user):
    """Create a trip with the creator and one member."""
    trip = GroupTrip.objects.create(
        name='Alps Hike',
        description='Three days in the mountains',
        creator=creator,
        start_date=date(2026, 7, 1),
        end_date=date(2026, 7, 3),
    )
    trip.members.add(creator, member_user)
    return trip


@pytest.fixture
def itinerary_item(trip, creator):
    return ItineraryItem.objects.create(
        group_trip=trip,
        name='Summit',
        date=date(2026, 7, 2),
        location='Zugspitze',
        added_by=creator,
    )


@pytest.fixture
def trip_expense(trip, creator):
    return TripExpense.objects.create(
        group_trip=trip,
        description='Hut booking',
        amount=Decimal('100.00'),
        category='lodging',
        added_by=creator,
    )


@pytest.fixture
def media_root(settings, tmp_path):
    """Store uploaded documents in a temporary directory."""
    settings.MEDIA_ROOT = tmp_path
    return tmp_path
