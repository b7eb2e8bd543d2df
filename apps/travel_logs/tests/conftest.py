import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.travel_logs.models import TravelLog, TravelLogStatus


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
def user(db):
    """Create and return the log owner."""
    return User.objects.create_user(
        email='owner@example.com',
        username='owner',
        password='TestPass123!',
    )


@pytest.fixture
def other_user(db):
    """Create and return another traveller."""
    return User.objects.create_user(
        email='other@example.com',
        username='other',
        password='TestPass123!',
    )


@pytest.fixture
def authenticated_client(user):
    return client_for(user)


@pytest.fixture
def other_client(other_user):
    return client_for(other_user)


@pytest.fixture
def private_log(user):
    """A private log owned by user."""
    return TravelLog.objects.create(
        user=user,
        title='Kyoto in autumn',
        destination='Kyoto',
        description='Temples and maple trees',
    )


@pytest.fixture
def public_log(user):
    """A log shared with the community."""
    return TravelLog.objects.create(
        user=user,
        title='Reykjavik road trip',
        destination='Iceland',
        status=TravelLogStatus.VISITED,
        is_public=True,
    )
