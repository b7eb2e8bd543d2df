import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.expenses.models import Expense
from apps.travel_logs.models import TravelLog


def client_for(user):
    """Return an API client authenticated as the given user."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email='spender@example.com',
        username='spender',
        password='TestPass123!',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email='saver@example.com',
        username='saver',
        password='TestPass123!',
    )


@pytest.fixture
def authenticated_client(user):
    return client_for(user)


@pytest.fixture
def other_client(other_user):
    return client_for(other_user)


@pytest.fixture
def travel_log(user):
    return TravelLog.objects.create(user=user, title='Paris weekend', destination='Paris')


@pytest.fixture
def expense(user, travel_log):
    """An expense linked to the user's travel log."""
    return Expense.objects.create(
        user=user,
        description='Museum tickets',
        amount=Decimal('34.00'),
        category='activities',
        travel_log=travel_log,
    )
