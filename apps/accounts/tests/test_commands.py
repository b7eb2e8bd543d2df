import pytest
from io import StringIO
from django.core.management import call_command

from apps.accounts.models import User
from apps.calendar_events.models import CalendarEvent
from apps.expenses.models import Expense
from apps.group_trips.models import GroupTrip
from apps.travel_logs.models import TravelLog


@pytest.mark.django_db
class TestSeedTravelData:

    def test_creates_demo_data(self):
        out = StringIO()
        call_command('seed_travel_data', stdout=out)

        assert 'Demo data created successfully!' in out.getvalue()
        assert User.objects.filter(email='alice@example.com').exists()
        assert TravelLog.objects.public().count() == 3
        assert GroupTrip.objects.get(name='Dolomites hut to hut').members.count() == 3
        assert Expense.objects.count() == 5
        assert CalendarEvent.objects.count() == 3

    def test_running_twice_does_not_duplicate(self):
        call_command('seed_travel_data', stdout=StringIO())
        call_command('seed_travel_data', stdout=StringIO())

        assert TravelLog.objects.count() == 5
        assert GroupTrip.objects.count() == 1

    def test_clear(self):
        call_command('seed_travel_data', stdout=StringIO())
        call_command('seed_travel_data', '--clear', stdout=StringIO())

        assert User.objects.filter(email='bob@example.com').count() == 1
        assert TravelLog.objects.count() == 5
