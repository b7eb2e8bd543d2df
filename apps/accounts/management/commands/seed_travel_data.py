"""
Management command to create demo data for the travel diary API.

Usage:
    python manage.py seed_travel_data [--clear]

This creates:
- 4 users (admin, alice, bob, charlie)
- Public and private travel logs with likes and bookmarks
- Personal expenses
- A group trip with itinerary items and shared expenses
- Calendar events
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User
from apps.calendar_events.models import CalendarEvent
from apps.expenses.models import Expense
from apps.group_trips.models import GroupTrip, ItineraryItem, TripExpense
from apps.travel_logs.models import TravelLog, TravelLogStatus

SEED_EMAILS = ['alice@example.com', 'bob@example.com', 'charlie@example.com']


class Command(BaseCommand):
    help = 'Create demo travel data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Remove previously seeded data first',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating demo data...')

        users = self.create_users()
        logs = self.create_travel_logs(users)
        trip = self.create_group_trip(users)
        self.create_expenses(users, logs, trip)
        self.create_calendar_events(users)

        self.stdout.write(self.style.SUCCESS('Demo data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        for email in SEED_EMAILS:
            self.stdout.write(f'  {email} / password123')

    def clear_data(self):
        """Delete the seeded users; their data cascades."""
        User.objects.filter(email__in=SEED_EMAILS + ['admin@example.com']).delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'username': 'admin',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        profiles = {
            'alice': ('Slow traveller, always looking for the next mountain.', ['hiking', 'photography']),
            'bob': ('City breaks and street food.', ['food', 'cities']),
            'charlie': ('Backpacker on a budget.', ['budget', 'islands']),
        }

        users = {'admin': admin}
        for username, (bio, tags) in profiles.items():
            user, _ = User.objects.get_or_create(
                email=f'{username}@example.com',
                defaults={'username': username, 'bio': bio, 'travel_tags': tags}
            )
            user.set_password('password123')
            user.save()
            users[username] = user

        return users

    def create_travel_logs(self, users):
        self.stdout.write('  Creating travel logs...')

        entries = [
            ('alice', 'Sunrise on Triglav', 'Julian Alps', TravelLogStatus.VISITED, True),
            ('alice', 'Patagonia someday', 'Torres del Paine', TravelLogStatus.DREAM, False),
            ('bob', 'Tapas crawl', 'Seville', TravelLogStatus.PUBLIC, False),
            ('bob', 'Tokyo next spring', 'Tokyo', TravelLogStatus.WISHLIST, False),
            ('charlie', 'Island hopping', 'Cyclades', TravelLogStatus.ONGOING, True),
        ]

        logs = {}
        for owner, title, destination, log_status, is_public in entries:
            log, _ = TravelLog.objects.get_or_create(
                user=users[owner],
                title=title,
                defaults={
                    'destination': destination,
                    'status': log_status,
                    'is_public': is_public,
                    'description': f'Notes from {destination}.',
                }
            )
            logs[title] = log

        logs['Sunrise on Triglav'].likes.add(users['bob'], users['charlie'])
        logs['Tapas crawl'].likes.add(users['alice'])
        logs['Tapas crawl'].bookmarks.add(users['charlie'])
        logs['Island hopping'].bookmarks.add(users['alice'], users['bob'])
        return logs

    def create_group_trip(self, users):
        self.stdout.write('  Creating group trip...')

        start = date.today() + timedelta(days=30)
        trip, created = GroupTrip.objects.get_or_create(
            name='Dolomites hut to hut',
            creator=users['alice'],
            defaults={
                'description': 'Four days on the Alta Via 1.',
                'start_date': start,
                'end_date': start + timedelta(days=3),
            }
        )
        trip.members.add(users['alice'], users['bob'], users['charlie'])

        if created:
            for offset, (name, location) in enumerate([
                ('Lago di Braies start', 'Braies'),
                ('Rifugio Lagazuoi', 'Passo Falzarego'),
                ('Cinque Torri', 'Cortina'),
                ('Descent to town', 'Belluno'),
            ]):
                ItineraryItem.objects.create(
                    group_trip=trip,
                    name=name,
                    location=location,
                    date=start + timedelta(days=offset),
                    added_by=users['alice'],
                )
            TripExpense.objects.create(
                group_trip=trip, description='Hut bookings', amount=Decimal('360.00'),
                category='lodging', added_by=users['alice'],
            )
            TripExpense.objects.create(
                group_trip=trip, description='Train tickets', amount=Decimal('95.40'),
                category='transport', added_by=users['bob'],
            )
        return trip

    def create_expenses(self, users, logs, trip):
        self.stdout.write('  Creating expenses...')

        entries = [
            ('alice', 'Via ferrata gear rental', Decimal('45.00'), 'activities', logs['Sunrise on Triglav'], None),
            ('bob', 'Flamenco show', Decimal('30.00'), 'activities', logs['Tapas crawl'], None),
            ('bob', 'Tapas dinner', Decimal('38.50'), 'food', logs['Tapas crawl'], None),
            ('charlie', 'Ferry Naxos to Paros', Decimal('29.00'), 'transport', logs['Island hopping'], None),
            ('charlie', 'Rain jacket', Decimal('79.90'), 'gear', None, trip),
        ]
        for owner, description, amount, category, log, group_trip in entries:
            Expense.objects.get_or_create(
                user=users[owner],
                description=description,
                defaults={
                    'amount': amount,
                    'category': category,
                    'travel_log': log,
                    'group_trip': group_trip,
                }
            )

    def create_calendar_events(self, users):
        self.stdout.write('  Creating calendar events...')

        base = datetime.now(timezone.utc).replace(hour=9, minute=0, second=0, microsecond=0)
        entries = [
            ('alice', 'Train to Cortina', 30, 4, 'Venezia Santa Lucia'),
            ('bob', 'Flight to Tokyo', 120, 14, 'Haneda'),
            ('charlie', 'Ferry to Milos', 7, 3, 'Piraeus'),
        ]
        for owner, title, days_ahead, hours, location in entries:
            start = base + timedelta(days=days_ahead)
            CalendarEvent.objects.get_or_create(
                user=users[owner],
                title=title,
                defaults={'start': start, 'end': start + timedelta(hours=hours), 'location': location}
            )
