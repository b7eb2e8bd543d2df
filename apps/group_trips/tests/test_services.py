"""
Service layer unit tests for group_trips app.

Tests cover:
- Business logic validation
- Membership rules
- Cent-precise expense splitting
- Invite emails
"""

import pytest
from datetime import date
from decimal import Decimal
from uuid import uuid4

from django.core import mail
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.group_trips.models import GroupTrip, TripExpense, DocumentType
from apps.group_trips.services import (
    create_group_trip,
    get_trip_for_member,
    update_group_trip,
    delete_group_trip,
    add_members,
    remove_member,
    add_trip_expense,
    upload_document,
    calculate_splits,
    get_expense_summary,
)
from apps.group_trips.services.exceptions import (
    GroupTripNotFoundError,
    MemberNotFoundError,
    NotTripMemberError,
    NotTripCreatorError,
    CannotRemoveCreatorError,
    InvalidTripDatesError,
    DocumentTooLargeError,
)


# =============================================================================
# Trip Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestTripManagement:
    """Tests for trip_management.py service functions."""

    def test_create_adds_creator_and_invitees(self, creator, member_user):
        trip = create_group_trip(name='Rome', creator=creator, members=['member', 'member@example.com'])

        assert trip.members.count() == 2
        assert trip.has_member(creator)
        assert trip.has_member(member_user)

    def test_create_ignores_creator_in_invitees(self, creator):
        trip = create_group_trip(name='Solo', creator=creator, members=['creator'])

        assert list(trip.members.all()) == [creator]

    def test_create_unknown_member_rolls_back(self, creator):
        with pytest.raises(MemberNotFoundError):
            create_group_trip(name='Rome', creator=creator, members=['ghost'])

        assert not GroupTrip.objects.filter(name='Rome').exists()

    def test_create_rejects_inverted_dates(self, creator):
        with pytest.raises(InvalidTripDatesError):
            create_group_trip(
                name='Rome',
                creator=creator,
                start_date=date(2026, 5, 2),
                end_date=date(2026, 5, 1),
            )

    def test_create_emails_invitees(self, creator, member_user, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            create_group_trip(name='Rome', creator=creator, members=['member'])

        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ['member@example.com']
        assert 'Rome' in mail.outbox[0].subject

    def test_get_trip_non_member(self, trip, other_user):
        with pytest.raises(NotTripMemberError):
            get_trip_for_member(trip_id=trip.id, user=other_user)

    def test_get_trip_invalid_id(self, member_user):
        with pytest.raises(GroupTripNotFoundError):
            get_trip_for_member(trip_id='not-a-uuid', user=member_user)

    def test_update_keeps_date_order(self, trip, creator):
        with pytest.raises(InvalidTripDatesError):
            update_group_trip(trip_id=trip.id, user=creator, end_date=date(2026, 6, 1))

    def test_update_by_member_rejected(self, trip, member_user):
        with pytest.raises(NotTripCreatorError):
            update_group_trip(trip_id=trip.id, user=member_user, name='Mine now')

    def test_delete_missing_trip(self, creator):
        with pytest.raises(GroupTripNotFoundError):
            delete_group_trip(trip_id=uuid4(), user=creator)


# =============================================================================
# Membership Service Tests
# =============================================================================

@pytest.mark.django_db
class TestMembershipManagement:
    """Tests for membership_management.py service functions."""

    def test_add_members_skips_existing(self, trip, member_user, other_user):
        add_members(trip_id=trip.id, identifiers=['member', 'outsider'], added_by=member_user)

        assert trip.members.count() == 3

    def test_add_members_emails_only_new(self, trip, creator, other_user, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            add_members(trip_id=trip.id, identifiers=['member', 'outsider'], added_by=creator)

        assert [message.to for message in mail.outbox] == [['other@example.com']]

    def test_add_members_requires_membership(self, trip, other_user):
        with pytest.raises(NotTripMemberError):
            add_members(trip_id=trip.id, identifiers=['outsider'], added_by=other_user)

    def test_creator_cannot_be_removed(self, trip, creator):
        with pytest.raises(CannotRemoveCreatorError):
            remove_member(trip_id=trip.id, member_id=creator.id, removed_by=creator)

    def test_member_cannot_remove_others(self, trip, creator, member_user, other_user):
        trip.members.add(other_user)

        with pytest.raises(NotTripCreatorError):
            remove_member(trip_id=trip.id, member_id=other_user.id, removed_by=member_user)

        assert trip.has_member(other_user)


# =============================================================================
# Planning Service Tests
# =============================================================================

@pytest.mark.django_db
class TestPlanning:
    """Tests for planning.py service functions."""

    def test_expense_requires_membership(self, trip, other_user):
        with pytest.raises(NotTripMemberError):
            add_trip_expense(trip_id=trip.id, user=other_user, description='Taxi', amount=Decimal('20.00'))

    def test_upload_detects_image(self, trip, member_user, media_root):
        upload = SimpleUploadedFile('view.JPG', b'fake image bytes', content_type='image/jpeg')
        document = upload_document(trip_id=trip.id, user=member_user, name='', uploaded_file=upload)

        assert document.file_type == DocumentType.IMAGE
        assert document.name == 'view.JPG'
        assert (media_root / document.file.name).exists()

    def test_upload_too_large(self, trip, member_user, media_root, settings):
        settings.MAX_DOCUMENT_SIZE_MB = 0
        upload = SimpleUploadedFile('notes.txt', b'x', content_type='text/plain')

        with pytest.raises(DocumentTooLargeError):
            upload_document(trip_id=trip.id, user=member_user, name='Notes', uploaded_file=upload)


# =============================================================================
# Expense Split Tests
# =============================================================================

class TestCalculateSplits:
    """Tests for calculate_splits()."""

    def test_even_split(self):
        shares = calculate_splits(Decimal('90.00'), ['a', 'b', 'c'])

        assert [amount for _, amount in shares] == [Decimal('30.00')] * 3

    def test_remainder_goes_to_first_participants(self):
        shares = calculate_splits(Decimal('100.00'), ['a', 'b', 'c'])

        assert shares == [
            ('a', Decimal('33.34')),
            ('b', Decimal('33.33')),
            ('c', Decimal('33.33')),
        ]

    def test_sum_matches_total(self):
        total = Decimal('10.01')
        shares = calculate_splits(total, list(range(7)))

        assert sum(amount for _, amount in shares) == total

    def test_no_participants(self):
        with pytest.raises(ValueError):
            calculate_splits(Decimal('10.00'), [])


@pytest.mark.django_db
class TestExpenseSummary:
    """Tests for get_expense_summary()."""

    def test_balances(self, trip, creator, member_user, trip_expense):
        TripExpense.objects.create(
            group_trip=trip,
            description='Fuel',
            amount=Decimal('20.01'),
            added_by=member_user,
        )

        summary = get_expense_summary(trip_id=trip.id, user=member_user)

        assert summary['total'] == Decimal('120.01')
        rows = {row['username']: row for row in summary['per_member']}
        assert rows['creator']['share'] == Decimal('60.01')
        assert rows['member']['share'] == Decimal('60.00')
        assert rows['creator']['balance'] == Decimal('39.99')
        assert rows['member']['balance'] == Decimal('-39.99')

    def test_empty_trip(self, trip, creator):
        summary = get_expense_summary(trip_id=trip.id, user=creator)

        assert summary['total'] == Decimal('0.00')
        assert all(row['share'] == Decimal('0.00') for row in summary['per_member'])
