import pytest
from django.core import mail
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework import status
from apps.group_trips.models import GroupTrip, TripDocument


# =============================================================================
# Group Trip CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestGroupTripList:
    """Tests for GET /api/groupTrips/"""

    def test_list_returns_member_trips(self, member_client, trip):
        url = reverse('group_trips:group-trip-list')
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['name'] == 'Alps Hike'

    def test_list_excludes_other_trips(self, other_client, trip):
        url = reverse('group_trips:group-trip-list')
        response = other_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_list_unauthenticated(self, api_client):
        url = reverse('group_trips:group-trip-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'msg' in response.data


@pytest.mark.django_db
class TestGroupTripCreate:
    """Tests for POST /api/groupTrips/"""

    def test_create_trip_with_members(self, creator_client, creator, member_user):
        url = reverse('group_trips:group-trip-list')
        data = {'name': 'Lisbon', 'members': ['member']}
        response = creator_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        trip = GroupTrip.objects.get(name='Lisbon')
        assert trip.creator == creator
        assert trip.has_member(creator)
        assert trip.has_member(member_user)
        assert len(response.data['members']) == 2

    def test_create_trip_multiline_name_still_succeeds(self, creator_client, member_user, django_capture_on_commit_callbacks):
        url = reverse('group_trips:group-trip-list')
        data = {'name': 'Alps\nHike', 'members': ['member']}

        with django_capture_on_commit_callbacks(execute=True):
            response = creator_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert len(mail.outbox) == 1
        assert '\n' not in mail.outbox[0].subject

    def test_create_trip_unknown_member(self, creator_client):
        url = reverse('group_trips:group-trip-list')
        data = {'name': 'Lisbon', 'members': ['nobody@example.com']}
        response = creator_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['msg'] == 'User nobody@example.com not found'
        assert not GroupTrip.objects.filter(name='Lisbon').exists()

    def test_create_trip_missing_name(self, creator_client):
        url = reverse('group_trips:group-trip-list')
        response = creator_client.post(url, {'description': 'No name'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data

    def test_create_trip_inverted_dates(self, creator_client):
        url = reverse('group_trips:group-trip-list')
        data = {'name': 'Backwards', 'start_date': '2026-05-10', 'end_date': '2026-05-01'}
        response = creator_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestGroupTripDetail:
    """Tests for GET /api/groupTrips/{id}/"""

    def test_member_can_view(self, member_client, trip, itinerary_item, trip_expense):
        url = reverse('group_trips:group-trip-detail', kwargs={'pk': trip.id})
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['itinerary'][0]['name'] == 'Summit'
        assert response.data['expenses'][0]['description'] == 'Hut booking'
        assert response.data['documents'] == []

    def test_non_member_rejected(self, other_client, trip):
        url = reverse('group_trips:group-trip-detail', kwargs={'pk': trip.id})
        response = other_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['msg'] == 'User not authorized'

    def test_missing_trip(self, member_client):
        url = reverse('group_trips:group-trip-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = member_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['msg'] == 'Group trip not found'


@pytest.mark.django_db
class TestGroupTripUpdateDelete:
    """Tests for PUT/PATCH/DELETE /api/groupTrips/{id}/"""

    def test_creator_can_update(self, creator_client, trip):
        url = reverse('group_trips:group-trip-detail', kwargs={'pk': trip.id})
        response = creator_client.patch(url, {'name': 'Alps Traverse'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        trip.refresh_from_db()
        assert trip.name == 'Alps Traverse'

    def test_member_cannot_update(self, member_client, trip):
        url = reverse('group_trips:group-trip-detail', kwargs={'pk': trip.id})
        response = member_client.patch(url, {'name': 'Hijacked'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        trip.refresh_from_db()
        assert trip.name == 'Alps Hike'

    def test_creator_can_delete(self, creator_client, trip):
        url = reverse('group_trips:group-trip-detail', kwargs={'pk': trip.id})
        response = creator_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['msg'] == 'Group trip removed'
        assert not GroupTrip.objects.filter(id=trip.id).exists()

        # Deleted trip is gone for everyone
        response = creator_client.get(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_member_cannot_delete(self, member_client, trip):
        url = reverse('group_trips:group-trip-detail', kwargs={'pk': trip.id})
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert GroupTrip.objects.filter(id=trip.id).exists()


# =============================================================================
# Membership Tests
# =============================================================================

@pytest.mark.django_db
class TestTripMembers:
    """Tests for PUT/DELETE /api/groupTrips/{id}/members/"""

    def test_member_can_add_members(self, member_client, trip, other_user):
        url = reverse('group_trips:group-trip-members', kwargs={'pk': trip.id})
        response = member_client.put(url, {'new_members': ['other@example.com']}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert trip.has_member(other_user)

    def test_non_member_cannot_add_members(self, other_client, trip, other_user):
        url = reverse('group_trips:group-trip-members', kwargs={'pk': trip.id})
        response = other_client.put(url, {'new_members': ['outsider']}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert not trip.has_member(other_user)

    def test_add_unknown_member(self, member_client, trip):
        url = reverse('group_trips:group-trip-members', kwargs={'pk': trip.id})
        response = member_client.put(url, {'new_members': ['ghost']}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_creator_removes_member(self, creator_client, trip, member_user):
        url = reverse(
            'group_trips:group-trip-remove-member',
            kwargs={'pk': trip.id, 'member_id': member_user.id}
        )
        response = creator_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not trip.has_member(member_user)

    def test_member_leaves_trip(self, member_client, trip, member_user):
        url = reverse(
            'group_trips:group-trip-remove-member',
            kwargs={'pk': trip.id, 'member_id': member_user.id}
        )
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['msg'] == 'You left the group trip'

    def test_member_cannot_remove_creator(self, member_client, trip, creator):
        url = reverse(
            'group_trips:group-trip-remove-member',
            kwargs={'pk': trip.id, 'member_id': creator.id}
        )
        response = member_client.delete(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert trip.has_member(creator)

    def test_creator_removes_malformed_member_id(self, creator_client, trip, member_user):
        url = reverse(
            'group_trips:group-trip-remove-member',
            kwargs={'pk': trip.id, 'member_id': 'abc'}
        )
        response = creator_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['msg'] == 'Member not found'
        assert trip.has_member(member_user)

    def test_creator_removes_non_member(self, creator_client, trip, other_user):
        url = reverse(
            'group_trips:group-trip-remove-member',
            kwargs={'pk': trip.id, 'member_id': other_user.id}
        )
        response = creator_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Planning Tests
# =============================================================================

@pytest.mark.django_db
class TestTripPlanning:
    """Tests for itinerary, expenses and documents."""

    def test_add_itinerary_item(self, member_client, trip):
        url = reverse('group_trips:group-trip-itinerary', kwargs={'pk': trip.id})
        data = {'name': 'Lake swim', 'date': '2026-07-03', 'location': 'Eibsee'}
        response = member_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert trip.itinerary.filter(name='Lake swim').exists()

    def test_itinerary_requires_date(self, member_client, trip):
        url = reverse('group_trips:group-trip-itinerary', kwargs={'pk': trip.id})
        response = member_client.post(url, {'name': 'Somewhere'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_non_member_cannot_add_itinerary(self, other_client, trip):
        url = reverse('group_trips:group-trip-itinerary', kwargs={'pk': trip.id})
        data = {'name': 'Intrusion', 'date': '2026-07-03'}
        response = other_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_add_expense(self, member_client, trip, member_user):
        url = reverse('group_trips:group-trip-expenses', kwargs={'pk': trip.id})
        data = {'description': 'Groceries', 'amount': '45.50', 'category': 'food'}
        response = member_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['added_by']['id'] == str(member_user.id)

    def test_negative_expense_rejected(self, member_client, trip):
        url = reverse('group_trips:group-trip-expenses', kwargs={'pk': trip.id})
        data = {'description': 'Refund', 'amount': '-5.00'}
        response = member_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_upload_document(self, member_client, trip, media_root):
        url = reverse('group_trips:group-trip-documents', kwargs={'pk': trip.id})
        upload = SimpleUploadedFile('ticket.pdf', b'%PDF-1.4 test', content_type='application/pdf')
        response = member_client.post(url, {'document': upload, 'name': 'Train ticket'}, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['file_type'] == 'pdf'
        assert response.data['url'].startswith('http://testserver/media/')
        assert TripDocument.objects.filter(group_trip=trip, name='Train ticket').exists()

    def test_upload_without_file(self, member_client, trip, media_root):
        url = reverse('group_trips:group-trip-documents', kwargs={'pk': trip.id})
        response = member_client.post(url, {'name': 'Nothing'}, format='multipart')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_expense_summary(self, member_client, trip, trip_expense):
        url = reverse('group_trips:group-trip-expense-summary', kwargs={'pk': trip.id})
        response = member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == '100.00'
        assert response.data['member_count'] == 2
        shares = {row['username']: row['share'] for row in response.data['per_member']}
        assert shares == {'creator': '50.00', 'member': '50.00'}
