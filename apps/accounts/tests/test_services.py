"""
Service layer unit tests for accounts app.
"""

import pytest

from apps.accounts.models import User
from apps.accounts.services import (
    register_user,
    authenticate_user,
    update_profile,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    UsernameTakenError,
)


@pytest.mark.django_db
class TestUserServices:

    def test_register_normalizes_email_domain(self):
        user = register_user(email='Traveller@EXAMPLE.COM', username='traveller', password='SecurePass123!')

        assert user.email == 'Traveller@example.com'
        assert user.check_password('SecurePass123!')

    def test_register_duplicate_email_case_insensitive(self, user):
        with pytest.raises(UserRegistrationError):
            register_user(email='TESTUSER@example.com', username='copycat', password='SecurePass123!')

    def test_authenticate_case_insensitive_email(self, user):
        assert authenticate_user(email='TestUser@Example.com', password='TestPass123!') == user

    def test_authenticate_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='nope')

    def test_authenticate_inactive(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=user_inactive.email, password='TestPass123!')

    def test_update_profile_only_given_fields(self, user):
        update_profile(user=user, bio='New bio')

        user.refresh_from_db()
        assert user.bio == 'New bio'
        assert user.travel_tags == ['beaches']

    def test_update_profile_username_clash(self, user, other_user):
        with pytest.raises(UsernameTakenError):
            update_profile(user=user, username='NOMAD')

    def test_find_by_identifier(self, user):
        assert User.objects.find_by_identifier('WANDERER') == user
        assert User.objects.find_by_identifier('testuser@example.com') == user
        assert User.objects.find_by_identifier('ghost') is None
