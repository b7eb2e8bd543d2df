"""
Tests for token issuing and header handling.
"""

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.accounts.services import issue_tokens


@pytest.mark.django_db
class TestTokens:

    def test_access_token_claims(self, user):
        """Access token decodes to id, username and email."""
        tokens = issue_tokens(user)
        payload = AccessToken(tokens['token'])

        assert payload['id'] == str(user.id)
        assert payload['username'] == 'wanderer'
        assert payload['email'] == 'testuser@example.com'

    def test_bearer_header(self, user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens(user)['token']}")

        response = client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK

    def test_x_auth_token_header(self, user):
        client = APIClient()
        client.credentials(HTTP_X_AUTH_TOKEN=issue_tokens(user)['token'])

        response = client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['username'] == 'wanderer'

    def test_invalid_token(self):
        client = APIClient()
        client.credentials(HTTP_X_AUTH_TOKEN='not-a-jwt')

        response = client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'msg' in response.data

    def test_refresh(self, api_client, user):
        refresh = issue_tokens(user)['refresh']

        response = api_client.post(reverse('users:token-refresh'), {'refresh': refresh})

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data
