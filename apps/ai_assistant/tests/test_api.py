import pytest
from unittest.mock import patch, MagicMock
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.ai_assistant.client import AIProviderError, generate_text
from apps.ai_assistant.services import build_prompt, LENGTH_HINT


@pytest.fixture
def user(db):
    return User.objects.create_user(email='dreamer@example.com', username='dreamer', password='TestPass123!')


@pytest.fixture
def authenticated_client(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


class TestBuildPrompt:
    """Tests for build_prompt()."""

    def test_itinerary_prompt(self):
        prompt = build_prompt('itinerary', destination='Porto', interests='wine', days=3)

        assert prompt.startswith('Generate a 3-day travel itinerary for Porto focusing on wine.')
        assert prompt.endswith(LENGTH_HINT)

    def test_packing_prompt(self):
        prompt = build_prompt('packing-list', destination='Oslo', duration=5, season='winter')

        assert 'for 5 days' in prompt
        assert 'weather in winter' in prompt

    def test_budget_prompt(self):
        prompt = build_prompt('budget-estimate', destination='Tokyo', duration=10)

        assert 'accommodation, flights, food, and activities' in prompt


@pytest.mark.django_db
class TestAIAssistant:
    """Tests for POST /api/ai-assistant/"""

    url = '/api/ai-assistant/'

    @patch('apps.ai_assistant.services.generate_text', return_value='Day 1: Ribeira')
    def test_itinerary(self, mock_generate, authenticated_client):
        response = authenticated_client.post(
            reverse('ai_assistant:generate'),
            {'type': 'itinerary', 'destination': 'Porto', 'interests': 'food'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'response': 'Day 1: Ribeira'}
        prompt = mock_generate.call_args.args[0]
        assert 'Generate a 2-day travel itinerary for Porto' in prompt

    def test_unknown_type(self, authenticated_client):
        response = authenticated_client.post(self.url, {'type': 'horoscope', 'destination': 'Porto'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['msg'] == 'Invalid AI assistant type'

    def test_missing_destination(self, authenticated_client):
        response = authenticated_client.post(self.url, {'type': 'budget-estimate', 'duration': 3}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'destination' in response.data

    @patch('apps.ai_assistant.services.generate_text', side_effect=AIProviderError('quota exceeded'))
    def test_provider_failure(self, mock_generate, authenticated_client):
        response = authenticated_client.post(
            self.url,
            {'type': 'packing-list', 'destination': 'Oslo', 'duration': 4, 'season': 'winter'},
            format='json'
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'msg': 'Error generating AI response', 'error': 'quota exceeded'}

    def test_requires_login(self):
        response = APIClient().post(self.url, {'type': 'itinerary', 'destination': 'Porto'}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestGenerateText:
    """Tests for the Gemini client wrapper."""

    def test_missing_api_key(self, settings):
        settings.GEMINI_API_KEY = ''

        with pytest.raises(AIProviderError):
            generate_text('hello')

    @patch('apps.ai_assistant.client._client')
    def test_returns_text(self, mock_client, settings):
        settings.GEMINI_API_KEY = 'test-key'
        settings.GEMINI_MODEL = 'gemini-test'
        mock_client.return_value.models.generate_content.return_value = MagicMock(text='  Pack a scarf  ')

        assert generate_text('packing?') == 'Pack a scarf'
        mock_client.return_value.models.generate_content.assert_called_once_with(
            model='gemini-test',
            contents='packing?',
        )

    @patch('apps.ai_assistant.client._client')
    def test_wraps_provider_errors(self, mock_client, settings):
        settings.GEMINI_API_KEY = 'test-key'
        mock_client.return_value.models.generate_content.side_effect = RuntimeError('503 unavailable')

        with pytest.raises(AIProviderError, match='503 unavailable'):
            generate_text('itinerary?')
