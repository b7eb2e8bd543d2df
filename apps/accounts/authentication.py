from django.conf import settings
from rest_framework import HTTP_HEADER_ENCODING
from rest_framework_simplejwt.authentication import JWTAuthentication


class HeaderJWTAuthentication(JWTAuthentication):
    """
    JWT authentication that also accepts the token in ``x-auth-token``.

    ``Authorization: Bearer <token>`` takes precedence when both are sent.
    """

    def get_header(self, request):
        header = super().get_header(request)
        if header:
            return header

        raw_token = request.META.get(settings.AUTH_TOKEN_HEADER)
        if not raw_token:
            return None

        if isinstance(raw_token, str):
            raw_token = raw_token.encode(HTTP_HEADER_ENCODING)
        return b'Bearer ' + raw_token.strip()
