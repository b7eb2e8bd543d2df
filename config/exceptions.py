"""
Project-wide DRF exception handler.

Every error response carries a ``msg`` key so clients can show it inline.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """Wrap DRF error payloads in a ``{msg, ...}`` body."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'API view'
        )
        return Response(
            {'msg': 'Server Error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        errors = response.data if isinstance(response.data, dict) else {'errors': response.data}
        response.data = {'msg': 'Invalid input', **errors}
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'msg': str(response.data['detail'])}

    return response
