"""
Project-wide DRF exception handler.

Normalises every error response to ``{"error": <message>}`` and turns
uncaught exceptions into a logged 500 instead of a Django debug page.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def _first_message(data):
    if isinstance(data, dict):
        for key, value in data.items():
            message = _first_message(value)
            if key == 'non_field_errors':
                return message
            return f"{key}: {message}"
    if isinstance(data, list) and data:
        return _first_message(data[0])
    return str(data)


def api_exception_handler(exc, context):
    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view',
            exc_info=exc,
        )
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        # Per-field messages stay available under ``fields``
        fields = response.data if isinstance(response.data, dict) else {}
        response.data = {'error': _first_message(response.data), 'fields': fields}
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'error': str(response.data['detail'])}

    return response
