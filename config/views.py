import logging

from django.db import connection, DatabaseError
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def home(request):
    """Plain liveness message."""
    return JsonResponse({
        'message': 'Medical Camp Management System Server is running successfully!'
    })


def health_check(request):
    """Health check including a database round trip (for Render)."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        logger.exception("Health check database round trip failed")
        return JsonResponse({
            'status': 'unhealthy',
            'database': 'unavailable'
        }, status=503)

    return JsonResponse({
        'status': 'ok',
        'database': 'ok'
    })


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
