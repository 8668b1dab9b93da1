import logging

from rest_framework.views import exception_handler

from .exceptions import SharingError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """DRF exception handler: default rendering plus ``kind`` for domain errors."""
    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, SharingError):
        logger.warning("%s: %s", exc.kind, exc.detail)
        response.data["kind"] = exc.kind
    return response
