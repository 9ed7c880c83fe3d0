"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    NotFoundError,
    ValidationError,
    UnauthenticatedError,
    DependencyError,
)

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """Translate domain and DRF exceptions into the failure envelope."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, NotFoundError):
        return Response(
            {
                'success': False,
                'error': exc.message,
                'code': exc.code,
                'entity': exc.entity_name,
                'entity_id': exc.entity_id,
            },
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, ValidationError):
        return Response(
            {
                'success': False,
                'error': exc.message,
                'code': exc.code,
                'field': exc.field,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, UnauthenticatedError):
        return Response(
            {
                'success': False,
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_401_UNAUTHORIZED,
        )

    if isinstance(exc, DependencyError):
        logger.error(f"Dependency unavailable: {exc.dependency}", exc_info=exc)
        return Response(
            {
                'success': False,
                'error': exc.message,
                'code': exc.code,
                'dependency': exc.dependency,
            },
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if isinstance(exc, DomainException):
        return Response(
            {
                'success': False,
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if response is not None:
        detail = response.data
        if isinstance(detail, dict) and 'detail' in detail:
            message = str(detail['detail'])
        else:
            message = "Invalid request"
        response.data = {
            'success': False,
            'error': message,
            'code': getattr(exc, 'default_code', 'error').upper(),
            'details': detail,
        }

    return response
