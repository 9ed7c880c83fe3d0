"""
Health check views.
"""
from django.db import connection
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


@extend_schema(tags=['Health'])
class HealthCheckView(APIView):
    """Basic health check endpoint."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'healthy'}, status=status.HTTP_200_OK)


@extend_schema(tags=['Health'])
class ReadinessCheckView(APIView):
    """Readiness probe - the cart store must answer a query."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        checks = {
            'database': self._check_database(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        status_code = status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
            },
            status=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except Exception as e:
            return {'healthy': False, 'error': str(e)}


@extend_schema(tags=['Health'])
class LivenessCheckView(APIView):
    """Liveness probe - basic application check."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'alive'}, status=status.HTTP_200_OK)
