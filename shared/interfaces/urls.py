"""
Health check URLs.
"""
from django.urls import path

from .health_views import HealthCheckView, LivenessCheckView, ReadinessCheckView

urlpatterns = [
    path('', HealthCheckView.as_view(), name='health'),
    path('live/', LivenessCheckView.as_view(), name='health-live'),
    path('ready/', ReadinessCheckView.as_view(), name='health-ready'),
]
