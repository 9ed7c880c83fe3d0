"""
Health endpoints.
"""
import pytest


def test_health(api_client):
    assert api_client.get('/health/').data == {'status': 'healthy'}


def test_liveness(api_client):
    assert api_client.get('/health/live/').data == {'status': 'alive'}


@pytest.mark.django_db
def test_readiness_checks_database(api_client):
    response = api_client.get('/health/ready/')

    assert response.status_code == 200
    assert response.data['checks']['database'] == {'healthy': True}
