import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from places.tests.factories import make_place


@pytest.fixture(autouse=True)
def _clean_state(settings):
    settings.ADMIN_HOSTS = ["localhost", "127.0.0.1"]
    settings.ADMIN_API_TOKEN = ""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def place_factory(db):
    def create(name="Cafe", addresses=None, **kwargs):
        place = make_place(name=name, addresses=addresses, **kwargs)
        place.save()
        return place
    return create


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client():
    return APIClient(HTTP_HOST="localhost:8000")
