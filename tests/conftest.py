import pytest

from placesquery.app.builder import PlacesQueryBuilder


class DummyGetter:
    def __init__(self, body="{}"):
        self.body = body
        self.calls = []

    def get(self, url, timeout):
        self.calls.append((url, timeout))
        return self.body

    def close(self):
        pass


@pytest.fixture
def getter():
    return DummyGetter()


@pytest.fixture
def builder(getter):
    return PlacesQueryBuilder("ABC", getter=getter)
