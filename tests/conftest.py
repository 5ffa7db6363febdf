from collections.abc import Iterator

import pytest
import respx
from fastapi.testclient import TestClient

from intercom_relay.core.config import get_settings
from intercom_relay.main import app
from tests.helpers.settings import INTERCOM_URL, make_settings


@pytest.fixture
def client() -> Iterator[TestClient]:
    settings = make_settings()
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def intercom_mock() -> Iterator[respx.MockRouter]:
    with respx.mock(base_url=INTERCOM_URL, assert_all_called=False) as mock:
        yield mock
