"""Shared fixtures for the activity client tests."""

from collections.abc import Callable

import httpx
import pytest

from boredapi.client.bored import BoredApiClient

TEST_URL = "http://bored.test/api/activity"


@pytest.fixture
def success_payload() -> dict:
    """Well-formed activity body as the service returns it."""
    return {
        "activity": "Learn Rust",
        "accessibility": 0.3,
        "type": "education",
        "participants": 1,
        "price": 0.0,
        "key": "3943506",
        "link": "",
    }


@pytest.fixture
def captured_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(captured_requests: list[httpx.Request]) -> Callable[..., BoredApiClient]:
    """Build a client whose transport answers every request with ``handler``."""

    def factory(handler: Callable[[httpx.Request], httpx.Response], *, validate_criteria: bool = True) -> BoredApiClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return BoredApiClient(TEST_URL, http_client=http_client, validate_criteria=validate_criteria)

    return factory
