"""Shared fixtures: a recording upstream double and an API test client."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_address_client
from app.eligibility.conditions import EqualsResponse
from app.eligibility.models import EligibilityQuestion
from app.gateway.client import AddressServiceClient
from app.main import app


class FakeAddressService:
    """
    Stand-in for the upstream address API.

    Routes are registered as (method, path) -> handler returning an
    httpx.Response.  Every request is recorded so tests can assert on
    call counts.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def on(self, method: str, path: str, *, status_code: int = 200, json: Any = None, text: str | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)

        self.routes[(method, path)] = handler

    def raise_on(self, method: str, path: str, exc: BaseException) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/v1")
        handler = self.routes.get((request.method, path))
        if handler is None:
            return httpx.Response(404, json={"error": "no route"})
        return handler(request)

    def client(self, auth_token: str = "") -> AddressServiceClient:
        return AddressServiceClient(
            base_url="https://address.test/api/v1",
            auth_token=auth_token,
            transport=httpx.MockTransport(self),
        )


@pytest.fixture
def fake_service() -> FakeAddressService:
    return FakeAddressService()


@pytest.fixture
async def address_client(fake_service):
    async with fake_service.client(auth_token="dGVzdDp0ZXN0") as client:
        yield client


@pytest.fixture
def api_client(fake_service):
    async def override():
        async with fake_service.client() as client:
            yield client

    app.dependency_overrides[get_address_client] = override
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def yes_no_questions() -> list[EligibilityQuestion]:
    """Question 1 always visible; question 2 only after answering 1 with "yes"."""
    return [
        EligibilityQuestion(question_id=1, text="Do you smoke?"),
        EligibilityQuestion(
            question_id=2,
            text="How many per day?",
            visibility_condition=EqualsResponse(question_id=1, expected_value="yes"),
        ),
    ]
