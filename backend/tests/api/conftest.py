"""API test fixtures — FastAPI app over fake engine and fake credential store.

Invariants:
    - get_engine and get_credential_validator overridden; no DB is touched
    - `client` sends a valid API key on every request, `anon_client` sends none
"""

from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from taskhub.api.dependencies import get_credential_validator, get_engine
from taskhub.core.domain_types import Identity, MemberId
from taskhub.main import app
from tests.api.resource_cases import VALID_KEY
from tests.fake_engine import FakeCredentialValidator, FakeEngine


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture
def caller():
    return Identity(member_id=MemberId(uuid4()))


@pytest.fixture
def validator(caller):
    return FakeCredentialValidator({VALID_KEY: caller})


@pytest.fixture
async def anon_client(fake_engine, validator):
    """Client without credentials; collaborators faked."""
    app.dependency_overrides[get_engine] = lambda: fake_engine
    app.dependency_overrides[get_credential_validator] = lambda: validator

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def client(anon_client):
    anon_client.headers["X-API-Key"] = VALID_KEY
    return anon_client
