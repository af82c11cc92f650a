"""Shared fixtures: stub HTTP sessions and a temp-dir token store."""
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from safety_client.apis import AiApi, AlertApi, AuthApi, BlockchainApi, LocationApi, UserApi
from safety_client.config import AppSettings
from safety_client.credentials import CredentialStore
from safety_client.http import HttpClient
from safety_client.navigation import Navigator
from safety_client.services import SafetyService
from stubs import StubSession


@pytest.fixture
def settings(tmp_path):
    return AppSettings(
        base_url="http://backend.test",
        timeout_seconds=10,
        token_store_path=str(tmp_path / "store" / "token.json"),
        login_route="/auth/login",
    )


@pytest.fixture
def credential_store(settings):
    return CredentialStore(settings.token_store_path)


@pytest.fixture
def navigator():
    return Navigator()


@pytest.fixture
def session():
    return StubSession()


@pytest.fixture
def http_client(settings, credential_store, navigator, session):
    return HttpClient(settings, credential_store, on_unauthorized=navigator.navigate, session=session)


@pytest.fixture
def fallback_events():
    return []


@pytest.fixture
def service(settings, credential_store, http_client, navigator, fallback_events):
    return SafetyService(
        settings=settings,
        credential_store=credential_store,
        auth_api=AuthApi(settings, http_client),
        user_api=UserApi(settings, http_client),
        location_api=LocationApi(settings, http_client),
        alert_api=AlertApi(settings, http_client),
        blockchain_api=BlockchainApi(settings, http_client),
        ai_api=AiApi(settings, http_client),
        on_fallback=lambda name, error: fallback_events.append((name, error.status_code)),
        navigator=navigator,
    )
