import asyncio
import inspect
import threading
import typing

import pytest

from safety_client.async_service import AsyncSafetyService
from safety_client.models import AuthState
from stubs import make_response


def test_operations_can_be_awaited_together(service):
    async_service = AsyncSafetyService(service)

    async def run():
        return await asyncio.gather(
            async_service.get_location_history(),
            async_service.get_alerts(),
            async_service.login("authority.ops@example.com", "pw"),
        )

    history, alerts, login = asyncio.run(run())

    assert len(history["locations"]) == 3
    assert len(alerts["alerts"]) == 2
    assert login["user"]["role"] == "authority"


def test_awaited_live_result_is_unchanged(service, session):
    session.queue(make_response(200, {"safetyScore": 91, "factors": ["Clear"]}))

    result = asyncio.run(AsyncSafetyService(service).get_safety_score())

    assert result == {"safetyScore": 91, "factors": ["Clear"]}


def test_login_redirect_reaches_subscribers_on_the_loop_thread(service, session, credential_store, navigator):
    credential_store.set("expired-token")
    session.queue(make_response(401, {"error": "expired"}))
    seen_on = []
    navigator.current_route.subscribe(lambda route: seen_on.append(threading.get_ident()))

    async def run():
        loop_thread = threading.get_ident()
        result = await AsyncSafetyService(service).get_profile()
        return loop_thread, result

    loop_thread, result = asyncio.run(run())

    assert seen_on == [loop_thread]
    assert navigator.navigation_count == 1
    assert navigator.current_route.get() == "/auth/login"
    assert credential_store.get() is None
    assert result["email"] == "demo@example.com"


@pytest.mark.parametrize(
    "operation",
    [
        "login", "register", "verify_otp", "get_profile", "update_profile", "upload_kyc",
        "update_location", "get_location_history", "send_panic_alert", "get_alerts",
        "issue_digital_id", "get_qr_code", "get_safety_score", "sign_in", "sign_out",
    ],
)
def test_every_operation_is_a_declared_coroutine(operation):
    method = getattr(AsyncSafetyService, operation)

    assert inspect.iscoroutinefunction(method)
    assert "return" in typing.get_type_hints(method)


def test_auth_state_is_annotated():
    assert typing.get_type_hints(AsyncSafetyService.auth_state)["return"] is AuthState
