from __future__ import annotations

import asyncio
from typing import Any, Callable

from safety_client.models import AuthState
from safety_client.services import SafetyService


class AsyncSafetyService:
    """Awaitable view of ``SafetyService`` for event-loop based callers.

    Each call runs in a worker thread so the loop keeps running while the
    request is in flight. A login redirect triggered by a 401 is handed
    back to the awaiting loop before subscribers see it. Cancelling the
    awaiting task stops waiting but does not abort the request; the
    configured timeout still bounds it.
    """

    def __init__(self, service: SafetyService):
        self._service = service

    @property
    def service(self) -> SafetyService:
        return self._service

    def auth_state(self) -> AuthState:
        return self._service.auth_state()

    async def login(self, email: str, password: str) -> dict[str, Any]:
        return await self._run(self._service.login, email, password)

    async def register(self, user_data: dict[str, Any]) -> dict[str, Any]:
        return await self._run(self._service.register, user_data)

    async def verify_otp(self, email: str, otp: str) -> dict[str, Any]:
        return await self._run(self._service.verify_otp, email, otp)

    async def get_profile(self) -> dict[str, Any]:
        return await self._run(self._service.get_profile)

    async def update_profile(self, profile_data: dict[str, Any]) -> dict[str, Any]:
        return await self._run(self._service.update_profile, profile_data)

    async def upload_kyc(
        self,
        files: dict[str, Any],
        fields: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return await self._run(self._service.upload_kyc, files, fields)

    async def update_location(self, lat: float, lng: float) -> dict[str, Any]:
        return await self._run(self._service.update_location, lat, lng)

    async def get_location_history(self) -> dict[str, Any]:
        return await self._run(self._service.get_location_history)

    async def send_panic_alert(self, alert_data: dict[str, Any]) -> dict[str, Any]:
        return await self._run(self._service.send_panic_alert, alert_data)

    async def get_alerts(self) -> dict[str, Any]:
        return await self._run(self._service.get_alerts)

    async def issue_digital_id(self) -> dict[str, Any]:
        return await self._run(self._service.issue_digital_id)

    async def get_qr_code(self, digital_id: str) -> dict[str, Any]:
        return await self._run(self._service.get_qr_code, digital_id)

    async def get_safety_score(self) -> dict[str, Any]:
        return await self._run(self._service.get_safety_score)

    async def sign_in(self, email: str, password: str) -> dict[str, Any]:
        return await self._run(self._service.sign_in, email, password)

    async def sign_out(self) -> None:
        await self._run(self._service.sign_out)

    async def _run(self, call: Callable[..., Any], *args: Any) -> Any:
        if self._service.navigator is not None:
            self._service.navigator.bind_loop(asyncio.get_running_loop())
        return await asyncio.to_thread(call, *args)
