from __future__ import annotations

import logging
import random
from typing import Any

from safety_client import fallbacks
from safety_client.apis import AiApi, AlertApi, AuthApi, BlockchainApi, LocationApi, UserApi
from safety_client.config import AppSettings
from safety_client.credentials import CredentialStore
from safety_client.fallbacks import FallbackListener, with_fallback
from safety_client.http import HttpClient
from safety_client.models import AuthState
from safety_client.navigation import Navigator

logger = logging.getLogger(__name__)


class SafetyService:
    """Every backend capability, each degraded to a placeholder on failure.

    Methods never raise for network, timeout or HTTP errors. A 401 still
    clears the stored token and redirects to the login route before the
    placeholder is returned.
    """

    def __init__(
        self,
        settings: AppSettings,
        credential_store: CredentialStore,
        auth_api: AuthApi,
        user_api: UserApi,
        location_api: LocationApi,
        alert_api: AlertApi,
        blockchain_api: BlockchainApi,
        ai_api: AiApi,
        on_fallback: FallbackListener | None = None,
        rng: random.Random | None = None,
        navigator: Navigator | None = None,
    ):
        self._settings = settings
        self._credential_store = credential_store
        self._navigator = navigator

        def wrap(name, live_call, synthesize):
            return with_fallback(name, live_call, synthesize, on_fallback=on_fallback)

        self.login = wrap("login", auth_api.login, fallbacks.demo_login)
        self.register = wrap("register", auth_api.register, fallbacks.demo_register)
        self.verify_otp = wrap("verify_otp", auth_api.verify_otp, fallbacks.demo_verify_otp)
        self.get_profile = wrap("get_profile", user_api.get_profile, fallbacks.demo_profile)
        self.update_profile = wrap("update_profile", user_api.update_profile, fallbacks.demo_update_profile)
        self.upload_kyc = wrap("upload_kyc", user_api.upload_kyc, fallbacks.demo_upload_kyc)
        self.update_location = wrap(
            "update_location", location_api.update_location, fallbacks.demo_update_location
        )
        self.get_location_history = wrap(
            "get_location_history",
            location_api.get_location_history,
            fallbacks.demo_location_history,
        )
        self.send_panic_alert = wrap(
            "send_panic_alert", alert_api.send_panic_alert, fallbacks.demo_send_panic_alert
        )
        self.get_alerts = wrap("get_alerts", alert_api.get_alerts, fallbacks.demo_alerts)
        self.issue_digital_id = wrap(
            "issue_digital_id", blockchain_api.issue_digital_id, fallbacks.demo_issue_digital_id
        )
        self.get_qr_code = wrap("get_qr_code", blockchain_api.get_qr_code, fallbacks.demo_qr_code)
        self.get_safety_score = wrap(
            "get_safety_score", ai_api.get_safety_score, fallbacks.make_demo_safety_score(rng)
        )

    @property
    def navigator(self) -> Navigator | None:
        return self._navigator

    @property
    def request_timeout_seconds(self) -> int:
        return self._settings.timeout_seconds

    def auth_state(self) -> AuthState:
        if self._credential_store.has_token():
            return AuthState(is_signed_in=True)
        return AuthState(is_signed_in=False, login_route=self._settings.login_route)

    def sign_in(self, email: str, password: str) -> dict[str, Any]:
        result = self.login(email, password)
        token = str(result.get("token") or "").strip() if isinstance(result, dict) else ""
        if token:
            self._credential_store.set(token)
        else:
            logger.warning("Login response carried no token; session not stored")
        return result

    def sign_out(self) -> None:
        self._credential_store.clear()


def build_service(
    settings: AppSettings | None = None,
    navigator: Navigator | None = None,
    on_fallback: FallbackListener | None = None,
) -> SafetyService:
    settings = settings or AppSettings.from_env()
    navigator = navigator or Navigator()
    credential_store = CredentialStore(settings.token_store_path)
    http_client = HttpClient(settings, credential_store, on_unauthorized=navigator.navigate)
    return SafetyService(
        settings=settings,
        credential_store=credential_store,
        auth_api=AuthApi(settings, http_client),
        user_api=UserApi(settings, http_client),
        location_api=LocationApi(settings, http_client),
        alert_api=AlertApi(settings, http_client),
        blockchain_api=BlockchainApi(settings, http_client),
        ai_api=AiApi(settings, http_client),
        on_fallback=on_fallback,
        navigator=navigator,
    )
