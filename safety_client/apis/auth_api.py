from __future__ import annotations

from typing import Any

from safety_client.config import AppSettings
from safety_client.http import HttpClient


class AuthApi:
    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def login(self, email: str, password: str) -> dict[str, Any]:
        return self._http_client.post_json("/auth/login", {"email": email, "password": password})

    def register(self, user_data: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.post_json("/auth/register", user_data)

    def verify_otp(self, email: str, otp: str) -> dict[str, Any]:
        return self._http_client.post_json("/auth/verify-otp", {"email": email, "otp": otp})
