from __future__ import annotations

from typing import Any

from safety_client.config import AppSettings
from safety_client.http import HttpClient


class AlertApi:
    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def send_panic_alert(self, alert_data: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.post_json("/alerts/panic", alert_data)

    def get_alerts(self) -> dict[str, Any]:
        return self._http_client.get_json("/alerts/history")
