from __future__ import annotations

from typing import Any

from safety_client.config import AppSettings
from safety_client.http import HttpClient


class AiApi:
    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def get_safety_score(self) -> dict[str, Any]:
        return self._http_client.get_json("/ai/safety-score")
