from __future__ import annotations

from typing import Any
from urllib.parse import quote

from safety_client.config import AppSettings
from safety_client.http import HttpClient


class BlockchainApi:
    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def issue_digital_id(self) -> dict[str, Any]:
        return self._http_client.post_json("/blockchain/issue-id")

    def get_qr_code(self, digital_id: str) -> dict[str, Any]:
        return self._http_client.get_json(f"/blockchain/qr/{quote(digital_id, safe='')}")
