from __future__ import annotations

from typing import Any

from safety_client.config import AppSettings
from safety_client.http import HttpClient


class LocationApi:
    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def update_location(self, lat: float, lng: float) -> dict[str, Any]:
        return self._http_client.post_json("/location/update", {"lat": lat, "lng": lng})

    def get_location_history(self) -> dict[str, Any]:
        return self._http_client.get_json("/location/history")
