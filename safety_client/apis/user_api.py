from __future__ import annotations

from typing import Any

from safety_client.config import AppSettings
from safety_client.http import HttpClient


class UserApi:
    def __init__(self, settings: AppSettings, http_client: HttpClient):
        self._settings = settings
        self._http_client = http_client

    def get_profile(self) -> dict[str, Any]:
        return self._http_client.get_json("/user/profile")

    def update_profile(self, profile_data: dict[str, Any]) -> dict[str, Any]:
        return self._http_client.put_json("/user/profile", profile_data)

    def upload_kyc(
        self,
        files: dict[str, Any],
        fields: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send identity documents as multipart form data.

        ``files`` uses the requests convention: field name to a file object
        or a ``(filename, fileobj, content_type)`` tuple.
        """
        return self._http_client.post_multipart("/user/kyc", files=files, data=fields)
