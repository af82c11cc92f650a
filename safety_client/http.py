from __future__ import annotations

import logging
from typing import Any, Callable

import requests

from safety_client.config import AppSettings
from safety_client.credentials import CredentialStore

logger = logging.getLogger(__name__)

UNAUTHORIZED = 401


class ApiHttpError(RuntimeError):
    """Any failed call; ``status_code`` is 0 when no response arrived."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == UNAUTHORIZED


class HttpClient:
    def __init__(
        self,
        settings: AppSettings,
        credential_store: CredentialStore,
        on_unauthorized: Callable[[str], None] | None = None,
        session: requests.Session | None = None,
    ):
        self._settings = settings
        self._credential_store = credential_store
        self._on_unauthorized = on_unauthorized
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post_json(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        return self._request("POST", path, json=payload)

    def put_json(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("PUT", path, json=payload)

    def post_multipart(
        self,
        path: str,
        files: dict[str, Any],
        data: dict[str, Any] | None = None,
    ) -> Any:
        # requests only writes the multipart boundary when Content-Type is unset.
        return self._request("POST", path, files=files, data=data, content_type=None)

    def _request(
        self,
        method: str,
        path: str,
        content_type: str | None = "application/json",
        **kwargs: Any,
    ) -> Any:
        url = f"{self._settings.api_url}{path}"
        headers = self._build_headers(content_type)

        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                timeout=self._settings.timeout_seconds,
                **kwargs,
            )
        except requests.Timeout as exc:
            logger.warning("%s %s timed out after %ss", method, path, self._settings.timeout_seconds)
            raise ApiHttpError(status_code=0, message=f"Request timed out: {exc}") from exc
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiHttpError(status_code=0, message=f"Request failed: {exc}") from exc

        if response.ok:
            return self._decode(response)

        message = response.text[:500]
        error = ApiHttpError(
            status_code=response.status_code,
            message=f"HTTP {response.status_code}: {message}",
        )
        if error.is_unauthorized:
            self._handle_unauthorized()
        else:
            logger.warning("%s %s returned HTTP %s", method, path, response.status_code)
        raise error

    def _build_headers(self, content_type: str | None) -> dict[str, str | None]:
        # A None value removes the session-level header for this request.
        headers: dict[str, str | None] = {"Content-Type": content_type}
        token = self._credential_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _handle_unauthorized(self) -> None:
        logger.info("Session rejected by server; clearing stored token")
        self._credential_store.clear()
        if self._on_unauthorized is not None:
            self._on_unauthorized(self._settings.login_route)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise ApiHttpError(
                status_code=0,
                message=f"Invalid JSON in HTTP {response.status_code} response",
            ) from exc
