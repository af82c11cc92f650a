from __future__ import annotations

import json
import logging
import os

from msal_extensions import FilePersistence, FilePersistenceWithDataProtection
from msal_extensions.persistence import PersistenceNotFound

logger = logging.getLogger(__name__)

TOKEN_SLOT = "auth-token"


class CredentialStore:
    """Durable slot holding the current bearer token.

    The backing file survives restarts and holds a JSON object keyed by
    ``TOKEN_SLOT``. An empty file means no token.
    """

    def __init__(self, path: str):
        self._persistence = self._build_persistence(path)

    @staticmethod
    def _build_persistence(path: str):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        try:
            return FilePersistenceWithDataProtection(path)
        except Exception:
            # Data protection only exists on Windows.
            return FilePersistence(path)

    @property
    def location(self) -> str:
        return self._persistence.get_location()

    def get(self) -> str | None:
        try:
            raw = self._persistence.load()
        except PersistenceNotFound:
            return None

        if not raw or not raw.strip():
            return None

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable token store at %s", self.location)
            return None

        if not isinstance(data, dict):
            return None
        token = str(data.get(TOKEN_SLOT) or "").strip()
        return token or None

    def set(self, token: str) -> None:
        self._persistence.save(json.dumps({TOKEN_SLOT: token}))

    def clear(self) -> None:
        self._persistence.save("")

    def has_token(self) -> bool:
        return self.get() is not None
