from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import urlparse


API_PATH_SUFFIX = "/api/v1"
DEFAULT_BASE_URL = "http://localhost:3001"
DEFAULT_TIMEOUT_SECONDS = 10


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class AppSettings:
    base_url: str
    timeout_seconds: int
    token_store_path: str
    login_route: str

    @property
    def api_url(self) -> str:
        return f"{self.base_url}{API_PATH_SUFFIX}"

    @staticmethod
    def from_env() -> "AppSettings":
        _load_dotenv_if_present()

        base_url = os.getenv("SAFETY_API_BASE_URL", "").strip() or DEFAULT_BASE_URL
        base_url = base_url.rstrip("/")

        raw_timeout = os.getenv("SAFETY_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)).strip()
        try:
            timeout_seconds = int(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError("SAFETY_TIMEOUT_SECONDS must be an integer") from exc

        default_store_path = os.path.join(
            os.getenv("LOCALAPPDATA", os.getcwd()),
            "SafetyClient",
            "token_store.json",
        )
        token_store_path = os.getenv("SAFETY_TOKEN_STORE_PATH", default_store_path)
        login_route = os.getenv("SAFETY_LOGIN_ROUTE", "/auth/login").strip()

        settings = AppSettings(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            token_store_path=token_store_path,
            login_route=login_route,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                "SAFETY_API_BASE_URL must be an absolute http(s) URL"
            )

        if self.timeout_seconds <= 0:
            raise ConfigurationError("SAFETY_TIMEOUT_SECONDS must be greater than 0")

        if not self.token_store_path:
            raise ConfigurationError("SAFETY_TOKEN_STORE_PATH must not be empty")

        if not self.login_route.startswith("/"):
            raise ConfigurationError("SAFETY_LOGIN_ROUTE must start with '/'")


def _load_dotenv_if_present(file_name: str = ".env") -> None:
    explicit = os.getenv("SAFETY_ENV_FILE", "").strip()
    path = Path(explicit).expanduser() if explicit else Path.cwd() / file_name
    _load_env_file(path)


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    try:
        with path.open("r", encoding="utf-8") as env_file:
            for raw_line in env_file:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")

                # Real environment wins over the file.
                if key and key not in os.environ:
                    os.environ[key] = value
    except OSError:
        return
