from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

AUTHORITY_ROLE = "authority"
DEFAULT_ROLE = "tourist"


def role_for_email(email: str) -> str:
    return AUTHORITY_ROLE if "authority" in (email or "") else DEFAULT_ROLE


class ConnectivityState(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"

    @property
    def is_online(self) -> bool:
        return self is ConnectivityState.ONLINE


@dataclass(frozen=True)
class AuthState:
    is_signed_in: bool
    login_route: str | None = None
