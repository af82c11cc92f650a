from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from safety_client.config import AppSettings, ConfigurationError
from safety_client.logging_utils import configure_logging
from safety_client.services import SafetyService, build_service


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="safety-client",
        description="Call the safety backend; prints placeholder data when it is unreachable.",
    )
    parser.add_argument("--log-level", default=None, help="Overrides SAFETY_LOG_LEVEL")
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="Sign in and store the session token")
    login.add_argument("email")
    login.add_argument("password")

    commands.add_parser("logout", help="Forget the stored session token")
    commands.add_parser("profile", help="Show the signed-in profile")
    commands.add_parser("score", help="Show the current safety score")
    commands.add_parser("alerts", help="List recent alerts")
    commands.add_parser("locations", help="List recent location updates")

    panic = commands.add_parser("panic", help="Send an emergency alert")
    panic.add_argument("--message", default="Emergency! Need immediate assistance.")
    panic.add_argument("--lat", type=float, default=None)
    panic.add_argument("--lng", type=float, default=None)

    return parser


def _run_command(service: SafetyService, args: argparse.Namespace) -> Any:
    if args.command == "login":
        return service.sign_in(args.email, args.password)
    if args.command == "logout":
        service.sign_out()
        return {"success": True}
    if args.command == "profile":
        return service.get_profile()
    if args.command == "score":
        return service.get_safety_score()
    if args.command == "alerts":
        return service.get_alerts()
    if args.command == "locations":
        return service.get_location_history()
    if args.command == "panic":
        alert: dict[str, Any] = {"message": args.message}
        if args.lat is not None:
            alert["location"] = {"lat": args.lat, "lng": args.lng}
        return service.send_panic_alert(alert)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "panic" and (args.lat is None) != (args.lng is None):
        parser.error("--lat and --lng must be given together")
    configure_logging(args.log_level)

    try:
        service = build_service(AppSettings.from_env())
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(_run_command(service, args), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
