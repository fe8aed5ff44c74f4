#!/usr/bin/env python
"""
Run the Profile Sync API server.

The endpoints build their Supabase client per request, so the server
starts even when Supabase settings are missing and answers with a 500
"Missing configuration" body instead. A warning lists the unset
variables at startup; --strict refuses to start at all.

Usage:
    python run_api.py
    python run_api.py --reload            # Development mode
    python run_api.py --strict            # Exit 1 if Supabase settings are missing
    python run_api.py --log-level debug
"""

import argparse
import sys
from typing import Optional

import uvicorn
from rich.console import Console

from shared.config import Settings, get_settings

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]

console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Profile Sync API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Server log level (defaults to LOG_LEVEL)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Refuse to start when Supabase settings are missing",
    )
    return parser


def check_configuration(settings: Settings, strict: bool) -> bool:
    """Report unset Supabase settings. Returns False if startup should stop."""
    missing = settings.missing_settings()
    if not missing:
        return True

    level = "red" if strict else "yellow"
    console.print(f"[{level}]Missing Supabase settings:[/{level}] {', '.join(missing)}")
    if strict:
        return False

    console.print("Account endpoints will answer 500 until these are set.")
    return True


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    if not check_configuration(settings, args.strict):
        return 1

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=args.log_level or settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
