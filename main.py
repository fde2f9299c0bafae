#!/usr/bin/env python3
"""
Token auth service -- signup/signin with access and refresh tokens.

Usage:
  python main.py
  python main.py --port 8080
  python main.py --host 0.0.0.0 --reload

Environment variables (see core/config.py for the full list):
  ACCESS_TOKEN_SECRET   Signing secret for access tokens (>= 32 chars).
  REFRESH_TOKEN_SECRET  Signing secret for refresh tokens (>= 32 chars, must differ).
  DATABASE_URL          SQLAlchemy URL of the user store.
  PORT                  Listen port (default 3000).
  DEBUG                 Set to true to auto-generate secrets for local development.
"""

import argparse
import sys

import uvicorn

from core.config import get_settings


def _build_parser(default_host: str, default_port: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the token auth HTTP service.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--host", default=default_host, help=f"Bind address (default: {default_host})")
    parser.add_argument("--port", type=int, default=default_port, help=f"Listen port (default: {default_port})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValueError as e:
        # Missing or weak secrets are startup-fatal.
        print(f"  [!] Invalid configuration: {e}", file=sys.stderr)
        return 1

    args = _build_parser(settings.host, settings.port).parse_args(argv)
    uvicorn.run(
        "asgi:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
