#!/usr/bin/env python3
"""
NearbyMarket -- local marketplace listing service.

Usage:
  python main.py
  python main.py --port 8080
  python main.py --host 127.0.0.1 --reload

Environment variables (see core/config.py for the full list):
  SECRET_KEY     Token signing secret, at least 32 characters. Required
                 unless DEBUG=true, in which case one is generated.
  DATABASE_URL   SQLAlchemy URL shared by all stores. Defaults to SQLite
                 files next to the store modules.
  PORT / HOST    Listen address. Defaults to 0.0.0.0:3000.
"""

import argparse

import uvicorn

from core.config import get_settings


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="nearbymarket",
        description="Run the NearbyMarket HTTP API.",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Listen port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    # The process runs until terminated externally.
    uvicorn.run("asgi:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
