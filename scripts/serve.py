#!/usr/bin/env python3
"""
Run the inventory API with uvicorn.

Usage:
  python scripts/serve.py [--host 0.0.0.0] [--port 3000] [--reload]
"""
from __future__ import annotations

import argparse
import sys

import uvicorn

from inventory_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Run the inventory API")
    ap.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    args = ap.parse_args()

    uvicorn.run(
        "inventory_api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
