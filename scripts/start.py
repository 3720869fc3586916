#!/usr/bin/env python3
"""
Production startup script.

1. Runs migrations (release.py)
2. Starts gunicorn (replaces this process via os.execvp)

gunicorn handles SIGTERM/SIGINT: it stops accepting connections and gives
in-flight requests SHUTDOWN_GRACE_SECONDS to finish before workers are killed.

Usage:
    python scripts/start.py
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def gunicorn_argv(port: int, grace_seconds: int, timeout_seconds: int) -> list[str]:
    return [
        "gunicorn",
        "app.wsgi:app",
        "--bind", f"0.0.0.0:{port}",
        "--workers", "2",
        "--threads", "4",
        "--timeout", str(timeout_seconds),
        "--graceful-timeout", str(grace_seconds),
        "--access-logfile", "-",
        "--error-logfile", "-",
    ]


def main() -> None:
    load_dotenv()
    from app.playground.config import load_settings

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"ERROR: {e}", flush=True)
        sys.exit(1)

    port = settings.app_port
    if port < 1 or port > 65535:
        print(f"ERROR: Invalid port {port}. Must be integer 1-65535.", flush=True)
        sys.exit(1)
    print(f"APP_PORT={port} validated", flush=True)

    print("=== Running release phase ===", flush=True)
    from scripts.release import run_release
    try:
        run_release()
    except Exception as e:
        print(f"Release failed: {e}", flush=True)
        sys.exit(1)

    print("=== Starting gunicorn ===", flush=True)
    print(f"Gunicorn binding to 0.0.0.0:{port}", flush=True)
    os.execvp(
        "gunicorn",
        gunicorn_argv(port, settings.shutdown_grace_seconds, settings.request_timeout_seconds),
    )


if __name__ == "__main__":
    main()
