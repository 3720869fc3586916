"""
Release-phase helper.

Goal:
- Resolve the database URL the same way the app does (DATABASE_URL or DB_* parts).
- Refuse to migrate a SQLite database in production.
- Run alembic migrations.

Usage:
  python scripts/release.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def run_release() -> None:
    load_dotenv()
    from app.playground.config import load_settings

    settings = load_settings()
    db_url = settings.database_url
    env = settings.env.strip().lower()
    # Guardrail: prevent accidental prod deploys against SQLite.
    if env in ("prod", "production") and db_url.startswith("sqlite"):
        raise RuntimeError("Refusing to run release on sqlite DATABASE_URL in production. Set DATABASE_URL to Postgres.")

    print("=== customer-playground release start ===", flush=True)
    print(f"ENV={env or '(unset)'}", flush=True)
    print("Running Alembic migrations...", flush=True)

    from alembic import command
    from alembic.config import Config

    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", db_url.replace("%", "%%"))
    command.upgrade(cfg, "head")
    print("Migrations complete.", flush=True)
    print("=== customer-playground release done ===", flush=True)


def main() -> None:
    run_release()


if __name__ == "__main__":
    main()
