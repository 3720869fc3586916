"""
Create the customer tables directly (development convenience).

Production schema changes go through Alembic (scripts/release.py).

Usage:
  python scripts/init_db.py            # create tables
  python scripts/init_db.py --seed     # create tables + a sample customer and note
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.playground.config import load_settings
from app.playground.modules.customer_notes.repository import CustomerNoteRepository
from app.playground.modules.customer_notes.schemas import CustomerNote
from app.playground.modules.customer_notes.service import CustomerNoteService
from app.playground.modules.customers.repository import CustomerRepository
from app.playground.modules.customers.schemas import Customer
from app.playground.modules.customers.service import CustomerService
from scripts._db_utils import create_tables, script_session


def seed_sample(db_url: str) -> None:
    """Insert customer 1 and one note for it, unless customer 1 already exists."""
    with script_session(db_url) as s:
        customers = CustomerService(CustomerRepository(s))
        if customers.get_by_customer_number(1).ok:
            print("Sample customer 1 already present; skipping seed.", flush=True)
            return
        result = customers.insert(Customer(customer_number=1, name="Ana", email="ana@example.com"))
        print(result.message, flush=True)
        notes = CustomerNoteService(CustomerNoteRepository(s))
        result = notes.insert(CustomerNote(customer_number=1, note="First contact."))
        print(result.message, flush=True)


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--seed", action="store_true", help="insert a sample customer and note")
    args = parser.parse_args()

    db_url = load_settings().database_url
    tables = create_tables(db_url)
    print(f"Tables ready: {', '.join(tables)}", flush=True)
    if args.seed:
        seed_sample(db_url)


if __name__ == "__main__":
    main()
