"""Create the items table in the configured database.

Reads DATABASE_URL from .env / environment. Safe to run repeatedly.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import pathlib
import sys

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from inventory.config import resolve_database_url
from inventory.db import create_app_engine
from inventory.repositories.item_store import ItemStore


def main() -> int:
    """Create all ORM tables in the target database."""

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    database_url = resolve_database_url()
    store = ItemStore(create_app_engine(database_url))
    store.create_schema()

    print("Tables created (or already exist).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
