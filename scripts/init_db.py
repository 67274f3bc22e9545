#!/usr/bin/env python3
"""
Schema Setup Script

Creates the portal tables, constraints and indexes (idempotent).
Usage: python scripts/init_db.py
"""
import sys

from internship_portal.core.config import get_settings
from internship_portal.core.logging import configure_logging
from internship_portal.db.postgres import Database


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    db = Database(settings.postgres_url, pool_size=1)
    try:
        db.init_schema()
    finally:
        db.dispose()
    print("✅ Schema ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
