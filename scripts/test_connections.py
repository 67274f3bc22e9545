#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the database is reachable and the schema is in place.
Usage: python scripts/test_connections.py
"""
import sys

from internship_portal.core.config import get_settings
from internship_portal.db.postgres import Database

TABLES = ["users", "student_profiles", "startups", "internships", "applications"]


def main() -> int:
    settings = get_settings()
    print("=" * 50)
    print("INTERNSHIP PORTAL - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing PostgreSQL...")
    print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")
    db = Database(settings.postgres_url, pool_size=1)
    try:
        if not db.ping():
            print("    ❌ PostgreSQL: FAILED")
            return 1
        print("    ✅ PostgreSQL: CONNECTED")

        print("\n[2] Checking tables...")
        rows = db.execute(
            "SELECT table_name FROM information_schema.tables WHERE table_schema = 'public'"
        )
        present = {r["table_name"] for r in rows}
        missing = [t for t in TABLES if t not in present]
        for table in TABLES:
            print(f"    {'✅' if table in present else '❌'} {table}")
        if missing:
            print("\n    Run: python scripts/init_db.py")
    finally:
        db.dispose()

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)
    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(main())
