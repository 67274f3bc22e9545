"""
Test doubles and row factories.

FakeDatabase records every statement and replays scripted result rows in
order, so routers and services run for real without PostgreSQL.
"""

import re
from collections import deque
from datetime import date, datetime, timezone

from sqlalchemy.exc import IntegrityError

from internship_portal.core.errors import FOREIGN_KEY_VIOLATION, UNIQUE_VIOLATION

NOW = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


class FakeDatabase:
    def __init__(self):
        self.calls = []
        self.results = deque()
        self.healthy = True

    def queue(self, *results):
        """Each result is a list of row dicts, or an exception to raise."""
        self.results.extend(results)
        return self

    def execute(self, sql, params=None):
        self.calls.append((re.sub(r"\s+", " ", sql).strip(), dict(params or {})))
        if not self.results:
            return []
        result = self.results.popleft()
        if isinstance(result, Exception):
            raise result
        return [dict(row) for row in result]

    def fetch_one(self, sql, params=None):
        rows = self.execute(sql, params)
        return rows[0] if rows else None

    def ping(self):
        return self.healthy

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_params(self):
        return self.calls[-1][1]


class _PgError(Exception):
    def __init__(self, pgcode):
        super().__init__(f"SQLSTATE {pgcode}")
        self.pgcode = pgcode


def integrity_error(pgcode):
    return IntegrityError("INSERT ...", {}, _PgError(pgcode))


def unique_violation():
    return integrity_error(UNIQUE_VIOLATION)


def fk_violation():
    return integrity_error(FOREIGN_KEY_VIOLATION)


# ------------------------------------------------------------------
# Row factories
# ------------------------------------------------------------------

def user_row(**overrides):
    row = {"id": 1, "email": "a@b.com", "user_type": "student", "created_at": NOW}
    row.update(overrides)
    return row


def profile_row(**overrides):
    row = {
        "id": 3, "user_id": 1, "name": "Asha Rao", "school": "IIT Delhi", "major": "CS",
        "graduation_date": date(2026, 5, 30), "resume_url": None, "portfolio_link": None,
    }
    row.update(overrides)
    return row


def startup_row(**overrides):
    row = {"id": 7, "user_id": 2, "name": "Acme Labs", "description": None, "website": "https://acme.io"}
    row.update(overrides)
    return row


def internship_row(**overrides):
    row = {
        "id": 11, "startup_id": 7, "title": "Intern", "role": None, "location": None,
        "stipend": None, "description": None, "required_skills": [], "status": "Active",
        "posted_at": NOW,
    }
    row.update(overrides)
    return row


def application_row(**overrides):
    row = {
        "id": 5, "student_id": 3, "internship_id": 11, "startup_id": 7,
        "status": "Applied", "notes": None, "applied_at": NOW,
    }
    row.update(overrides)
    return row

