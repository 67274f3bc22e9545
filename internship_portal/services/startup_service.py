"""
Startup Service

Startup rows belong to a user account of type "startup".
"""

from typing import List, Optional

from internship_portal.core.errors import integrity_errors
from internship_portal.db.query import FilterBuilder
from internship_portal.schemas.schemas import StartupCreate, StartupUpdate
from internship_portal.services.base import ResourceService

STARTUP_WITH_EMAIL = """
    SELECT s.*, u.email AS user_email
    FROM startups s
    LEFT JOIN users u ON s.user_id = u.id
"""


class StartupService(ResourceService):
    table = "startups"
    label = "Startup"
    updatable = ("name", "description", "website")
    required = ("name",)

    def create(self, data: StartupCreate) -> dict:
        with integrity_errors(conflict="Startup already exists for this user", missing="User not found"):
            return self.db.fetch_one(
                """
                INSERT INTO startups (user_id, name, description, website)
                VALUES (:user_id, :name, :description, :website)
                RETURNING *
                """,
                data.model_dump()
            )

    def list_startups(self, name: Optional[str] = None, website: Optional[str] = None) -> List[dict]:
        filters = FilterBuilder().ilike("s.name", "name", name).ilike("s.website", "website", website)
        return self.db.execute(
            f"{STARTUP_WITH_EMAIL} {filters.where()} ORDER BY s.id DESC",
            filters.params
        )

    def get(self, startup_id: int) -> dict:
        startup = self.db.fetch_one(STARTUP_WITH_EMAIL + " WHERE s.id = :id", {"id": startup_id})
        if startup is None:
            raise self.not_found()
        return startup

    def list_by_user(self, user_id: int) -> List[dict]:
        return self.db.execute(
            "SELECT * FROM startups WHERE user_id = :user_id ORDER BY id DESC",
            {"user_id": user_id}
        )

    def update(self, startup_id: int, data: StartupUpdate) -> dict:
        return self.apply_update(startup_id, self.changes(data))
