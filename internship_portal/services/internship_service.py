"""
Internship Service

required_skills is a TEXT[] column; request models have already normalized
it to a list of trimmed, non-empty strings.
"""

from typing import List, Optional

from internship_portal.core.errors import integrity_errors
from internship_portal.db.query import FilterBuilder
from internship_portal.schemas.schemas import InternshipCreate, InternshipUpdate
from internship_portal.services.base import ResourceService


class InternshipService(ResourceService):
    table = "internships"
    label = "Internship"
    updatable = ("title", "role", "location", "stipend", "description", "required_skills", "status")
    required = ("title", "status", "required_skills")

    def create(self, data: InternshipCreate) -> dict:
        with integrity_errors(missing="Startup not found"):
            return self.db.fetch_one(
                """
                INSERT INTO internships
                    (startup_id, title, role, location, stipend, description, required_skills, status)
                VALUES (:startup_id, :title, :role, :location, :stipend, :description, :required_skills, :status)
                RETURNING *
                """,
                data.model_dump()
            )

    def list_internships(self, startup_id: Optional[int] = None, status: Optional[str] = None,
                         skill: Optional[str] = None, q: Optional[str] = None) -> List[dict]:
        """All supplied filters AND together."""
        filters = FilterBuilder()
        if startup_id is not None:
            filters.add("i.startup_id = :startup_id", startup_id=startup_id)
        if status:
            filters.add("i.status = :status", status=status)
        if skill:
            # exact, case-sensitive membership
            filters.add(":skill = ANY(i.required_skills)", skill=skill)
        if q:
            filters.add("(i.title ILIKE :q OR i.description ILIKE :q)", q=f"%{q}%")

        return self.db.execute(
            f"""
            SELECT i.*, s.name AS startup_name
            FROM internships i
            LEFT JOIN startups s ON i.startup_id = s.id
            {filters.where()}
            ORDER BY i.posted_at DESC
            """,
            filters.params
        )

    def get(self, internship_id: int) -> dict:
        internship = self.db.fetch_one(
            """
            SELECT i.*, s.name AS startup_name, s.website AS startup_website
            FROM internships i
            LEFT JOIN startups s ON i.startup_id = s.id
            WHERE i.id = :id
            """,
            {"id": internship_id}
        )
        if internship is None:
            raise self.not_found()
        return internship

    def list_by_startup(self, startup_id: int) -> List[dict]:
        return self.db.execute(
            "SELECT * FROM internships WHERE startup_id = :startup_id ORDER BY posted_at DESC",
            {"startup_id": startup_id}
        )

    def update(self, internship_id: int, data: InternshipUpdate) -> dict:
        return self.apply_update(internship_id, self.changes(data))
