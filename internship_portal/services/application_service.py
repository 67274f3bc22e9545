"""
Application Service

A student applies to an internship once: the (student_id, internship_id)
unique constraint makes a repeat submission a conflict, atomically.
startup_id is stored as sent, next to the internship it was copied from.
"""

from typing import List

from internship_portal.core.errors import integrity_errors
from internship_portal.schemas.schemas import ApplicationCreate, ApplicationUpdate
from internship_portal.services.base import ResourceService

APPLICATION_WITH_NAMES = """
    SELECT a.*,
           sp.name AS student_name,
           i.title AS internship_title,
           s.name AS startup_name
    FROM applications a
    LEFT JOIN student_profiles sp ON a.student_id = sp.id
    LEFT JOIN internships i ON a.internship_id = i.id
    LEFT JOIN startups s ON a.startup_id = s.id
"""


class ApplicationService(ResourceService):
    table = "applications"
    label = "Application"
    updatable = ("status", "notes")
    required = ("status",)

    def create(self, data: ApplicationCreate) -> dict:
        with integrity_errors(
            conflict="Already applied to this internship",
            missing="Student, internship or startup not found",
        ):
            return self.db.fetch_one(
                """
                INSERT INTO applications (student_id, internship_id, startup_id, status, notes)
                VALUES (:student_id, :internship_id, :startup_id, :status, :notes)
                RETURNING *
                """,
                data.model_dump()
            )

    def list_applications(self) -> List[dict]:
        return self.db.execute(APPLICATION_WITH_NAMES + " ORDER BY a.applied_at DESC")

    def list_by_student(self, student_id: int) -> List[dict]:
        return self.db.execute(
            """
            SELECT
                a.id AS application_id,
                a.student_id,
                a.internship_id,
                a.startup_id,
                a.status,
                a.notes,
                a.applied_at,
                i.title AS internship_title,
                i.description AS internship_description,
                i.location AS internship_location,
                i.stipend AS internship_stipend,
                s.name AS startup_name,
                s.website AS startup_website
            FROM applications a
            LEFT JOIN internships i ON a.internship_id = i.id
            LEFT JOIN startups s ON a.startup_id = s.id
            WHERE a.student_id = :student_id
            ORDER BY a.applied_at DESC
            """,
            {"student_id": student_id}
        )

    def list_by_startup(self, startup_id: int) -> List[dict]:
        return self.db.execute(
            """
            SELECT a.*,
                   sp.name AS student_name,
                   i.title AS internship_title
            FROM applications a
            LEFT JOIN student_profiles sp ON a.student_id = sp.id
            LEFT JOIN internships i ON a.internship_id = i.id
            WHERE a.startup_id = :startup_id
            ORDER BY a.applied_at DESC
            """,
            {"startup_id": startup_id}
        )

    def get(self, application_id: int) -> dict:
        application = self.db.fetch_one(APPLICATION_WITH_NAMES + " WHERE a.id = :id", {"id": application_id})
        if application is None:
            raise self.not_found()
        return application

    def update(self, application_id: int, data: ApplicationUpdate) -> dict:
        return self.apply_update(application_id, self.changes(data))
