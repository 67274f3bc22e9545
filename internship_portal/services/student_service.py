"""
Student Profile Service

One profile per user (enforced by a unique constraint on user_id).
"""

from typing import List, Optional

from internship_portal.core.errors import NotFoundError, integrity_errors
from internship_portal.db.query import FilterBuilder
from internship_portal.schemas.schemas import StudentProfileCreate, StudentProfileUpdate
from internship_portal.services.base import ResourceService

PROFILE_WITH_EMAIL = """
    SELECT sp.*, u.email AS user_email
    FROM student_profiles sp
    LEFT JOIN users u ON sp.user_id = u.id
"""


class StudentService(ResourceService):
    table = "student_profiles"
    label = "Student profile"
    updatable = ("name", "school", "major", "graduation_date", "resume_url", "portfolio_link")
    required = ("name",)

    def create(self, data: StudentProfileCreate) -> dict:
        with integrity_errors(
            conflict="Student profile already exists for this user",
            missing="User not found",
        ):
            return self.db.fetch_one(
                """
                INSERT INTO student_profiles
                    (user_id, name, school, major, graduation_date, resume_url, portfolio_link)
                VALUES (:user_id, :name, :school, :major, :graduation_date, :resume_url, :portfolio_link)
                RETURNING *
                """,
                data.model_dump()
            )

    def get_for_user(self, user_id: int) -> dict:
        """Profile of the calling user, with their email."""
        profile = self.db.fetch_one(
            PROFILE_WITH_EMAIL + " WHERE sp.user_id = :user_id LIMIT 1",
            {"user_id": user_id}
        )
        if profile is None:
            raise NotFoundError("Student profile not found for this user")
        return profile

    def list_profiles(self, school: Optional[str] = None, major: Optional[str] = None,
                      q: Optional[str] = None) -> List[dict]:
        filters = FilterBuilder()
        filters.ilike("sp.school", "school", school)
        filters.ilike("sp.major", "major", major)
        if q:
            filters.add(
                "(sp.name ILIKE :q OR sp.resume_url ILIKE :q OR sp.portfolio_link ILIKE :q)",
                q=f"%{q}%"
            )
        return self.db.execute(
            f"{PROFILE_WITH_EMAIL} {filters.where()} ORDER BY sp.id DESC",
            filters.params
        )

    def get(self, profile_id: int) -> dict:
        profile = self.db.fetch_one(PROFILE_WITH_EMAIL + " WHERE sp.id = :id", {"id": profile_id})
        if profile is None:
            raise self.not_found()
        return profile

    def get_by_user(self, user_id: int) -> dict:
        profile = self.db.fetch_one(
            "SELECT * FROM student_profiles WHERE user_id = :user_id",
            {"user_id": user_id}
        )
        if profile is None:
            raise NotFoundError("Student profile not found for this user")
        return profile

    def update(self, profile_id: int, data: StudentProfileUpdate) -> dict:
        return self.apply_update(profile_id, self.changes(data))
