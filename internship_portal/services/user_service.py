"""
User Service - accounts for students and startups.

Passwords are stored as bcrypt hashes and never leave this module.
"""

from typing import List

from internship_portal.core.auth import hash_password, verify_password
from internship_portal.core.errors import AuthError, NotFoundError, integrity_errors
from internship_portal.core.logging import get_logger
from internship_portal.schemas.schemas import SignupRequest, UserUpdate
from internship_portal.services.base import ResourceService

logger = get_logger(__name__)

# Columns safe to hand back to clients
SAFE_COLUMNS = "id, email, user_type, created_at"


class UserService(ResourceService):
    table = "users"
    label = "User"
    updatable = ("email", "user_type", "password")
    required = ("email", "user_type", "password")

    def signup(self, data: SignupRequest) -> dict:
        with integrity_errors(conflict="User already exists"):
            user = self.db.fetch_one(
                f"""
                INSERT INTO users (email, password, user_type)
                VALUES (:email, :password, :user_type)
                RETURNING {SAFE_COLUMNS}
                """,
                {
                    "email": data.email,
                    "password": hash_password(data.password),
                    "user_type": data.user_type,
                }
            )
        logger.info("User %s signed up as %s", user["id"], user["user_type"])
        return user

    def login(self, email: str, password: str) -> dict:
        user = self.db.fetch_one(
            f"SELECT {SAFE_COLUMNS}, password FROM users WHERE email = :email",
            {"email": email}
        )
        if user is None:
            raise NotFoundError("User not found")

        hashed = user.pop("password")
        if not verify_password(password, hashed):
            raise AuthError("Invalid password")
        return user

    def list_users(self) -> List[dict]:
        return self.db.execute(f"SELECT {SAFE_COLUMNS} FROM users ORDER BY id")

    def get_user(self, user_id: int) -> dict:
        user = self.db.fetch_one(
            """
            SELECT u.id, u.email, u.user_type, u.created_at,
                   sp.id AS student_profile_id, s.id AS startup_id
            FROM users u
            LEFT JOIN student_profiles sp ON sp.user_id = u.id
            LEFT JOIN startups s ON s.user_id = u.id
            WHERE u.id = :id
            LIMIT 1
            """,
            {"id": user_id}
        )
        if user is None:
            raise self.not_found()
        return user

    def update_user(self, user_id: int, data: UserUpdate) -> dict:
        fields = self.changes(data)
        if "password" in fields:
            fields["password"] = hash_password(fields["password"])

        with integrity_errors(conflict="Email already in use"):
            return self.apply_update(user_id, fields, returning=SAFE_COLUMNS)
