"""
Dependency providers.

The Database is created once in the application lifespan and kept on
app.state; services are cheap wrappers built per request around it.
"""

from fastapi import Depends, Request

from internship_portal.core.errors import InternalError
from internship_portal.db.postgres import Database
from internship_portal.services.application_service import ApplicationService
from internship_portal.services.internship_service import InternshipService
from internship_portal.services.startup_service import StartupService
from internship_portal.services.student_service import StudentService
from internship_portal.services.user_service import UserService


def get_database(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise InternalError("Database connector is not initialized")
    return db


def get_user_service(db: Database = Depends(get_database)) -> UserService:
    return UserService(db)


def get_student_service(db: Database = Depends(get_database)) -> StudentService:
    return StudentService(db)


def get_startup_service(db: Database = Depends(get_database)) -> StartupService:
    return StartupService(db)


def get_internship_service(db: Database = Depends(get_database)) -> InternshipService:
    return InternshipService(db)


def get_application_service(db: Database = Depends(get_database)) -> ApplicationService:
    return ApplicationService(db)
