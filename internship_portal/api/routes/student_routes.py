"""
Student Profile Routes

POST /students - Create profile
GET /students - List profiles (?school=&major=&q=)
GET /students/me - Profile of the calling user (X-User-ID or bearer token)
GET /students/user/{user_id} - Profile by user id
GET /students/{id} - Profile by id
PATCH /students/{id} - Partial update
DELETE /students/{id} - Delete profile
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from internship_portal.core.auth import get_caller_user_id
from internship_portal.api.deps import get_student_service
from internship_portal.services.student_service import StudentService
from internship_portal.schemas.schemas import (
    StudentProfileCreate, StudentProfileUpdate, StudentProfileEnvelope,
    StudentProfileMessageEnvelope, StudentMeResponse, StudentProfileListResponse,
    DeletedResponse
)

router = APIRouter(prefix="/students", tags=["Students"])


@router.post("", response_model=StudentProfileMessageEnvelope, status_code=201)
def create_profile(data: StudentProfileCreate, students: StudentService = Depends(get_student_service)):
    """Create a student profile after signup. user_id and name are required."""
    return StudentProfileMessageEnvelope(
        message="Student profile created", student_profile=students.create(data)
    )


@router.get("/me", response_model=StudentMeResponse)
def get_my_profile(
    user_id: int = Depends(get_caller_user_id),
    students: StudentService = Depends(get_student_service),
):
    return StudentMeResponse(student=students.get_for_user(user_id))


@router.get("", response_model=StudentProfileListResponse)
def list_profiles(
    school: Optional[str] = Query(None),
    major: Optional[str] = Query(None),
    q: Optional[str] = Query(None, description="Search name, resume URL and portfolio link"),
    students: StudentService = Depends(get_student_service),
):
    return StudentProfileListResponse(student_profiles=students.list_profiles(school, major, q))


@router.get("/user/{user_id}", response_model=StudentProfileEnvelope)
def get_profile_by_user(user_id: int, students: StudentService = Depends(get_student_service)):
    return StudentProfileEnvelope(student_profile=students.get_by_user(user_id))


@router.get("/{profile_id}", response_model=StudentProfileEnvelope)
def get_profile(profile_id: int, students: StudentService = Depends(get_student_service)):
    return StudentProfileEnvelope(student_profile=students.get(profile_id))


@router.patch("/{profile_id}", response_model=StudentProfileMessageEnvelope)
def update_profile(
    profile_id: int,
    data: StudentProfileUpdate,
    students: StudentService = Depends(get_student_service),
):
    """Update student profile. Only provided fields are updated."""
    return StudentProfileMessageEnvelope(
        message="Student profile updated", student_profile=students.update(profile_id, data)
    )


@router.delete("/{profile_id}", response_model=DeletedResponse)
def delete_profile(profile_id: int, students: StudentService = Depends(get_student_service)):
    return DeletedResponse(message="Student profile deleted", id=students.delete(profile_id))
