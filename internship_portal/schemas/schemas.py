"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, List, Any, Union
from datetime import date, datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserType(str, Enum):
    student = "student"
    startup = "startup"


class InternshipStatus(str, Enum):
    active = "Active"
    closed = "Closed"
    draft = "Draft"


class ApplicationStatus(str, Enum):
    applied = "Applied"
    reviewing = "Reviewing"
    interviewing = "Interviewing"
    offer = "Offer"
    rejected = "Rejected"


# ============================================================
# SKILLS INPUT
# ============================================================

SkillsInput = Union[str, List[Any], None]


def normalize_skills(skills: SkillsInput) -> List[str]:
    """
    Accepts ['React', 'Node'], "React, Node" or "React".
    Returns the trimmed, non-empty entries in their original order.
    Anything else (numbers, objects) raises ValueError.
    """
    if skills is None:
        return []
    if isinstance(skills, str):
        entries = skills.split(",")
    elif isinstance(skills, (list, tuple)):
        entries = [str(s) for s in skills if s is not None]
    else:
        raise ValueError("required_skills must be a list or a comma-separated string")
    return [s.strip() for s in entries if s.strip()]


class RequestModel(BaseModel):
    # Enum fields (defaults included) dump as plain strings for SQL binding
    model_config = ConfigDict(use_enum_values=True, validate_default=True)


# ============================================================
# USER SCHEMAS
# ============================================================

class SignupRequest(RequestModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    user_type: UserType

class LoginRequest(RequestModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class UserUpdate(RequestModel):
    email: Optional[EmailStr] = None
    user_type: Optional[UserType] = None
    password: Optional[str] = Field(None, min_length=1)

class UserResponse(BaseModel):
    id: int
    email: str
    user_type: str
    created_at: datetime

class UserDetailResponse(UserResponse):
    student_profile_id: Optional[int] = None
    startup_id: Optional[int] = None

class UserEnvelope(BaseModel):
    message: str
    user: UserResponse

class UserDetailEnvelope(BaseModel):
    user: UserDetailResponse

class AuthResponse(UserEnvelope):
    access_token: str
    token_type: str = "bearer"

class UserListResponse(BaseModel):
    users: List[UserResponse]


# ============================================================
# STUDENT PROFILE SCHEMAS
# ============================================================

class StudentProfileCreate(RequestModel):
    user_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    school: Optional[str] = None
    major: Optional[str] = None
    graduation_date: Optional[date] = None
    resume_url: Optional[str] = None
    portfolio_link: Optional[str] = None

class StudentProfileUpdate(RequestModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    school: Optional[str] = None
    major: Optional[str] = None
    graduation_date: Optional[date] = None
    resume_url: Optional[str] = None
    portfolio_link: Optional[str] = None

class StudentProfileResponse(BaseModel):
    id: int
    user_id: int
    name: str
    school: Optional[str] = None
    major: Optional[str] = None
    graduation_date: Optional[date] = None
    resume_url: Optional[str] = None
    portfolio_link: Optional[str] = None
    user_email: Optional[str] = None

class StudentProfileEnvelope(BaseModel):
    student_profile: StudentProfileResponse

class StudentProfileMessageEnvelope(StudentProfileEnvelope):
    message: str

class StudentMeResponse(BaseModel):
    student: StudentProfileResponse

class StudentProfileListResponse(BaseModel):
    student_profiles: List[StudentProfileResponse]


# ============================================================
# STARTUP SCHEMAS
# ============================================================

class StartupCreate(RequestModel):
    user_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    website: Optional[str] = None

class StartupUpdate(RequestModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    website: Optional[str] = None

class StartupResponse(BaseModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    user_email: Optional[str] = None

class StartupEnvelope(BaseModel):
    startup: StartupResponse

class StartupMessageEnvelope(StartupEnvelope):
    message: str

class StartupListResponse(BaseModel):
    startups: List[StartupResponse]


# ============================================================
# INTERNSHIP SCHEMAS
# ============================================================

class InternshipCreate(RequestModel):
    startup_id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1, max_length=255)
    role: Optional[str] = None
    location: Optional[str] = None
    stipend: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    required_skills: List[str] = []
    status: InternshipStatus = InternshipStatus.active

    @field_validator("required_skills", mode="before")
    @classmethod
    def _normalize_skills(cls, value: SkillsInput) -> List[str]:
        return normalize_skills(value)

class InternshipUpdate(RequestModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    role: Optional[str] = None
    location: Optional[str] = None
    stipend: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    required_skills: Optional[List[str]] = None
    status: Optional[InternshipStatus] = None

    @field_validator("required_skills", mode="before")
    @classmethod
    def _normalize_skills(cls, value: SkillsInput) -> List[str]:
        return normalize_skills(value)

class InternshipResponse(BaseModel):
    id: int
    startup_id: int
    title: str
    role: Optional[str] = None
    location: Optional[str] = None
    stipend: Optional[int] = None
    description: Optional[str] = None
    required_skills: List[str] = []
    status: str
    posted_at: datetime
    startup_name: Optional[str] = None
    startup_website: Optional[str] = None

class InternshipEnvelope(BaseModel):
    internship: InternshipResponse

class InternshipMessageEnvelope(InternshipEnvelope):
    message: str

class InternshipListResponse(BaseModel):
    internships: List[InternshipResponse]


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(RequestModel):
    student_id: int = Field(..., gt=0)
    internship_id: int = Field(..., gt=0)
    startup_id: int = Field(..., gt=0)
    status: ApplicationStatus = ApplicationStatus.applied
    notes: Optional[str] = None

class ApplicationUpdate(RequestModel):
    status: Optional[ApplicationStatus] = None
    notes: Optional[str] = None

class ApplicationResponse(BaseModel):
    id: int
    student_id: int
    internship_id: int
    startup_id: int
    status: str
    notes: Optional[str] = None
    applied_at: datetime
    student_name: Optional[str] = None
    internship_title: Optional[str] = None
    startup_name: Optional[str] = None

class StudentApplicationResponse(BaseModel):
    application_id: int
    student_id: int
    internship_id: int
    startup_id: int
    status: str
    notes: Optional[str] = None
    applied_at: datetime
    internship_title: Optional[str] = None
    internship_description: Optional[str] = None
    internship_location: Optional[str] = None
    internship_stipend: Optional[int] = None
    startup_name: Optional[str] = None
    startup_website: Optional[str] = None

class ApplicationEnvelope(BaseModel):
    application: ApplicationResponse

class ApplicationMessageEnvelope(ApplicationEnvelope):
    message: str

class ApplicationListResponse(BaseModel):
    applications: List[ApplicationResponse]

class StudentApplicationListResponse(BaseModel):
    applications: List[StudentApplicationResponse]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

class DeletedResponse(MessageResponse):
    id: int

class ErrorResponse(BaseModel):
    detail: str
