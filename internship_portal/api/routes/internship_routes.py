"""
Internship Routes

POST /internships - Create internship
GET /internships - List with filters (?startup_id=&status=&skill=&q=)
GET /internships/startup/{startup_id} - Internships of one startup
GET /internships/{id} - Internship with startup details
PATCH /internships/{id} - Partial update
DELETE /internships/{id} - Delete internship
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from internship_portal.api.deps import get_internship_service
from internship_portal.core.errors import ValidationError
from internship_portal.services.internship_service import InternshipService
from internship_portal.schemas.schemas import (
    InternshipCreate, InternshipUpdate, InternshipStatus, InternshipEnvelope,
    InternshipMessageEnvelope, InternshipListResponse, DeletedResponse
)

router = APIRouter(prefix="/internships", tags=["Internships"])


# An empty query value means the filter was not supplied
def parse_startup_id(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError("startup_id: Input should be a valid integer")


def parse_status(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    try:
        return InternshipStatus(value).value
    except ValueError:
        allowed = ", ".join(s.value for s in InternshipStatus)
        raise ValidationError(f"status: Input should be one of {allowed}")


@router.post("", response_model=InternshipMessageEnvelope, status_code=201)
def create_internship(data: InternshipCreate, internships: InternshipService = Depends(get_internship_service)):
    """
    Create an internship posting.

    required_skills may be a list or a comma-separated string.
    """
    return InternshipMessageEnvelope(message="Internship created", internship=internships.create(data))


@router.get("", response_model=InternshipListResponse)
def list_internships(
    startup_id: Optional[str] = Query(None),
    status: Optional[str] = Query(None, description="Active, Closed or Draft"),
    skill: Optional[str] = Query(None, description="Exact entry of required_skills"),
    q: Optional[str] = Query(None, description="Search in title and description"),
    internships: InternshipService = Depends(get_internship_service),
):
    return InternshipListResponse(internships=internships.list_internships(
        startup_id=parse_startup_id(startup_id),
        status=parse_status(status),
        skill=skill,
        q=q,
    ))


@router.get("/startup/{startup_id}", response_model=InternshipListResponse)
def get_internships_by_startup(startup_id: int, internships: InternshipService = Depends(get_internship_service)):
    return InternshipListResponse(internships=internships.list_by_startup(startup_id))


@router.get("/{internship_id}", response_model=InternshipEnvelope)
def get_internship(internship_id: int, internships: InternshipService = Depends(get_internship_service)):
    return InternshipEnvelope(internship=internships.get(internship_id))


@router.patch("/{internship_id}", response_model=InternshipMessageEnvelope)
def update_internship(
    internship_id: int,
    data: InternshipUpdate,
    internships: InternshipService = Depends(get_internship_service),
):
    return InternshipMessageEnvelope(
        message="Internship updated", internship=internships.update(internship_id, data)
    )


@router.delete("/{internship_id}", response_model=DeletedResponse)
def delete_internship(internship_id: int, internships: InternshipService = Depends(get_internship_service)):
    return DeletedResponse(message="Internship deleted", id=internships.delete(internship_id))
