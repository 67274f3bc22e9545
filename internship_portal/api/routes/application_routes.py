"""
Application Routes

POST /applications - Apply to an internship
GET /applications - All applications with display names
GET /applications/student/{student_id} - A student's applications
GET /applications/startup/{startup_id} - Applications received by a startup
GET /applications/{id} - Application by id
PATCH /applications/{id} - Update status and/or notes
DELETE /applications/{id} - Delete application
"""

from fastapi import APIRouter, Depends, Path

from internship_portal.api.deps import get_application_service
from internship_portal.services.application_service import ApplicationService
from internship_portal.schemas.schemas import (
    ApplicationCreate, ApplicationUpdate, ApplicationEnvelope, ApplicationMessageEnvelope,
    ApplicationListResponse, StudentApplicationListResponse, DeletedResponse
)

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.post("", response_model=ApplicationMessageEnvelope, status_code=201)
def create_application(data: ApplicationCreate, applications: ApplicationService = Depends(get_application_service)):
    """Apply to an internship. Applying twice to the same internship is rejected."""
    return ApplicationMessageEnvelope(
        message="Application created successfully", application=applications.create(data)
    )


@router.get("", response_model=ApplicationListResponse)
def list_applications(applications: ApplicationService = Depends(get_application_service)):
    return ApplicationListResponse(applications=applications.list_applications())


@router.get("/student/{student_id}", response_model=StudentApplicationListResponse)
def get_student_applications(
    student_id: int = Path(..., gt=0),
    applications: ApplicationService = Depends(get_application_service),
):
    """Newest first, with internship and startup details."""
    return StudentApplicationListResponse(applications=applications.list_by_student(student_id))


@router.get("/startup/{startup_id}", response_model=ApplicationListResponse)
def get_startup_applications(startup_id: int, applications: ApplicationService = Depends(get_application_service)):
    return ApplicationListResponse(applications=applications.list_by_startup(startup_id))


@router.get("/{application_id}", response_model=ApplicationEnvelope)
def get_application(application_id: int, applications: ApplicationService = Depends(get_application_service)):
    return ApplicationEnvelope(application=applications.get(application_id))


@router.patch("/{application_id}", response_model=ApplicationMessageEnvelope)
def update_application(
    application_id: int,
    data: ApplicationUpdate,
    applications: ApplicationService = Depends(get_application_service),
):
    """Update status and/or notes. Status must be one of the allowed values."""
    return ApplicationMessageEnvelope(
        message="Application updated", application=applications.update(application_id, data)
    )


@router.delete("/{application_id}", response_model=DeletedResponse)
def delete_application(application_id: int, applications: ApplicationService = Depends(get_application_service)):
    return DeletedResponse(message="Application deleted", id=applications.delete(application_id))
