"""
Startup Routes

POST /startups - Create startup
GET /startups - List startups (?name=&website=)
GET /startups/user/{user_id} - Startups owned by a user
GET /startups/{id} - Startup by id
PATCH /startups/{id} - Partial update
DELETE /startups/{id} - Delete startup
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from internship_portal.api.deps import get_startup_service
from internship_portal.services.startup_service import StartupService
from internship_portal.schemas.schemas import (
    StartupCreate, StartupUpdate, StartupEnvelope, StartupMessageEnvelope,
    StartupListResponse, DeletedResponse
)

router = APIRouter(prefix="/startups", tags=["Startups"])


@router.post("", response_model=StartupMessageEnvelope, status_code=201)
def create_startup(data: StartupCreate, startups: StartupService = Depends(get_startup_service)):
    return StartupMessageEnvelope(message="Startup created", startup=startups.create(data))


@router.get("", response_model=StartupListResponse)
def list_startups(
    name: Optional[str] = Query(None),
    website: Optional[str] = Query(None),
    startups: StartupService = Depends(get_startup_service),
):
    return StartupListResponse(startups=startups.list_startups(name, website))


@router.get("/user/{user_id}", response_model=StartupListResponse)
def get_startups_by_user(user_id: int, startups: StartupService = Depends(get_startup_service)):
    return StartupListResponse(startups=startups.list_by_user(user_id))


@router.get("/{startup_id}", response_model=StartupEnvelope)
def get_startup(startup_id: int, startups: StartupService = Depends(get_startup_service)):
    return StartupEnvelope(startup=startups.get(startup_id))


@router.patch("/{startup_id}", response_model=StartupMessageEnvelope)
def update_startup(startup_id: int, data: StartupUpdate, startups: StartupService = Depends(get_startup_service)):
    return StartupMessageEnvelope(message="Startup updated", startup=startups.update(startup_id, data))


@router.delete("/{startup_id}", response_model=DeletedResponse)
def delete_startup(startup_id: int, startups: StartupService = Depends(get_startup_service)):
    return DeletedResponse(message="Startup deleted", id=startups.delete(startup_id))
