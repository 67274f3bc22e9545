"""
Schemas module - Request/Response schemas for API endpoints.
"""
from internship_portal.schemas.schemas import normalize_skills

__all__ = ["normalize_skills"]
