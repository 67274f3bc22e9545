"""
Internship Portal - Main Application

FastAPI backend with:
- PostgreSQL for users, student profiles, startups, internships, applications
- One shared connector created at startup and injected into every route
- Uniform JSON errors: {"detail": "..."}

Run: uvicorn internship_portal.main:app --reload
  or python -m internship_portal.main
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from internship_portal.api.routes import api_router
from internship_portal.core.config import Settings, get_settings
from internship_portal.core.errors import PortalError
from internship_portal.core.logging import configure_logging, get_logger
from internship_portal.db.postgres import Database
from internship_portal.schemas.schemas import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database connector on startup, release it on shutdown."""
    settings: Settings = app.state.settings
    db = Database(settings.postgres_url, pool_size=settings.db_pool_size, echo=settings.debug)
    app.state.db = db
    logger.info(
        "Connector ready for postgresql://%s@%s:%s/%s",
        settings.postgres_user, settings.postgres_host, settings.postgres_port, settings.postgres_db
    )
    if settings.db_init_schema:
        db.init_schema()
    try:
        yield
    finally:
        db.dispose()
        app.state.db = None


def describe_validation_error(exc: RequestValidationError) -> str:
    """First validation problem as "<field>: <reason>"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    field = ".".join(loc[1:]) if len(loc) > 1 else "".join(loc) or "request"
    return f"{field}: {first.get('msg', 'invalid value')}"


async def portal_error_handler(request: Request, exc: PortalError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": "Server error"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": describe_validation_error(exc)})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Internship Portal",
        description="""
        Two-sided internship marketplace.

        ## Resources
        - **Users**: signup/login for students and startups
        - **Students**: student profiles
        - **Startups**: startup profiles
        - **Internships**: postings with skill/status/text filters
        - **Applications**: student applications and their triage status
        """,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = settings
    app.state.db = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PortalError, portal_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include API routes; every failure shares the {"detail": ...} body
    app.include_router(api_router, prefix="/api", responses={
        400: {"model": ErrorResponse, "description": "Invalid input or conflict"},
        404: {"model": ErrorResponse, "description": "Not found"},
        500: {"model": ErrorResponse, "description": "Server error"},
    })

    @app.get("/", tags=["Health"])
    def root():
        return {"status": "healthy", "app": "Internship Portal", "message": "Internship Portal API is running"}

    @app.get("/health", tags=["Health"])
    def health_check(request: Request):
        """Detailed health check."""
        db: Optional[Database] = request.app.state.db
        connected = db is not None and db.ping()
        return {
            "status": "healthy" if connected else "degraded",
            "postgres": "connected" if connected else "disconnected"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("internship_portal.main:app", host="0.0.0.0", port=get_settings().port)
