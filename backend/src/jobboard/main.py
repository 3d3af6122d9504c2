"""Main FastAPI Application

Wires middleware, global exception handlers and the resource routers.
The database engine is created by the lifespan and kept on ``app.state.db``.

Run locally for development with:

    uvicorn jobboard.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from jobboard import __version__
from jobboard.core.config import settings
from jobboard.core.database import Database
from jobboard.core.logging_config import configure_logging
from jobboard.core.exceptions import (
    DomainException,
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
    RepositoryException,
)
from jobboard.presentation.api.v1.endpoints.applications import router as applications_router
from jobboard.presentation.api.v1.endpoints.companies import router as companies_router
from jobboard.presentation.api.v1.endpoints.resumes import router as resumes_router
from jobboard.presentation.api.v1.endpoints.users import router as users_router
from jobboard.presentation.api.v1.endpoints.vacancies import router as vacancies_router
from jobboard.presentation.api.v1.schemas.common import ErrorResponse


GENERIC_ERROR = "Something went wrong"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})")

    db = Database.from_settings(settings)
    await db.create_all()
    app.state.db = db
    logger.info("Database initialized")

    yield

    logger.info("Shutting down")
    await db.dispose()
    logger.info("Database connections closed")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump()
    )


async def domain_exception_handler(request: Request, exc: DomainException):
    """Map the domain exception hierarchy onto HTTP status codes"""
    if isinstance(exc, RepositoryException):
        logger.error(f"Repository failure on {request.method} {request.url.path}: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR)

    if isinstance(exc, AuthenticationException):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exc, AuthorizationException):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, ResourceNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    logger.warning(f"{request.method} {request.url.path} rejected ({status_code}): {exc}")
    return _error(status_code, str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies, params and ids are client errors"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return _error(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.opt(exception=exc).error(f"Unhandled exception on {request.method} {request.url.path}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR)


def create_app() -> FastAPI:
    """Build the ASGI application"""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Job board API: users, companies, vacancies, applications and resumes",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(users_router, prefix="/users", tags=["Users"])
    app.include_router(companies_router, prefix="/companies", tags=["Companies"])
    app.include_router(vacancies_router, prefix="/vacancies", tags=["Vacancies"])
    app.include_router(applications_router, prefix="/applications", tags=["Applications"])
    app.include_router(resumes_router, prefix="/resumes", tags=["Resumes"])

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint with a database ping"""
        db = getattr(request.app.state, "db", None)
        database_ok = db is not None and await db.health_check()
        return JSONResponse(
            status_code=status.HTTP_200_OK if database_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "healthy" if database_ok else "degraded",
                "database": "up" if database_ok else "down",
                "version": __version__,
            }
        )

    return app


configure_logging(settings)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "jobboard.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
