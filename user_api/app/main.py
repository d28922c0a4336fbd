"""
FastAPI application entry point for the User Accounts API.

Provides:
- Account registration and login
- Access/refresh JWT issuance and refresh
- Profile listing, search, edit and delete
"""
import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncGenerator, Dict, List, Optional

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import AppSettings, get_settings
from .domain.exceptions import (
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    HashingException,
    PasswordMismatchException,
    TokenVerificationException,
    ValidationException,
)
from .infrastructure.database.connection import DatabaseManager, init_db
from .infrastructure.security import BcryptPasswordHasher, JWTHandler
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Manages startup and shutdown tasks.
    """
    settings: AppSettings = app.state.settings
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.environment)

    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception:
        logger.exception("Database initialization failed")
        raise

    yield

    logger.info("Shutting down application...")
    await DatabaseManager.close()
    logger.info("Shutdown complete")


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Application factory.

    Loads settings (unless given), configures logging and builds the
    process-wide security services before any request is served.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    DatabaseManager.configure(settings.database)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="User Accounts API - registration, login and JWT authentication",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.password_hasher = BcryptPasswordHasher(
        rounds=settings.security.bcrypt_rounds,
    )
    app.state.jwt_handler = JWTHandler(
        secret_key=settings.jwt.secret_key,
        algorithm=settings.jwt.algorithm,
        access_token_ttl=timedelta(minutes=settings.jwt.access_token_expire_minutes),
        refresh_token_ttl=timedelta(hours=settings.jwt.refresh_token_expire_hours),
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
    )

    register_exception_handlers(app, settings)
    register_routes(app, settings)

    return app


def _validation_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get('loc', ()) if part not in ('body', 'query', 'path')]
        field = '.'.join(loc) or 'request'
        errors.setdefault(field, []).append(err.get('msg', 'Invalid value'))
    return errors


def register_exception_handlers(app: FastAPI, settings: AppSettings) -> None:
    """Register global exception handlers."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=exc.to_dict(),
        )

    @app.exception_handler(ValidationException)
    async def validation_handler(request: Request, exc: ValidationException):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = ValidationException(
            message="Invalid request",
            errors=_validation_errors(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_dict(),
        )

    @app.exception_handler(EntityNotFoundException)
    async def not_found_handler(request: Request, exc: EntityNotFoundException):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=exc.to_dict(),
        )

    @app.exception_handler(PasswordMismatchException)
    async def password_mismatch_handler(request: Request, exc: PasswordMismatchException):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=exc.to_dict(),
        )

    @app.exception_handler(DuplicateEntityException)
    async def duplicate_handler(request: Request, exc: DuplicateEntityException):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=exc.to_dict(),
        )

    @app.exception_handler(TokenVerificationException)
    async def token_handler(request: Request, exc: TokenVerificationException):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=exc.to_dict(),
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(HashingException)
    async def hashing_handler(request: Request, exc: HashingException):
        logger.error("Account creation aborted: %s", exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                'error': 'INTERNAL_ERROR',
                'message': 'Something went wrong',
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)

        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    'error': 'INTERNAL_ERROR',
                    'message': str(exc),
                    'type': type(exc).__name__,
                },
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                'error': 'INTERNAL_ERROR',
                'message': 'Something went wrong',
            },
        )


def register_routes(app: FastAPI, settings: AppSettings) -> None:
    """Register API routes."""

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Check application health."""
        from .infrastructure.database.connection import health_check as db_health

        db_ok = await db_health()

        return {
            'status': 'healthy' if db_ok else 'degraded',
            'services': {
                'database': 'up' if db_ok else 'down',
            },
            'version': settings.app_version,
            'environment': settings.environment,
        }

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            'name': settings.app_name,
            'version': settings.app_version,
            'api_docs': '/docs' if settings.debug else None,
        }

    from .api.v1 import api_router

    # Mount API under the configured prefix
    main_router = APIRouter(prefix=settings.api_prefix)
    main_router.include_router(api_router)

    app.include_router(main_router)


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "user_api.app.main:create_app",
        factory=True,
        host=_settings.host,
        port=_settings.port,
        reload=_settings.reload,
        workers=_settings.workers,
    )
