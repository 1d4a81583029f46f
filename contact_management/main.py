"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: logging → DI container → database schema.
"""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from contact_management.api.v1 import auth_router, company_router, contact_router, country_router
from contact_management.api.v1.error_handlers import register_exception_handlers
from contact_management.core.config import Settings, get_settings
from contact_management.core.logging_config import configure_logging
from contact_management.di.container import DIContainer
from contact_management.infrastructure.db.database import Database


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - DI container (database, repositories, services, auth)
    - CORS middleware configuration
    - Request logging middleware
    - Exception handlers
    - API route registration
    - Startup/shutdown event handlers for the database

    Args:
        settings: Settings to use; read from the environment when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    logger = configure_logging(settings)
    container = DIContainer(settings, logger)

    application = FastAPI(
        title=settings.app_name,
        description="CRUD API for companies, contacts and countries",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    request_logger = logger.getChild("http")

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        request_logger.info(f"Handling {request.method} {request.url.path}")
        response = await call_next(request)
        request_logger.info(f"Handled {request.method} {request.url.path} -> {response.status_code}")
        return response

    register_exception_handlers(application, logger.getChild("errors"))

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(company_router, prefix="/api/v1/company")
    application.include_router(contact_router, prefix="/api/v1/contact")
    application.include_router(country_router, prefix="/api/v1/country")

    @application.on_event("startup")
    def startup_event() -> None:
        """Create missing tables before serving requests."""
        container.get(Database).create_schema()
        logger.info("Application is starting")

    @application.on_event("shutdown")
    def shutdown_event() -> None:
        """Release database connections."""
        container.get(Database).dispose()
        logger.info("Application stopped")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
