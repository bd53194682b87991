"""
FastAPI application entry point.

This module sets up:
- FastAPI application with middleware
- Exception handlers
- API routes
- CORS configuration
"""

import logging

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import accounts, health, root, users
from src.core.config import settings
from src.core.handlers import (
    app_exception_handler,
    general_exception_handler,
    validation_exception_handler,
)
from src.core.lifespan import lifespan
from src.core.logging import setup_logging
from src.exceptions import AppException
from src.middleware import RequestIDMiddleware, RequestLoggingMiddleware

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


# ============================================================================
# FastAPI Application
# ============================================================================
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description=settings.description,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)


# ============================================================================
# Exception Handlers
# ============================================================================
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)


# ============================================================================
# Middleware Setup (Order matters!)
# ============================================================================
# Added last runs first: RequestIDMiddleware wraps the logging middleware
# so every request log line carries the request id.
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# API Routes
# ============================================================================
v1_router = APIRouter(prefix="/v1")
v1_router.include_router(users.router)
v1_router.include_router(accounts.router)

api_router = APIRouter(prefix="/api")
api_router.include_router(v1_router)

app.include_router(root.router)
app.include_router(health.router)
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
