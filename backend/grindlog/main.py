"""
Grindlog FastAPI Application Entry Point.

Run with: uvicorn grindlog.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from grindlog.api.routes import (
    activity_blocks,
    auth,
    daily_logs,
    daily_summary,
    default_plans,
    plans,
    preferences,
    reports,
)
from grindlog.config import get_settings, sanitize_error
from grindlog.db.session import Database
from grindlog.errors import GrindlogError, StoreUnavailableError, ValidationError

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: one store handle for the whole process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.state.database = Database.from_settings(settings)
    logger.info("%s started (environment=%s)", settings.app_name, settings.environment)
    yield
    await app.state.database.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Daily plans, activity logs and end-of-day summaries API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# ERROR HANDLERS
# =============================================================================


def _error_response(error: GrindlogError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.message, "kind": error.kind},
        headers=error.headers,
    )


@app.exception_handler(GrindlogError)
async def grindlog_error_handler(request: Request, exc: GrindlogError) -> JSONResponse:
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or incomplete request bodies/params are a 400, not FastAPI's default 422."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return _error_response(ValidationError("; ".join(messages) or None))


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Database unavailable during %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(
        StoreUnavailableError(
            sanitize_error(exc, generic_message=StoreUnavailableError.default_message)
        )
    )


# Include routers
app.include_router(auth.router)
app.include_router(plans.router)
app.include_router(activity_blocks.router)
app.include_router(default_plans.router)
app.include_router(daily_logs.router)
app.include_router(daily_summary.router)
app.include_router(reports.router)
app.include_router(preferences.router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
