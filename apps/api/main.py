"""
Viral Recreate API - FastAPI Backend
Main application entry point: trend ingestion, video jobs, credits.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings, validate_security_settings
from database import engine, Base
import models  # noqa: F401
from routers import (
    health,
    trends,
    video_jobs,
    billing,
    virality,
    ux,
)
from routers.cors import cors_headers

logging.basicConfig(
    level=getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    print("🚀 Starting Viral Recreate API...")
    validate_security_settings()
    if settings.AUTO_CREATE_DB_SCHEMA:
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            print("🗄️ Database schema verified.")
        except Exception as e:
            print(f"⚠️ Database bootstrap skipped: {e}")
    yield
    # Shutdown
    await engine.dispose()
    print("👋 Shutting down API...")


app = FastAPI(
    title="Viral Recreate API",
    description="Capture viral trends, recreate them as branded videos and bill usage in credits",
    version="0.1.0",
    lifespan=lifespan,
)


# CORS headers go on every response, preflights included.
@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in cors_headers(request.headers.get("origin")).items():
        response.headers.setdefault(name, value)
    return response


def _error_response(request: Request, status_code: int, message: str, headers=None) -> JSONResponse:
    merged = dict(headers or {})
    merged.update(cors_headers(request.headers.get("origin")))
    return JSONResponse(status_code=status_code, content={"error": message}, headers=merged)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(request, exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request body"
    return _error_response(request, 400, message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(request, 500, str(exc) or "An unknown error occurred")


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(trends.router, tags=["Trends"])
app.include_router(video_jobs.router, tags=["Video Jobs"])
app.include_router(billing.router, tags=["Billing"])
app.include_router(virality.router, tags=["Virality"])
app.include_router(ux.router, prefix="/ux", tags=["UX"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Viral Recreate API",
        "version": "0.1.0",
        "status": "running"
    }
