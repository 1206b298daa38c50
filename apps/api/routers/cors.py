"""Shared response plumbing for the public function endpoints."""

from contextlib import contextmanager
import logging
from typing import Dict, Iterator, Optional

from fastapi import HTTPException, Response

from config import settings

logger = logging.getLogger(__name__)


def allowed_origin(request_origin: Optional[str] = None) -> str:
    """Pick the single `Access-Control-Allow-Origin` value for a request."""
    origins = [origin for origin in settings.CORS_ORIGINS if origin]
    if not origins or "*" in origins:
        return "*"
    if request_origin and request_origin in origins:
        return request_origin
    return origins[0]


def cors_headers(request_origin: Optional[str] = None) -> Dict[str, str]:
    headers = {
        "Access-Control-Allow-Origin": allowed_origin(request_origin),
        "Access-Control-Allow-Headers": ", ".join(settings.CORS_ALLOW_HEADERS),
    }
    if headers["Access-Control-Allow-Origin"] != "*":
        headers["Vary"] = "Origin"
    return headers


def preflight_response() -> Response:
    """Empty 200 reply to a CORS preflight; CORS headers are added by middleware."""
    return Response(status_code=200)


@contextmanager
def handler_errors(handler_name: str) -> Iterator[None]:
    """Report any unclassified failure inside a handler as a 500."""
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Error in %s", handler_name)
        raise HTTPException(status_code=500, detail=str(exc) or "An unknown error occurred") from exc
