"""Request pipeline: an ordered list of interceptors run before dispatch.

Each interceptor gets the request and the app settings and returns either
None (carry on) or a response that ends the request right there. Whatever
the route handler raises past its own HTTPExceptions ends up in the
fallback handler and becomes a generic 500.
"""
import hmac
import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from .config import Settings

logger = logging.getLogger(__name__)

Interceptor = Callable[[Request, Settings], Optional[Response]]


def log_request(request: Request, settings: Settings) -> Optional[Response]:
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    logger.info("[%s] %s %s", datetime.now(timezone.utc).isoformat(), request.method, target)
    return None


def require_api_key(request: Request, settings: Settings) -> Optional[Response]:
    supplied = request.headers.get(settings.api_key_header)
    expected = settings.api_key
    if not supplied or not expected or not hmac.compare_digest(supplied.encode(), expected.encode()):
        return JSONResponse({"error": "Unauthorized: Invalid API key"}, status_code=401)
    return None


DEFAULT_INTERCEPTORS: Sequence[Interceptor] = (log_request, require_api_key)


def fallback_response(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse({"error": "Internal Server Error"}, status_code=500)


def install_pipeline(app: FastAPI, settings: Settings, interceptors: Sequence[Interceptor] = DEFAULT_INTERCEPTORS) -> None:
    chain = tuple(interceptors)

    @app.middleware("http")
    async def request_pipeline(request: Request, call_next):
        for interceptor in chain:
            response = interceptor(request, settings)
            if response is not None:
                return response
        try:
            return await call_next(request)
        except Exception as exc:
            return fallback_response(request, exc)
