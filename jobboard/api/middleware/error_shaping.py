from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from jobboard.core.errors import JobboardError

log = logging.getLogger("jobboard.errors")


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Last line of defence for anything the route handlers did not turn into a
    JobboardError. The client gets the generic 500 body (plus its request id);
    the traceback only goes to the jobboard.errors log.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            request_id = getattr(request.state, "request_id", None) or request.headers.get("x-request-id")
            log.exception(
                "unhandled %s %s request_id=%s",
                request.method,
                request.url.path,
                request_id,
            )
            body = {"detail": JobboardError.default_message()}
            if request_id:
                body["request_id"] = request_id
            return JSONResponse(status_code=JobboardError.status_code, content=body)


async def jobboard_error_handler(request: Request, exc: JobboardError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("%s: %s path=%s", type(exc).__name__, exc.message, request.url.path)
    else:
        log.info("%s: %s path=%s", type(exc).__name__, exc.message, request.url.path)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Request-shape problems are client errors: 400 instead of FastAPI's 422.
    errors = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        errors.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    log.info("validation failed path=%s errors=%s", request.url.path, errors)
    return JSONResponse(status_code=400, content={"detail": errors})
