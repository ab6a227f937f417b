# jobboard/api/middleware/auth.py
from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from jobboard.api.observability.metrics import AUTHZ_DECISIONS_TOTAL, normalize_path
from jobboard.core.auth.policy import decide, requirement_for
from jobboard.core.auth.tokens import TokenService, extract_bearer

log = logging.getLogger("jobboard.auth")


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Two stages:
      1. authenticate: a verified bearer token becomes request.state.principal;
         anything else leaves the caller anonymous (principal = None)
      2. authorize: the policy rule for (method, path) is evaluated and a deny
         is answered with 401 before any route runs
    """

    def __init__(self, app, *, tokens: TokenService):
        super().__init__(app)
        self.tokens = tokens

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        method = request.method.upper()

        token = extract_bearer(request.headers.get("authorization"))
        principal = self.tokens.verify(token)
        request.state.principal = principal

        requirement, owner = requirement_for(method, path)
        decision = decide(principal, requirement, owner)

        AUTHZ_DECISIONS_TOTAL.labels(
            decision="allow" if decision.allowed else "deny",
            requirement=requirement.value,
            method=method,
            path=normalize_path(path),
        ).inc()

        if not decision.allowed:
            log.info(
                "authz deny user=%s admin=%s required=%s method=%s path=%s",
                principal.username if principal else None,
                principal.is_admin if principal else None,
                requirement.value,
                method,
                path,
            )
            return JSONResponse(status_code=401, content={"detail": decision.reason or "Unauthorized"})

        return await call_next(request)
