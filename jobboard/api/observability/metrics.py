from __future__ import annotations

import re
from prometheus_client import Counter, Histogram


# Known route shapes; anything else shares one label.
_ROUTE_LABELS = [
    (re.compile(r"^/companies/?$"), "/companies"),
    (re.compile(r"^/companies/[^/]+/?$"), "/companies/:handle"),
    (re.compile(r"^/jobs/?$"), "/jobs"),
    (re.compile(r"^/jobs/\d+/?$"), "/jobs/:id"),
    (re.compile(r"^/users/?$"), "/users"),
    (re.compile(r"^/users/[^/]+/?$"), "/users/:username"),
    (re.compile(r"^/users/[^/]+/jobs/\d+/?$"), "/users/:username/jobs/:id"),
    (re.compile(r"^/auth/(token|register)/?$"), None),
    (re.compile(r"^/health(/ready)?/?$"), None),
    (re.compile(r"^/(metrics|docs|redoc|openapi\.json)$"), None),
]

OTHER_PATH = "/:other"


def normalize_path(path: str) -> str:
    """Reduce request paths to a bounded set of metrics labels."""
    p = path or "/"
    for pattern, label in _ROUTE_LABELS:
        if pattern.match(p):
            return label or p.rstrip("/")
    return OTHER_PATH


HTTP_REQUESTS_TOTAL = Counter(
    "jobboard_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "jobboard_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)

AUTHZ_DECISIONS_TOTAL = Counter(
    "jobboard_authz_decisions_total",
    "Authorization decisions",
    ["decision", "requirement", "method", "path"],
)
