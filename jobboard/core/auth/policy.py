from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from jobboard.core.auth.models import Decision, Principal, Requirement

# Paths no rule covers need an admin.
DEFAULT_REQUIREMENT = Requirement.ADMIN_ONLY


def decide(
    principal: Optional[Principal],
    requirement: Requirement,
    owner: Optional[str] = None,
) -> Decision:
    """
    Pure authorization decision.

    A missing principal means the caller is anonymous (no token, or a token
    that failed verification).
    """
    if requirement is Requirement.PUBLIC:
        return Decision.allow()

    if principal is None:
        return Decision.deny("Unauthorized")

    if requirement is Requirement.AUTHENTICATED_ANY:
        return Decision.allow()

    if requirement is Requirement.OWNER_OR_ADMIN:
        if principal.is_admin or (owner is not None and principal.username == owner):
            return Decision.allow()
        return Decision.deny("Unauthorized")

    if requirement is Requirement.ADMIN_ONLY:
        if principal.is_admin:
            return Decision.allow()
        return Decision.deny("Unauthorized")

    raise ValueError(f"Unknown requirement: {requirement}")


@dataclass(frozen=True)
class PolicyRule:
    method: str  # "GET", "POST", "*" etc.
    pattern: re.Pattern
    requirement: Requirement


_MUTATING = ("POST", "PATCH", "PUT", "DELETE")

# Ordered: first match wins. A named group "owner" marks the owning username.
RULES: list[PolicyRule] = [

    # -----------------------------
    # Health checks, metrics scrape and API docs
    # -----------------------------
    PolicyRule(method="GET", pattern=re.compile(r"^/health(/ready)?/?$"), requirement=Requirement.PUBLIC),
    PolicyRule(method="GET", pattern=re.compile(r"^/metrics/?$"), requirement=Requirement.PUBLIC),
    PolicyRule(
        method="GET",
        pattern=re.compile(r"^/(docs(/oauth2-redirect)?|redoc|openapi\.json)$"),
        requirement=Requirement.PUBLIC,
    ),

    # -----------------------------
    # Token issue / self registration
    # -----------------------------
    PolicyRule(method="POST", pattern=re.compile(r"^/auth/(token|register)/?$"), requirement=Requirement.PUBLIC),

    # -----------------------------
    # Companies + jobs: public reads, admin writes
    # -----------------------------
    *[
        PolicyRule(method=m, pattern=re.compile(r"^/(companies|jobs)(/[^/]+)?/?$"), requirement=Requirement.ADMIN_ONLY)
        for m in _MUTATING
    ],
    PolicyRule(method="GET", pattern=re.compile(r"^/(companies|jobs)(/[^/]+)?/?$"), requirement=Requirement.PUBLIC),

    # -----------------------------
    # Users: collection is admin-only, a user's own resources are self-service
    # -----------------------------
    PolicyRule(method="*", pattern=re.compile(r"^/users/?$"), requirement=Requirement.ADMIN_ONLY),
    PolicyRule(
        method="*",
        pattern=re.compile(r"^/users/(?P<owner>[^/]+)(/.*)?$"),
        requirement=Requirement.OWNER_OR_ADMIN,
    ),
]


def requirement_for(method: str, path: str) -> Tuple[Requirement, Optional[str]]:
    """
    Returns (requirement, owner) for this request. Paths no rule covers fall
    back to DEFAULT_REQUIREMENT.
    """
    m = (method or "GET").upper()
    for rule in RULES:
        if rule.method != "*" and rule.method != m:
            continue
        match = rule.pattern.match(path)
        if match:
            return rule.requirement, match.groupdict().get("owner")
    return DEFAULT_REQUIREMENT, None
