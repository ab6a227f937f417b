from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Principal:
    username: str
    is_admin: bool = False
    issued_at: Optional[int] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> Optional["Principal"]:
        username = claims.get("username")
        if not isinstance(username, str) or not username:
            return None
        iat = claims.get("iat")
        return cls(
            username=username,
            is_admin=claims.get("isAdmin") is True,
            issued_at=iat if isinstance(iat, int) else None,
        )


class Requirement(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED_ANY = "authenticated"
    OWNER_OR_ADMIN = "owner_or_admin"
    ADMIN_ONLY = "admin"


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str = "Unauthorized") -> "Decision":
        return cls(allowed=False, reason=reason)
