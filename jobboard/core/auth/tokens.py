from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import jwt

from jobboard.core.auth.models import Principal
from jobboard.core.config import Settings

log = logging.getLogger("jobboard.auth")

ALGORITHM = "HS256"


@dataclass(frozen=True)
class JwtConfig:
    signing_key: str
    ttl_seconds: int = 0
    leeway_seconds: int = 30

    @classmethod
    def from_settings(cls, settings: Settings) -> "JwtConfig":
        return cls(signing_key=settings.secret_key, ttl_seconds=settings.token_ttl_seconds)


def extract_bearer(auth_header: Optional[str]) -> Optional[str]:
    if not auth_header:
        return None
    scheme, _, token = auth_header.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class TokenService:
    """
    Signs and verifies the `{username, isAdmin, iat}` token.

    verify() never raises: a missing, malformed, badly signed or expired
    token simply yields no principal, and the policy layer decides what an
    anonymous caller may do.
    """

    def __init__(self, cfg: JwtConfig):
        self.cfg = cfg

    def create(self, user: Mapping[str, Any]) -> str:
        now = int(time.time())
        claims: Dict[str, Any] = {
            "username": user["username"],
            "isAdmin": bool(user.get("isAdmin", False)),
            "iat": now,
        }
        if self.cfg.ttl_seconds > 0:
            claims["exp"] = now + self.cfg.ttl_seconds
        return jwt.encode(claims, self.cfg.signing_key, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> Optional[Principal]:
        if not token:
            return None

        options = {
            "verify_signature": True,
            "verify_exp": True,
            "verify_iat": False,
            "verify_nbf": True,
        }
        try:
            claims = jwt.decode(
                token,
                self.cfg.signing_key,
                algorithms=[ALGORITHM],
                options=options,
                leeway=self.cfg.leeway_seconds,
            )
        except jwt.PyJWTError as e:
            log.info("token rejected: %s", type(e).__name__)
            return None

        return Principal.from_claims(claims)
