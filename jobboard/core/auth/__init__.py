from .models import Decision, Principal, Requirement
from .passwords import PasswordHasher
from .policy import decide, requirement_for
from .tokens import JwtConfig, TokenService

__all__ = [
    "Decision",
    "JwtConfig",
    "PasswordHasher",
    "Principal",
    "Requirement",
    "TokenService",
    "decide",
    "requirement_for",
]
