from __future__ import annotations

import bcrypt

from jobboard.core.errors import BadRequestError

MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    def __init__(self, work_factor: int = 12):
        self.work_factor = work_factor

    def hash(self, password: str) -> str:
        raw = password.encode("utf-8")
        if len(raw) > MAX_PASSWORD_BYTES:
            raise BadRequestError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.work_factor)
        return bcrypt.hashpw(raw, salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        raw = password.encode("utf-8")
        if len(raw) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(raw, hashed.encode("utf-8"))
        except ValueError:
            # malformed stored hash
            return False
