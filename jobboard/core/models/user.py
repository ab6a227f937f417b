from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from jobboard.core.auth.passwords import PasswordHasher
from jobboard.core.db import Database
from jobboard.core.errors import DuplicateError, NotFoundError, UnauthorizedError
from jobboard.core.sql import compile_partial_update

log = logging.getLogger("jobboard.db")

PROJECTION = 'username, first_name AS "firstName", last_name AS "lastName", email, is_admin AS "isAdmin"'

RENAME = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


def _to_user(row: Mapping[str, Any]) -> Dict[str, Any]:
    user = {k: v for k, v in row.items() if k != "password"}
    if "isAdmin" in user:
        user["isAdmin"] = bool(user["isAdmin"])
    return user


class UserStore:
    def __init__(self, *, db: Database, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher

    def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        """Return the user for valid credentials, else raise UnauthorizedError."""
        rows = self.db.query(f"SELECT {PROJECTION}, password FROM users WHERE username = ?1", [username])
        if rows and self.hasher.verify(password, rows[0]["password"]):
            return _to_user(rows[0])
        raise UnauthorizedError("Invalid username/password")

    def register(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Insert a user, hashing the password first.
        data: {username, password, firstName, lastName, email, isAdmin}.
        """
        username = data["username"]
        if self.db.query("SELECT username FROM users WHERE username = ?1", [username]):
            raise DuplicateError(f"Duplicate username: {username}")

        rows = self.db.query(
            f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
                VALUES (?1, ?2, ?3, ?4, ?5, ?6)
                RETURNING {PROJECTION}""",
            [
                username,
                self.hasher.hash(data["password"]),
                data["firstName"],
                data["lastName"],
                data["email"],
                bool(data.get("isAdmin", False)),
            ],
        )
        log.info("user registered username=%s", username)
        return _to_user(rows[0])

    def find_all(self) -> List[Dict[str, Any]]:
        rows = self.db.query(f"SELECT {PROJECTION} FROM users ORDER BY username")
        return [_to_user(r) for r in rows]

    def get(self, username: str) -> Dict[str, Any]:
        """User record plus `jobs`: ids of the jobs the user applied to."""
        rows = self.db.query(f"SELECT {PROJECTION} FROM users WHERE username = ?1", [username])
        if not rows:
            raise NotFoundError(f"No user: {username}")

        user = _to_user(rows[0])
        applied = self.db.query(
            "SELECT job_id FROM applications WHERE username = ?1 ORDER BY job_id",
            [username],
        )
        user["jobs"] = [a["job_id"] for a in applied]
        return user

    def update(self, username: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update of firstName/lastName/password/email/isAdmin.
        A new password is hashed before it reaches the database.
        """
        fields = dict(data)
        if fields.get("password") is not None:
            fields["password"] = self.hasher.hash(fields["password"])

        update = compile_partial_update(fields, RENAME)
        rows = self.db.query(
            f"""UPDATE users
                SET {update.set_cols}
                WHERE username = {update.next_placeholder}
                RETURNING {PROJECTION}""",
            [*update.values, username],
        )
        if not rows:
            raise NotFoundError(f"No user: {username}")
        return _to_user(rows[0])

    def remove(self, username: str) -> None:
        rows = self.db.query("DELETE FROM users WHERE username = ?1 RETURNING username", [username])
        if not rows:
            raise NotFoundError(f"No user: {username}")
        log.info("user removed username=%s", username)

    def apply_job(self, username: str, job_id: int) -> int:
        """Record that `username` applied to `job_id`; returns the job id."""
        if not self.db.query("SELECT username FROM users WHERE username = ?1", [username]):
            raise NotFoundError(f"No user: {username}")
        if not self.db.query("SELECT id FROM jobs WHERE id = ?1", [job_id]):
            raise NotFoundError(f"No job with id: {job_id}")
        if self.db.query(
            "SELECT job_id FROM applications WHERE username = ?1 AND job_id = ?2",
            [username, job_id],
        ):
            raise DuplicateError(f"{username} already applied to job {job_id}")

        rows = self.db.query(
            "INSERT INTO applications (username, job_id) VALUES (?1, ?2) RETURNING job_id",
            [username, job_id],
        )
        return rows[0]["job_id"]
