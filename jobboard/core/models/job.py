from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from jobboard.core.db import Database
from jobboard.core.errors import DuplicateError, NotFoundError, ReferenceNotFoundError
from jobboard.core.sql import Filter, compile_partial_update, select_where

log = logging.getLogger("jobboard.db")

TABLE = "jobs"
PROJECTION = 'id, title, salary, equity, company_handle AS "companyHandle"'
ORDER_BY = "title"

RENAME = {
    "companyHandle": "company_handle",
}


class JobStore:
    def __init__(self, *, db: Database):
        self.db = db

    def _require_company(self, handle: str) -> None:
        if not self.db.query("SELECT handle FROM companies WHERE handle = ?1", [handle]):
            raise ReferenceNotFoundError(f"The company: {handle} does not exist.")

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Insert a job. data: {title, salary, equity, companyHandle}.

        Raises ReferenceNotFoundError for an unknown company and
        DuplicateError when the title is already used.
        """
        self._require_company(data["companyHandle"])

        if self.db.query("SELECT id FROM jobs WHERE title = ?1", [data["title"]]):
            raise DuplicateError(f"Duplicate job: {data['title']}")

        rows = self.db.query(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES (?1, ?2, ?3, ?4)
                RETURNING {PROJECTION}""",
            [data["title"], data.get("salary"), data.get("equity"), data["companyHandle"]],
        )
        log.info("job created id=%s company=%s", rows[0]["id"], data["companyHandle"])
        return rows[0]

    def find_all(self) -> List[Dict[str, Any]]:
        return select_where(self.db, projection=PROJECTION, table=TABLE, order_by=ORDER_BY)

    def find_by_filter(self, where: Optional[Filter]) -> List[Dict[str, Any]]:
        return select_where(self.db, projection=PROJECTION, table=TABLE, order_by=ORDER_BY, where=where)

    def get(self, job_id: int) -> Dict[str, Any]:
        rows = self.db.query(f"SELECT {PROJECTION} FROM jobs WHERE id = ?1", [job_id])
        if not rows:
            raise NotFoundError(f"No job with id: {job_id}")
        return rows[0]

    def update(self, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        update = compile_partial_update(data, RENAME)

        if data.get("companyHandle") is not None:
            self._require_company(data["companyHandle"])
        if data.get("title") is not None:
            clash = self.db.query("SELECT id FROM jobs WHERE title = ?1 AND id <> ?2", [data["title"], job_id])
            if clash:
                raise DuplicateError(f"Duplicate job: {data['title']}")

        rows = self.db.query(
            f"""UPDATE jobs
                SET {update.set_cols}
                WHERE id = {update.next_placeholder}
                RETURNING {PROJECTION}""",
            [*update.values, job_id],
        )
        if not rows:
            raise NotFoundError(f"No job with id: {job_id}")
        return rows[0]

    def remove(self, job_id: int) -> Dict[str, Any]:
        """Delete a job; returns {title} of the deleted row."""
        rows = self.db.query("DELETE FROM jobs WHERE id = ?1 RETURNING title", [job_id])
        if not rows:
            raise NotFoundError(f"No job with id: {job_id}")
        log.info("job removed id=%s", job_id)
        return rows[0]
