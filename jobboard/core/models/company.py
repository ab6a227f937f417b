from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from jobboard.core.db import Database
from jobboard.core.errors import DuplicateError, NotFoundError
from jobboard.core.sql import Filter, compile_partial_update, select_where

log = logging.getLogger("jobboard.db")

TABLE = "companies"
PROJECTION = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'
ORDER_BY = "name"

RENAME = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


class CompanyStore:
    def __init__(self, *, db: Database):
        self.db = db

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Insert a company. data: {handle, name, description, numEmployees, logoUrl}.

        Raises DuplicateError when the handle or the name is already taken.
        """
        handle = data["handle"]
        if self.db.query("SELECT handle FROM companies WHERE handle = ?1", [handle]):
            raise DuplicateError(f"Duplicate company: {handle}")
        if self.db.query("SELECT handle FROM companies WHERE name = ?1", [data["name"]]):
            raise DuplicateError(f"Duplicate company name: {data['name']}")

        rows = self.db.query(
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES (?1, ?2, ?3, ?4, ?5)
                RETURNING {PROJECTION}""",
            [
                handle,
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )
        log.info("company created handle=%s", handle)
        return rows[0]

    def find_all(self) -> List[Dict[str, Any]]:
        return select_where(self.db, projection=PROJECTION, table=TABLE, order_by=ORDER_BY)

    def find_by_filter(self, where: Optional[Filter]) -> List[Dict[str, Any]]:
        return select_where(self.db, projection=PROJECTION, table=TABLE, order_by=ORDER_BY, where=where)

    def get(self, handle: str) -> Dict[str, Any]:
        rows = self.db.query(f"SELECT {PROJECTION} FROM companies WHERE handle = ?1", [handle])
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        return rows[0]

    def update(self, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update; only the supplied fields change. handle is immutable.

        Raises EmptyUpdateError for an empty update, NotFoundError for an
        unknown handle, DuplicateError when renaming onto a taken name.
        """
        update = compile_partial_update(data, RENAME)

        if data.get("name") is not None:
            clash = self.db.query(
                "SELECT handle FROM companies WHERE name = ?1 AND handle <> ?2",
                [data["name"], handle],
            )
            if clash:
                raise DuplicateError(f"Duplicate company name: {data['name']}")

        rows = self.db.query(
            f"""UPDATE companies
                SET {update.set_cols}
                WHERE handle = {update.next_placeholder}
                RETURNING {PROJECTION}""",
            [*update.values, handle],
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        return rows[0]

    def remove(self, handle: str) -> None:
        rows = self.db.query("DELETE FROM companies WHERE handle = ?1 RETURNING handle", [handle])
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        log.info("company removed handle=%s", handle)
