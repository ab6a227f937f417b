"""
SQL helpers shared by the company and job stores.

Values always travel as bound parameters. Only column names, which come from
fixed rename tables or validated model fields, are ever written into SQL text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from jobboard.core.db import Database
from jobboard.core.errors import EmptyUpdateError

# SQLite numbered parameter: ?1, ?2, ... bound positionally.
PARAM_PREFIX = "?"


def placeholder(n: int) -> str:
    return f"{PARAM_PREFIX}{n}"


@dataclass(frozen=True)
class PartialUpdate:
    set_cols: str
    values: Tuple[Any, ...]

    @property
    def next_placeholder(self) -> str:
        """Placeholder for the first parameter after the SET values (e.g. the key)."""
        return placeholder(len(self.values) + 1)


def compile_partial_update(data: Mapping[str, Any], rename: Mapping[str, str]) -> PartialUpdate:
    """
    Compile a sparse update into a SET clause and its ordered values.

    A key that is present with None sets the column to NULL; an absent key
    leaves the column alone. Keys missing from `rename` are used verbatim.

      compile_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        -> PartialUpdate(set_cols='first_name=?1, age=?2', values=('Aliya', 32))
    """
    if not data:
        raise EmptyUpdateError("No data")

    cols: List[str] = []
    values: List[Any] = []
    for idx, (key, value) in enumerate(data.items(), start=1):
        cols.append(f"{rename.get(key, key)}={placeholder(idx)}")
        values.append(value)

    return PartialUpdate(set_cols=", ".join(cols), values=tuple(values))


@dataclass(frozen=True)
class Filter:
    fragment: str
    params: Tuple[Any, ...] = ()


def select_where(
    db: Database,
    *,
    projection: str,
    table: str,
    order_by: str,
    where: Optional[Filter] = None,
) -> List[Dict[str, Any]]:
    """
    SELECT a fixed projection from a fixed table, optionally restricted by a
    template-built Filter. Zero rows is a normal result here.
    """
    sql = f"SELECT {projection} FROM {table}"
    params: Tuple[Any, ...] = ()
    if where is not None:
        sql += f" WHERE {where.fragment}"
        params = where.params
    sql += f" ORDER BY {order_by}"
    return db.query(sql, params)
