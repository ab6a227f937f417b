from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from jobboard.core.errors import BadRequestError
from jobboard.core.sql import Filter, placeholder


class FilterTemplate(str, Enum):
    """
    Closed set of predicate templates. `{p}` is replaced by the numbered
    placeholder of the single value each template consumes.
    """

    NAME_LIKE = "name LIKE {p} ESCAPE '\\'"
    MIN_EMPLOYEES = "num_employees >= {p}"
    MAX_EMPLOYEES = "num_employees <= {p}"
    TITLE_LIKE = "title LIKE {p} ESCAPE '\\'"
    MIN_SALARY = "salary >= {p}"
    HAS_EQUITY = "COALESCE(CAST(equity AS REAL), 0) > {p}"
    NO_EQUITY = "COALESCE(CAST(equity AS REAL), 0) = {p}"
    COMPANY_HANDLE = "company_handle = {p}"

    def render(self, n: int) -> str:
        return self.value.format(p=placeholder(n))


def like_pattern(term: str) -> str:
    """Case-insensitive substring pattern with LIKE wildcards escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def build_filter(clauses: Iterable[Tuple[FilterTemplate, Any]]) -> Optional[Filter]:
    parts = []
    params = []
    for idx, (template, value) in enumerate(clauses, start=1):
        if not isinstance(template, FilterTemplate):
            raise TypeError(f"Unsupported filter template: {template!r}")
        parts.append(template.render(idx))
        params.append(value)

    if not parts:
        return None
    return Filter(fragment=" AND ".join(parts), params=tuple(params))


def company_filter(
    name_like: Optional[str] = None,
    min_employees: Optional[int] = None,
    max_employees: Optional[int] = None,
) -> Optional[Filter]:
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    clauses = []
    if name_like:
        clauses.append((FilterTemplate.NAME_LIKE, like_pattern(name_like)))
    if min_employees is not None:
        clauses.append((FilterTemplate.MIN_EMPLOYEES, min_employees))
    if max_employees is not None:
        clauses.append((FilterTemplate.MAX_EMPLOYEES, max_employees))
    return build_filter(clauses)


def job_filter(
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None,
) -> Optional[Filter]:
    clauses = []
    if title:
        clauses.append((FilterTemplate.TITLE_LIKE, like_pattern(title)))
    if min_salary is not None:
        clauses.append((FilterTemplate.MIN_SALARY, min_salary))
    if has_equity is True:
        clauses.append((FilterTemplate.HAS_EQUITY, 0))
    elif has_equity is False:
        clauses.append((FilterTemplate.NO_EQUITY, 0))
    return build_filter(clauses)


def jobs_of_company(handle: str) -> Filter:
    return Filter(fragment=FilterTemplate.COMPANY_HANDLE.render(1), params=(handle,))
