from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from jobboard.api.deps import get_company_store, get_job_store
from jobboard.api.schemas.companies import CompanyNew, CompanyUpdate
from jobboard.core.errors import EmptyResultError
from jobboard.core.filters import company_filter, jobs_of_company
from jobboard.core.models import CompanyStore, JobStore

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_company(req: CompanyNew, companies: CompanyStore = Depends(get_company_store)):
    """Admin only. Returns { company }."""
    company = companies.create(req.model_dump(by_alias=True))
    return {"company": company}


@router.get("")
def list_companies(
    name_like: Optional[str] = Query(default=None, alias="nameLike"),
    min_employees: Optional[int] = Query(default=None, ge=0, alias="minEmployees"),
    max_employees: Optional[int] = Query(default=None, ge=0, alias="maxEmployees"),
    companies: CompanyStore = Depends(get_company_store),
):
    """
    Public. Optional filters: nameLike (case-insensitive substring),
    minEmployees, maxEmployees. An empty result is answered with 400.
    """
    where = company_filter(name_like, min_employees, max_employees)
    found = companies.find_by_filter(where) if where is not None else companies.find_all()
    if not found:
        raise EmptyResultError("No companies match the given filters")
    return {"companies": found}


@router.get("/{handle}")
def get_company(
    handle: str,
    companies: CompanyStore = Depends(get_company_store),
    jobs: JobStore = Depends(get_job_store),
):
    company = companies.get(handle)
    return {"company": company, "jobs": jobs.find_by_filter(jobs_of_company(handle))}


@router.patch("/{handle}")
def update_company(
    handle: str,
    req: CompanyUpdate,
    companies: CompanyStore = Depends(get_company_store),
):
    company = companies.update(handle, req.model_dump(by_alias=True, exclude_unset=True))
    return {"company": company}


@router.delete("/{handle}")
def delete_company(handle: str, companies: CompanyStore = Depends(get_company_store)):
    companies.remove(handle)
    return {"deleted": handle}
