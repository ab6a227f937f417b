from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from jobboard.api.deps import get_job_store
from jobboard.api.schemas.jobs import JobNew, JobUpdate
from jobboard.core.errors import EmptyResultError
from jobboard.core.filters import job_filter
from jobboard.core.models import JobStore

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_job(req: JobNew, jobs: JobStore = Depends(get_job_store)):
    job = jobs.create(req.model_dump(by_alias=True))
    return {"job": job}


@router.get("")
def list_jobs(
    title: Optional[str] = Query(default=None),
    min_salary: Optional[int] = Query(default=None, ge=0, alias="minSalary"),
    has_equity: Optional[bool] = Query(default=None, alias="hasEquity"),
    jobs: JobStore = Depends(get_job_store),
):
    """
    Public. Optional filters: title (case-insensitive substring), minSalary,
    hasEquity (true: equity > 0, false: no equity). Empty result -> 400.
    """
    where = job_filter(title, min_salary, has_equity)
    found = jobs.find_by_filter(where) if where is not None else jobs.find_all()
    if not found:
        raise EmptyResultError("No jobs match the given filters")
    return {"jobs": found}


@router.get("/{job_id}")
def get_job(job_id: int, jobs: JobStore = Depends(get_job_store)):
    return {"job": jobs.get(job_id)}


@router.patch("/{job_id}")
def update_job(job_id: int, req: JobUpdate, jobs: JobStore = Depends(get_job_store)):
    job = jobs.update(job_id, req.model_dump(by_alias=True, exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}")
def delete_job(job_id: int, jobs: JobStore = Depends(get_job_store)):
    removed = jobs.remove(job_id)
    return {"deleted": removed["title"]}
