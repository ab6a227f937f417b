from __future__ import annotations

from typing import Optional

from fastapi import Request

from jobboard.core.auth.models import Principal
from jobboard.core.auth.tokens import TokenService
from jobboard.core.models import CompanyStore, JobStore, UserStore


def get_company_store(request: Request) -> CompanyStore:
    return request.app.state.companies


def get_job_store(request: Request) -> JobStore:
    return request.app.state.jobs


def get_user_store(request: Request) -> UserStore:
    return request.app.state.users


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def get_principal(request: Request) -> Optional[Principal]:
    """Principal resolved by AuthMiddleware; None for anonymous callers."""
    return getattr(request.state, "principal", None)
