from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from jobboard.api.deps import get_principal, get_token_service, get_user_store
from jobboard.api.schemas.users import UserNew, UserUpdate
from jobboard.core.auth.models import Principal
from jobboard.core.auth.tokens import TokenService
from jobboard.core.errors import UnauthorizedError
from jobboard.core.models import UserStore

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    req: UserNew,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Admin only. Not the registration endpoint: lets an admin add a user
    (possibly another admin). Returns { user, token }.
    """
    user = users.register(req.model_dump(by_alias=True))
    return {"user": user, "token": tokens.create(user)}


@router.get("")
def list_users(users: UserStore = Depends(get_user_store)):
    return {"users": users.find_all()}


@router.get("/{username}")
def get_user(username: str, users: UserStore = Depends(get_user_store)):
    return {"user": users.get(username)}


@router.patch("/{username}")
def update_user(
    username: str,
    req: UserUpdate,
    users: UserStore = Depends(get_user_store),
    principal: Optional[Principal] = Depends(get_principal),
):
    data = req.model_dump(by_alias=True, exclude_unset=True)
    # Owners may edit their profile, only admins may grant or revoke admin.
    if "isAdmin" in data and not (principal and principal.is_admin):
        raise UnauthorizedError("Only admins may change isAdmin")
    return {"user": users.update(username, data)}


@router.delete("/{username}")
def delete_user(username: str, users: UserStore = Depends(get_user_store)):
    users.remove(username)
    return {"deleted": username}


@router.post("/{username}/jobs/{job_id}", status_code=status.HTTP_201_CREATED)
def apply_for_job(username: str, job_id: int, users: UserStore = Depends(get_user_store)):
    return {"applied": users.apply_job(username, job_id)}
