from __future__ import annotations

from fastapi import APIRouter, Depends, status

from jobboard.api.deps import get_token_service, get_user_store
from jobboard.api.schemas.auth import RegisterRequest, TokenRequest
from jobboard.core.auth.tokens import TokenService
from jobboard.core.models import UserStore

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token")
def issue_token(
    req: TokenRequest,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
):
    """{ username, password } => { token }. Bad credentials -> 401."""
    user = users.authenticate(req.username, req.password)
    return {"token": tokens.create(user)}


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    req: RegisterRequest,
    users: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
):
    user = users.register({**req.model_dump(by_alias=True), "isAdmin": False})
    return {"token": tokens.create(user)}
