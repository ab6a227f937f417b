from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from jobboard.api.schemas.validators import check_password, reject_null


class UserNew(BaseModel):
    """Admin-created user; may itself be an admin."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1, max_length=30)
    password: str = Field(min_length=5, max_length=20)
    first_name: str = Field(min_length=1, max_length=30, alias="firstName")
    last_name: str = Field(min_length=1, max_length=30, alias="lastName")
    email: EmailStr
    is_admin: bool = Field(default=False, strict=True, alias="isAdmin")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password(v)


class UserUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=30, alias="firstName")
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=30, alias="lastName")
    password: Optional[str] = Field(default=None, min_length=5, max_length=20)
    email: Optional[EmailStr] = None
    is_admin: Optional[bool] = Field(default=None, strict=True, alias="isAdmin")

    @field_validator("first_name", "last_name", "password", "email", "is_admin")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: Optional[str]) -> Optional[str]:
        return check_password(v)
