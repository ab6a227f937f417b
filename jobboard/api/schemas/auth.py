from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from jobboard.api.schemas.validators import check_password


class TokenRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1, max_length=30)
    password: str = Field(min_length=1, max_length=20)


class RegisterRequest(BaseModel):
    """Self-registration; never creates an admin."""

    model_config = ConfigDict(extra="forbid")

    username: str = Field(min_length=1, max_length=30)
    password: str = Field(min_length=5, max_length=20)
    first_name: str = Field(min_length=1, max_length=30, alias="firstName")
    last_name: str = Field(min_length=1, max_length=30, alias="lastName")
    email: EmailStr

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return check_password(v)
