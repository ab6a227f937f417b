from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobboard.api.schemas.validators import check_url, reject_null


class CompanyNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(min_length=1, max_length=25, pattern=r"^[a-z0-9][a-z0-9_-]*$")
    name: str = Field(min_length=1)
    description: str
    num_employees: Optional[int] = Field(default=None, ge=0, strict=True, alias="numEmployees")
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, v: Optional[str]) -> Optional[str]:
        return check_url(v)


class CompanyUpdate(BaseModel):
    """All optional. handle is immutable and not accepted here."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(default=None, ge=0, strict=True, alias="numEmployees")
    logo_url: Optional[str] = Field(default=None, alias="logoUrl")

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, v: Optional[str]) -> Optional[str]:
        return check_url(v)
