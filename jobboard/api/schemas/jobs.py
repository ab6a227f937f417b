from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jobboard.api.schemas.validators import reject_null

# Fraction of the company, 0 to 1 inclusive, kept as decimal text.
EQUITY_PATTERN = r"^(0(\.\d+)?|1(\.0+)?)$"


class JobNew(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0, strict=True)
    equity: Optional[str] = Field(default=None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(min_length=1, max_length=25, alias="companyHandle")


class JobUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0, strict=True)
    equity: Optional[str] = Field(default=None, pattern=EQUITY_PATTERN)
    company_handle: Optional[str] = Field(default=None, min_length=1, max_length=25, alias="companyHandle")

    @field_validator("title", "company_handle")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)
