from typing import Any

from pydantic import BaseModel, Field


class LoginEvent(BaseModel):
    user_id: int
    company_id: int = 0
    user_data: dict[str, Any] = Field(default_factory=dict)
    result: str
    area: str = Field(..., min_length=1, max_length=1)


class CompanyUpdateEvent(BaseModel):
    company_id: int = Field(..., ge=1)
    company_data: dict[str, Any] = Field(default_factory=dict)
    previous_status: str | None = Field(default=None, max_length=1)


class HookResponse(BaseModel):
    handled: bool
    compliant: bool | None = None
    reason: str | None = None
    suspended: bool = False
    payout_deleted: bool = False
