from fastapi import APIRouter, Depends

from app.api.deps import get_hooks, require_admin
from app.schemas import CompanyUpdateEvent, HookResponse, LoginEvent
from app.services.hooks import ComplianceHooks

router = APIRouter(prefix="/hooks", tags=["hooks"], dependencies=[Depends(require_admin)])


@router.post("/login", response_model=HookResponse)
def login(payload: LoginEvent, hooks: ComplianceHooks = Depends(get_hooks)) -> HookResponse:
    decision = hooks.on_login(
        payload.user_id,
        payload.company_id,
        payload.user_data,
        payload.result,
        payload.area,
    )
    if decision is None:
        return HookResponse(handled=False)
    return HookResponse(
        handled=True,
        compliant=decision.compliant,
        reason=decision.reason,
        suspended=decision.suspended,
    )


@router.post("/company-update", response_model=HookResponse)
def company_update(payload: CompanyUpdateEvent, hooks: ComplianceHooks = Depends(get_hooks)) -> HookResponse:
    deleted = hooks.on_company_update(payload.company_data, payload.company_id, payload.previous_status)
    return HookResponse(handled=deleted, payout_deleted=deleted)
