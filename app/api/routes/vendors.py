from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_hooks, require_admin
from app.schemas import ComplianceResponse, SubscriptionSnapshotResponse
from app.services.hooks import ComplianceHooks
from app.utils.time import utcnow

router = APIRouter(prefix="/vendors", tags=["vendors"], dependencies=[Depends(require_admin)])


@router.get("/{company_id}/compliance", response_model=ComplianceResponse)
def show_compliance(company_id: int, hooks: ComplianceHooks = Depends(get_hooks)) -> ComplianceResponse:
    accounts = hooks.compliance.accounts
    status = accounts.get_status(company_id)
    if status is None:
        raise HTTPException(status_code=404, detail="Vendor not found")

    decision = hooks.compliance.check(company_id)
    snapshot = decision.snapshot
    subscription = None
    if snapshot:
        subscription = SubscriptionSnapshotResponse(
            subscription_id=snapshot.subscription_id,
            status=snapshot.status,
            start_date=snapshot.start_date,
            amount=snapshot.amount,
            interval=snapshot.interval,
            profile_id=snapshot.profile_id,
            payment_profile_id=snapshot.payment_profile_id,
            next_billing_date=snapshot.next_billing_date,
            plan_match_status=snapshot.plan_match_status,
        )

    return ComplianceResponse(
        company_id=company_id,
        vendor_status=status.value,
        under_grace_period=hooks.grace.is_under_grace_period(company_id),
        compliant=decision.compliant,
        reason=decision.reason,
        subscription=subscription,
        server_time=utcnow(),
    )
