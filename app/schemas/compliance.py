from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel


class SubscriptionSnapshotResponse(BaseModel):
    subscription_id: str
    status: str
    start_date: date
    amount: Decimal
    interval: str
    profile_id: str | None
    payment_profile_id: str | None
    next_billing_date: date
    plan_match_status: str


class ComplianceResponse(BaseModel):
    company_id: int
    vendor_status: str | None
    under_grace_period: bool
    compliant: bool
    reason: str
    subscription: SubscriptionSnapshotResponse | None
    server_time: datetime
