import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation

from app.services.billing_provider import BillingProvider, ProviderSubscription
from app.services.exceptions import ComplianceError, DataInconsistency
from app.stores.base import PlanStore
from app.utils.time import utcnow

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class SubscriptionSnapshot:
    subscription_id: str
    status: str
    start_date: date
    amount: Decimal
    interval: str
    interval_length: int
    profile_id: str | None
    payment_profile_id: str | None
    next_billing_date: date
    plan_match: bool

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @property
    def plan_match_status(self) -> str:
        return "" if self.plan_match else "1"


def normalize_amount(value: Decimal | float | int | str) -> Decimal:
    try:
        return Decimal(str(value).strip()).quantize(CENTS)
    except (InvalidOperation, ValueError) as exc:
        raise DataInconsistency(f"Invalid amount: {value!r}") from exc


def amounts_match(plan_price: Decimal | float | int | str, billed_amount: Decimal | float | int | str) -> bool:
    return normalize_amount(plan_price) == normalize_amount(billed_amount)


def add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def next_billing_date(start_date: date, interval_length: int, interval_unit: str, today: date) -> date:
    if start_date >= today or interval_length < 1:
        return start_date

    if interval_unit == "days":
        elapsed = (today - start_date).days
        periods = -(-elapsed // interval_length)
        return start_date + timedelta(days=periods * interval_length)

    periods = 0
    candidate = start_date
    while candidate < today:
        periods += 1
        candidate = add_months(start_date, periods * interval_length)
    return candidate


class SubscriptionStatusFetcher:
    def __init__(self, provider: BillingProvider, plans: PlanStore) -> None:
        self.provider = provider
        self.plans = plans

    def build_snapshot(
        self, subscription: ProviderSubscription, plan_price: Decimal, today: date | None = None
    ) -> SubscriptionSnapshot:
        today = today or utcnow().date()
        return SubscriptionSnapshot(
            subscription_id=subscription.subscription_id,
            status=subscription.status,
            start_date=subscription.start_date,
            amount=subscription.amount,
            interval=subscription.interval_unit,
            interval_length=subscription.interval_length,
            profile_id=subscription.profile_id,
            payment_profile_id=subscription.payment_profile_id,
            next_billing_date=next_billing_date(
                subscription.start_date, subscription.interval_length, subscription.interval_unit, today
            ),
            plan_match=amounts_match(plan_price, subscription.amount),
        )

    def fetch(self, subscription_id: str, plan_id: int, today: date | None = None) -> SubscriptionSnapshot | None:
        """Return the provider's view of the subscription, or None when it cannot be read.

        Missing credentials, transport errors, non-Ok result codes and unknown
        plans all collapse into None, which callers treat as inactive.
        """
        try:
            plan_price = self.plans.get_plan_price(plan_id)
            if plan_price is None:
                raise DataInconsistency(f"Plan {plan_id} not found")
            subscription = self.provider.get_subscription(subscription_id)
            return self.build_snapshot(subscription, plan_price, today=today)
        except ComplianceError as exc:
            logger.warning("Subscription %s could not be fetched: %s", subscription_id, exc)
            return None
