import os
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite://")

from app.models import VendorPayoutType, VendorStatus  # noqa: E402
from app.services.billing_provider import ProviderSubscription  # noqa: E402
from app.services.exceptions import BillingProviderError  # noqa: E402
from app.services.hooks import build_hooks  # noqa: E402
from app.utils.time import utcnow  # noqa: E402

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
DAY = 86400


class InMemoryAccountStore:
    def __init__(self) -> None:
        self.companies: dict[int, dict] = {}
        self.history: list[tuple[int, VendorStatus, str | None]] = []

    def add(
        self,
        vendor_id: int,
        timestamp: int,
        plan_id: int | None = None,
        status: VendorStatus = VendorStatus.active,
    ) -> None:
        self.companies[vendor_id] = {"timestamp": timestamp, "plan_id": plan_id, "status": status}

    def get_registration_timestamp(self, vendor_id: int) -> int | None:
        company = self.companies.get(vendor_id)
        return company["timestamp"] if company else None

    def get_plan_id(self, vendor_id: int) -> int | None:
        company = self.companies.get(vendor_id)
        return company["plan_id"] if company else None

    def get_status(self, vendor_id: int) -> VendorStatus | None:
        company = self.companies.get(vendor_id)
        return company["status"] if company else None

    def set_status(self, vendor_id: int, status: VendorStatus, reason: str | None = None) -> bool:
        company = self.companies.get(vendor_id)
        if not company or company["status"] == status:
            return False
        company["status"] = status
        self.history.append((vendor_id, status, reason))
        return True


class InMemorySubscriptionStore:
    def __init__(self) -> None:
        self.subscriptions: dict[int, str] = {}

    def get_root_subscription_id(self, vendor_id: int) -> str | None:
        return self.subscriptions.get(vendor_id)


class InMemoryPlanStore:
    def __init__(self) -> None:
        self.prices: dict[int, Decimal] = {}

    def get_plan_price(self, plan_id: int) -> Decimal | None:
        return self.prices.get(plan_id)


class InMemoryPayoutStore:
    def __init__(self) -> None:
        self.payouts: dict[int, tuple[int, int, VendorPayoutType]] = {}
        self.deleted: list[int] = []

    def add(self, payout_id: int, vendor_id: int, plan_id: int, payout_type=VendorPayoutType.payout) -> None:
        self.payouts[payout_id] = (vendor_id, plan_id, payout_type)

    def find_pending_payout(self, vendor_id: int, plan_id: int, payout_type=VendorPayoutType.payout) -> int | None:
        for payout_id, record in self.payouts.items():
            if record == (vendor_id, plan_id, payout_type):
                return payout_id
        return None

    def delete_payout(self, payout_id: int) -> None:
        self.payouts.pop(payout_id, None)
        self.deleted.append(payout_id)


class FakeBillingProvider:
    def __init__(self) -> None:
        self.subscriptions: dict[str, ProviderSubscription] = {}
        self.calls: list[str] = []

    def add(self, subscription_id: str, status: str = "active", amount: str = "29.99") -> ProviderSubscription:
        subscription = ProviderSubscription(
            subscription_id=subscription_id,
            status=status,
            amount=Decimal(amount),
            start_date=date(2025, 1, 15),
            interval_length=1,
            interval_unit="months",
            profile_id="900100",
            payment_profile_id="900200",
        )
        self.subscriptions[subscription_id] = subscription
        return subscription

    def get_subscription(self, subscription_id: str) -> ProviderSubscription:
        self.calls.append(subscription_id)
        if subscription_id not in self.subscriptions:
            raise BillingProviderError("E00035: The subscription cannot be found.")
        return self.subscriptions[subscription_id]


def registered_days_ago(days: int, now: datetime | None = None) -> int:
    now = now or utcnow()
    return int(now.timestamp()) - days * DAY


@pytest.fixture
def accounts() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture
def subscriptions() -> InMemorySubscriptionStore:
    return InMemorySubscriptionStore()


@pytest.fixture
def plans() -> InMemoryPlanStore:
    store = InMemoryPlanStore()
    store.prices[3] = Decimal("19.99")
    store.prices[5] = Decimal("29.99")
    return store


@pytest.fixture
def payouts() -> InMemoryPayoutStore:
    return InMemoryPayoutStore()


@pytest.fixture
def provider() -> FakeBillingProvider:
    return FakeBillingProvider()


@pytest.fixture
def hooks(accounts, subscriptions, plans, payouts, provider):
    return build_hooks(accounts, subscriptions, plans, payouts, provider, grace_period_days=30)
