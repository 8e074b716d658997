from decimal import Decimal
from typing import Protocol

from app.models import VendorPayoutType, VendorStatus


class AccountStore(Protocol):
    def get_registration_timestamp(self, vendor_id: int) -> int | None: ...

    def get_plan_id(self, vendor_id: int) -> int | None: ...

    def get_status(self, vendor_id: int) -> VendorStatus | None: ...

    def set_status(self, vendor_id: int, status: VendorStatus, reason: str | None = None) -> bool:
        """Persist ``status`` and return True when the stored value changed."""
        ...


class BillingSubscriptionStore(Protocol):
    def get_root_subscription_id(self, vendor_id: int) -> str | None: ...


class PlanStore(Protocol):
    def get_plan_price(self, plan_id: int) -> Decimal | None: ...


class PayoutStore(Protocol):
    def find_pending_payout(
        self, vendor_id: int, plan_id: int, payout_type: VendorPayoutType = VendorPayoutType.payout
    ) -> int | None: ...

    def delete_payout(self, payout_id: int) -> None: ...
