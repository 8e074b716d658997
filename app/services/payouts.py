import logging
from typing import Any, Mapping

from app.models import VendorPayoutType, VendorStatus
from app.services.grace_period import GracePeriodEvaluator
from app.stores.base import PayoutStore

logger = logging.getLogger(__name__)


def parse_plan_id(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class PlanChangeReconciler:
    """Drops the pending payout computed under the old plan when a vendor switches plans during grace."""

    def __init__(self, payouts: PayoutStore, grace: GracePeriodEvaluator) -> None:
        self.payouts = payouts
        self.grace = grace

    def should_reconcile(
        self, company_data: Mapping[str, Any], company_id: int, previous_status: str | None = None
    ) -> bool:
        new_plan_id = parse_plan_id(company_data.get("plan_id"))
        old_plan_id = parse_plan_id(company_data.get("current_plan"))
        if new_plan_id is None or old_plan_id is None or new_plan_id == old_plan_id:
            return False

        status = previous_status if previous_status is not None else company_data.get("status")
        if status == VendorStatus.new_account.value:
            return False

        return self.grace.is_under_grace_period(company_id)

    def reconcile(
        self, company_data: Mapping[str, Any], company_id: int, previous_status: str | None = None
    ) -> bool:
        if not self.should_reconcile(company_data, company_id, previous_status):
            return False

        old_plan_id = parse_plan_id(company_data.get("current_plan"))
        payout_id = self.payouts.find_pending_payout(company_id, old_plan_id, VendorPayoutType.payout)
        if not payout_id:
            return False

        self.payouts.delete_payout(payout_id)
        logger.info("Deleted payout %s for vendor %s after plan change from %s", payout_id, company_id, old_plan_id)
        return True
