import logging
from dataclasses import dataclass

from app.services.account_status import AccountStatusTransitioner
from app.services.subscription import SubscriptionSnapshot, SubscriptionStatusFetcher
from app.stores.base import AccountStore, BillingSubscriptionStore

logger = logging.getLogger(__name__)

REASON_COMPLIANT = "compliant"
REASON_NO_SUBSCRIPTION = "no_subscription"
REASON_NO_PLAN = "no_plan"
REASON_PLAN_NOT_FOUND = "plan_not_found"
REASON_PROVIDER_UNAVAILABLE = "provider_unavailable"
REASON_SUBSCRIPTION_INACTIVE = "subscription_inactive"


@dataclass(frozen=True)
class ComplianceDecision:
    vendor_id: int
    compliant: bool
    reason: str
    snapshot: SubscriptionSnapshot | None = None
    suspended: bool = False


class PaymentComplianceEvaluator:
    def __init__(
        self,
        accounts: AccountStore,
        subscriptions: BillingSubscriptionStore,
        fetcher: SubscriptionStatusFetcher,
        transitioner: AccountStatusTransitioner,
    ) -> None:
        self.accounts = accounts
        self.subscriptions = subscriptions
        self.fetcher = fetcher
        self.transitioner = transitioner

    def check(self, vendor_id: int) -> ComplianceDecision:
        """Decide whether the vendor's plan is paid for, without touching its status."""
        subscription_id = self.subscriptions.get_root_subscription_id(vendor_id)
        if not subscription_id:
            return ComplianceDecision(vendor_id, compliant=False, reason=REASON_NO_SUBSCRIPTION)

        plan_id = self.accounts.get_plan_id(vendor_id)
        if not plan_id:
            logger.warning("Vendor %s has subscription %s but no plan", vendor_id, subscription_id)
            return ComplianceDecision(vendor_id, compliant=False, reason=REASON_NO_PLAN)

        if self.fetcher.plans.get_plan_price(plan_id) is None:
            logger.warning("Vendor %s is assigned to plan %s, which has no price", vendor_id, plan_id)
            return ComplianceDecision(vendor_id, compliant=False, reason=REASON_PLAN_NOT_FOUND)

        snapshot = self.fetcher.fetch(subscription_id, plan_id)
        if snapshot is None:
            return ComplianceDecision(vendor_id, compliant=False, reason=REASON_PROVIDER_UNAVAILABLE)

        if not snapshot.is_active:
            return ComplianceDecision(
                vendor_id, compliant=False, reason=REASON_SUBSCRIPTION_INACTIVE, snapshot=snapshot
            )

        if not snapshot.plan_match:
            logger.warning(
                "Vendor %s billed %s on subscription %s, which does not match plan %s",
                vendor_id,
                snapshot.amount,
                subscription_id,
                plan_id,
            )
        return ComplianceDecision(vendor_id, compliant=True, reason=REASON_COMPLIANT, snapshot=snapshot)

    def evaluate(self, vendor_id: int) -> ComplianceDecision:
        decision = self.check(vendor_id)
        if decision.compliant:
            return decision

        suspended = self.transitioner.suspend(vendor_id, reason=decision.reason)
        return ComplianceDecision(
            vendor_id,
            compliant=False,
            reason=decision.reason,
            snapshot=decision.snapshot,
            suspended=suspended,
        )
