import logging
from dataclasses import dataclass
from typing import Any, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import Settings
from app.models import UserType
from app.services.account_status import AccountStatusTransitioner
from app.services.billing_provider import AuthorizeNetProvider, BillingProvider
from app.services.compliance import ComplianceDecision, PaymentComplianceEvaluator
from app.services.exceptions import ComplianceError
from app.services.grace_period import GracePeriodEvaluator
from app.services.payouts import PlanChangeReconciler
from app.services.subscription import SubscriptionStatusFetcher
from app.stores import SqlAccountStore, SqlBillingSubscriptionStore, SqlPayoutStore, SqlPlanStore
from app.stores.base import AccountStore, BillingSubscriptionStore, PayoutStore, PlanStore

logger = logging.getLogger(__name__)

LOGIN_STATUS_OK = "ok"
STOREFRONT_AREA = "C"
VENDOR_USER_TYPES = {UserType.admin.value, UserType.vendor.value}


@dataclass
class ComplianceHooks:
    grace: GracePeriodEvaluator
    compliance: PaymentComplianceEvaluator
    reconciler: PlanChangeReconciler

    def on_login(
        self,
        user_id: int,
        vendor_id: int | None,
        user_data: Mapping[str, Any],
        auth_result: str,
        area: str,
    ) -> ComplianceDecision | None:
        if (
            auth_result != LOGIN_STATUS_OK
            or user_data.get("user_type") not in VENDOR_USER_TYPES
            or area == STOREFRONT_AREA
        ):
            return None

        if not vendor_id:
            return None

        try:
            if self.grace.is_under_grace_period(vendor_id):
                return None
            return self.compliance.evaluate(vendor_id)
        except (ComplianceError, SQLAlchemyError):
            logger.exception("Compliance check failed for vendor %s after login of user %s", vendor_id, user_id)
            return None

    def on_company_update(
        self, company_data: Mapping[str, Any], company_id: int, previous_status: str | None = None
    ) -> bool:
        try:
            return self.reconciler.reconcile(company_data, company_id, previous_status)
        except (ComplianceError, SQLAlchemyError):
            logger.exception("Plan change reconciliation failed for vendor %s", company_id)
            return False


def build_hooks(
    accounts: AccountStore,
    subscriptions: BillingSubscriptionStore,
    plans: PlanStore,
    payouts: PayoutStore,
    provider: BillingProvider,
    grace_period_days: int | None,
) -> ComplianceHooks:
    grace = GracePeriodEvaluator(accounts, grace_period_days)
    compliance = PaymentComplianceEvaluator(
        accounts,
        subscriptions,
        SubscriptionStatusFetcher(provider, plans),
        AccountStatusTransitioner(accounts),
    )
    return ComplianceHooks(grace=grace, compliance=compliance, reconciler=PlanChangeReconciler(payouts, grace))


def build_provider(settings: Settings) -> AuthorizeNetProvider:
    return AuthorizeNetProvider(
        api_login_id=settings.authorizenet_api_login_id,
        transaction_key=settings.authorizenet_transaction_key,
        mode=settings.authorizenet_mode,
        timeout_seconds=settings.billing_timeout_seconds,
    )


def build_sql_hooks(db: Session, settings: Settings, provider: BillingProvider | None = None) -> ComplianceHooks:
    return build_hooks(
        accounts=SqlAccountStore(db),
        subscriptions=SqlBillingSubscriptionStore(db),
        plans=SqlPlanStore(db),
        payouts=SqlPayoutStore(db),
        provider=provider or build_provider(settings),
        grace_period_days=settings.grace_period_days,
    )
