from app.stores.base import AccountStore, BillingSubscriptionStore, PayoutStore, PlanStore
from app.stores.sql import SqlAccountStore, SqlBillingSubscriptionStore, SqlPayoutStore, SqlPlanStore

__all__ = [
    "AccountStore",
    "BillingSubscriptionStore",
    "PayoutStore",
    "PlanStore",
    "SqlAccountStore",
    "SqlBillingSubscriptionStore",
    "SqlPayoutStore",
    "SqlPlanStore",
]
