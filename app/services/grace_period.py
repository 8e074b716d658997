import logging
from datetime import datetime, timezone

from app.stores.base import AccountStore
from app.utils.time import from_timestamp, utcnow

logger = logging.getLogger(__name__)


def days_since_registration(registration_timestamp: int, now: datetime) -> int:
    """Whole calendar days between the registration date and ``now``, both taken in UTC.

    A naive ``now`` is read as UTC. Registrations dated in the future count as day 0.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    registered_on = from_timestamp(registration_timestamp).date()
    today = now.astimezone(timezone.utc).date()
    return max((today - registered_on).days, 0)


class GracePeriodEvaluator:
    def __init__(self, accounts: AccountStore, grace_period_days: int | None) -> None:
        self.accounts = accounts
        self.grace_period_days = grace_period_days

    def is_under_grace_period(self, vendor_id: int | None, now: datetime | None = None) -> bool:
        if not vendor_id:
            return False

        if self.grace_period_days is None:
            logger.warning("Grace period length not configured, skipping grace period for vendor %s", vendor_id)
            return False

        registration_timestamp = self.accounts.get_registration_timestamp(vendor_id)
        if registration_timestamp is None:
            logger.warning("Registration timestamp missing for vendor %s", vendor_id)
            return False

        now = now or utcnow()
        return days_since_registration(registration_timestamp, now) < self.grace_period_days
