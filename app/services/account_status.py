import logging

from app.models import VendorStatus
from app.stores.base import AccountStore

logger = logging.getLogger(__name__)


class AccountStatusTransitioner:
    def __init__(self, accounts: AccountStore) -> None:
        self.accounts = accounts

    def suspend(self, vendor_id: int | None, reason: str | None = None) -> bool:
        """Move the vendor to suspended. Returns False when nothing changed."""
        if not vendor_id:
            return False

        changed = self.accounts.set_status(vendor_id, VendorStatus.suspended, reason=reason)
        if changed:
            logger.info("Vendor %s suspended: %s", vendor_id, reason)
        else:
            logger.debug("Vendor %s already suspended or missing", vendor_id)
        return changed
