from app.models.audit_log import AuditLog
from app.models.company import Company, VendorStatus
from app.models.payment_profile import VendorPaymentProfile
from app.models.payout import VendorPayout, VendorPayoutType
from app.models.plan import VendorPlan
from app.models.user import User, UserType

__all__ = [
    "AuditLog",
    "Company",
    "User",
    "UserType",
    "VendorPaymentProfile",
    "VendorPayout",
    "VendorPayoutType",
    "VendorPlan",
    "VendorStatus",
]
