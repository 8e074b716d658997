from decimal import Decimal

from sqlalchemy.orm import Session

from app.models import (
    AuditLog,
    Company,
    User,
    UserType,
    VendorPaymentProfile,
    VendorPayout,
    VendorPayoutType,
    VendorPlan,
    VendorStatus,
)


class SqlAccountStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _get_company(self, vendor_id: int) -> Company | None:
        return self.db.query(Company).filter(Company.company_id == vendor_id).first()

    def get_registration_timestamp(self, vendor_id: int) -> int | None:
        company = self._get_company(vendor_id)
        return company.timestamp if company else None

    def get_plan_id(self, vendor_id: int) -> int | None:
        company = self._get_company(vendor_id)
        return company.plan_id if company else None

    def get_status(self, vendor_id: int) -> VendorStatus | None:
        company = self._get_company(vendor_id)
        return company.status if company else None

    def set_status(self, vendor_id: int, status: VendorStatus, reason: str | None = None) -> bool:
        previous = self.get_status(vendor_id)
        if previous is None or previous == status:
            return False

        # Conditional update so that concurrent deliveries record a single change.
        updated = (
            self.db.query(Company)
            .filter(Company.company_id == vendor_id, Company.status != status)
            .update({Company.status: status}, synchronize_session=False)
        )
        if not updated:
            self.db.rollback()
            return False

        self.db.add(
            AuditLog(
                company_id=vendor_id,
                action="status_change",
                meta={"from": previous.value, "to": status.value, "reason": reason},
            )
        )
        self.db.commit()
        return True

    def get_status_history(self, vendor_id: int) -> list[AuditLog]:
        return (
            self.db.query(AuditLog)
            .filter(AuditLog.company_id == vendor_id, AuditLog.action == "status_change")
            .order_by(AuditLog.id.asc())
            .all()
        )


class SqlBillingSubscriptionStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_root_subscription_id(self, vendor_id: int) -> str | None:
        row = (
            self.db.query(VendorPaymentProfile.subscription_id)
            .join(User, VendorPaymentProfile.user_id == User.user_id)
            .filter(
                User.user_type == UserType.vendor.value,
                User.is_root == "Y",
                User.company_id == vendor_id,
            )
            .first()
        )
        if not row or not row.subscription_id:
            return None
        return row.subscription_id


class SqlPlanStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_plan_price(self, plan_id: int) -> Decimal | None:
        row = self.db.query(VendorPlan.price).filter(VendorPlan.plan_id == plan_id).first()
        return row.price if row else None


class SqlPayoutStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_pending_payout(
        self, vendor_id: int, plan_id: int, payout_type: VendorPayoutType = VendorPayoutType.payout
    ) -> int | None:
        row = (
            self.db.query(VendorPayout.payout_id)
            .filter(
                VendorPayout.company_id == vendor_id,
                VendorPayout.plan_id == plan_id,
                VendorPayout.payout_type == payout_type,
            )
            .first()
        )
        return row.payout_id if row else None

    def delete_payout(self, payout_id: int) -> None:
        self.db.query(VendorPayout).filter(VendorPayout.payout_id == payout_id).delete()
        self.db.commit()
