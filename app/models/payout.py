import enum
from decimal import Decimal

from sqlalchemy import Enum, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class VendorPayoutType(str, enum.Enum):
    payout = "payout"
    withdrawal = "withdrawal"
    order_placed = "order_placed"
    order_changed = "order_changed"
    order_refunded = "order_refunded"


class VendorPayout(Base):
    __tablename__ = "vendor_payouts"

    payout_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(Integer, ForeignKey("companies.company_id"), nullable=False, index=True)
    plan_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    payout_type: Mapped[VendorPayoutType] = mapped_column(
        Enum(VendorPayoutType, name="vendorpayouttype"), nullable=False, default=VendorPayoutType.payout
    )
    payout_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))
