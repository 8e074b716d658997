import enum

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class VendorStatus(str, enum.Enum):
    active = "A"
    pending = "P"
    new_account = "N"
    disabled = "D"
    suspended = "S"


class Company(Base):
    __tablename__ = "companies"

    company_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    status: Mapped[VendorStatus] = mapped_column(
        Enum(VendorStatus, values_callable=lambda statuses: [s.value for s in statuses], name="vendorstatus"),
        nullable=False,
        default=VendorStatus.new_account,
    )
    timestamp: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    plan_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("vendor_plans.plan_id"), nullable=True, index=True)

    plan = relationship("VendorPlan")
    users = relationship("User", back_populates="company")
