from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class VendorPaymentProfile(Base):
    __tablename__ = "vendor_payment_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.user_id"), nullable=False, unique=True)
    subscription_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    customer_profile_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    payment_profile_id: Mapped[str | None] = mapped_column(String(64), nullable=True)

    user = relationship("User", back_populates="payment_profile")
