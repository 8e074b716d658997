import enum

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class UserType(str, enum.Enum):
    admin = "A"
    vendor = "V"
    customer = "C"


class User(Base):
    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company_id: Mapped[int] = mapped_column(Integer, ForeignKey("companies.company_id"), nullable=False, default=0, index=True)
    user_type: Mapped[str] = mapped_column(String(1), nullable=False, default=UserType.customer.value)
    is_root: Mapped[str] = mapped_column(String(1), nullable=False, default="N")
    email: Mapped[str] = mapped_column(String(128), nullable=False, default="")

    company = relationship("Company", back_populates="users")
    payment_profile = relationship("VendorPaymentProfile", back_populates="user", uselist=False)
