"""initial

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19 10:12:00.000000
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "vendor_plans",
        sa.Column("plan_id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("plan", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
    )

    op.create_table(
        "companies",
        sa.Column("company_id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("company", sa.String(length=255), nullable=False),
        sa.Column(
            "status",
            sa.Enum("A", "P", "N", "D", "S", name="vendorstatus"),
            nullable=False,
        ),
        sa.Column("timestamp", sa.Integer(), nullable=False),
        sa.Column("plan_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["plan_id"], ["vendor_plans.plan_id"], name="fk_companies_plan_id_vendor_plans"),
    )
    op.create_index(op.f("ix_companies_plan_id"), "companies", ["plan_id"], unique=False)

    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("user_type", sa.String(length=1), nullable=False),
        sa.Column("is_root", sa.String(length=1), nullable=False),
        sa.Column("email", sa.String(length=128), nullable=False),
        sa.ForeignKeyConstraint(["company_id"], ["companies.company_id"], name="fk_users_company_id_companies"),
    )
    op.create_index(op.f("ix_users_company_id"), "users", ["company_id"], unique=False)

    op.create_table(
        "vendor_payment_profiles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("subscription_id", sa.String(length=64), nullable=True),
        sa.Column("customer_profile_id", sa.String(length=64), nullable=True),
        sa.Column("payment_profile_id", sa.String(length=64), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.user_id"], name="fk_vendor_payment_profiles_user_id_users"),
        sa.UniqueConstraint("user_id", name="uq_vendor_payment_profiles_user_id"),
    )

    op.create_table(
        "vendor_payouts",
        sa.Column("payout_id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("plan_id", sa.Integer(), nullable=False),
        sa.Column(
            "payout_type",
            sa.Enum(
                "payout",
                "withdrawal",
                "order_placed",
                "order_changed",
                "order_refunded",
                name="vendorpayouttype",
            ),
            nullable=False,
        ),
        sa.Column("payout_amount", sa.Numeric(12, 2), nullable=False),
        sa.ForeignKeyConstraint(["company_id"], ["companies.company_id"], name="fk_vendor_payouts_company_id_companies"),
    )
    op.create_index(op.f("ix_vendor_payouts_company_id"), "vendor_payouts", ["company_id"], unique=False)

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("action", sa.String(length=64), nullable=False),
        sa.Column("meta", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["company_id"], ["companies.company_id"], name="fk_audit_logs_company_id_companies"),
    )
    op.create_index(op.f("ix_audit_logs_company_id"), "audit_logs", ["company_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_audit_logs_company_id"), table_name="audit_logs")
    op.drop_table("audit_logs")

    op.drop_index(op.f("ix_vendor_payouts_company_id"), table_name="vendor_payouts")
    op.drop_table("vendor_payouts")

    op.drop_table("vendor_payment_profiles")

    op.drop_index(op.f("ix_users_company_id"), table_name="users")
    op.drop_table("users")

    op.drop_index(op.f("ix_companies_plan_id"), table_name="companies")
    op.drop_table("companies")

    op.drop_table("vendor_plans")

    op.execute("DROP TYPE IF EXISTS vendorstatus")
    op.execute("DROP TYPE IF EXISTS vendorpayouttype")
