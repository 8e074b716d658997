import argparse

from app.config import get_settings
from app.db import SessionLocal
from app.services.hooks import build_sql_hooks
from app.stores import SqlAccountStore


def show_grace(hooks, company_id: int) -> int:
    under_grace = hooks.grace.is_under_grace_period(company_id)
    print(f"company_id: {company_id}")
    print(f"under_grace_period: {'yes' if under_grace else 'no'}")
    return 0


def check_vendor(hooks, accounts: SqlAccountStore, company_id: int, dry_run: bool, force: bool = False) -> int:
    status = accounts.get_status(company_id)
    if status is None:
        print("Vendor not found")
        return 1

    under_grace = hooks.grace.is_under_grace_period(company_id)
    if under_grace and not force:
        dry_run = True

    if dry_run:
        decision = hooks.compliance.check(company_id)
    else:
        decision = hooks.compliance.evaluate(company_id)

    print(f"company_id: {company_id}")
    print(f"status: {status.value}")
    print(f"under_grace_period: {'yes' if under_grace else 'no'}")
    print(f"compliant: {'yes' if decision.compliant else 'no'}")
    print(f"reason: {decision.reason}")
    if decision.snapshot:
        snapshot = decision.snapshot
        print(f"subscription_id: {snapshot.subscription_id}")
        print(f"subscription_status: {snapshot.status}")
        print(f"amount: {snapshot.amount}")
        print(f"next_billing_date: {snapshot.next_billing_date.isoformat()}")
        print(f"plan_match: {'yes' if snapshot.plan_match else 'no'}")
    if decision.suspended:
        print("Vendor suspended")
    return 0


def show_history(accounts: SqlAccountStore, company_id: int) -> int:
    entries = accounts.get_status_history(company_id)
    if not entries:
        print("No status changes recorded")
        return 0
    for entry in entries:
        meta = entry.meta or {}
        print(f"{entry.created_at.isoformat()}\t{meta.get('from')} -> {meta.get('to')}\t{meta.get('reason')}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vendor plan compliance administration")
    subparsers = parser.add_subparsers(dest="command", required=True)

    grace_parser = subparsers.add_parser("grace")
    grace_parser.add_argument("--company-id", type=int, required=True)

    check_parser = subparsers.add_parser("check")
    check_parser.add_argument("--company-id", type=int, required=True)
    check_parser.add_argument("--dry-run", action="store_true")
    check_parser.add_argument("--force", action="store_true", help="suspend even inside the grace period")

    history_parser = subparsers.add_parser("history")
    history_parser.add_argument("--company-id", type=int, required=True)

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    db = SessionLocal()
    try:
        hooks = build_sql_hooks(db, get_settings())
        accounts = SqlAccountStore(db)
        if args.command == "grace":
            return show_grace(hooks, args.company_id)
        if args.command == "check":
            return check_vendor(hooks, accounts, args.company_id, args.dry_run, args.force)
        if args.command == "history":
            return show_history(accounts, args.company_id)
        print("Unknown command")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(main())
