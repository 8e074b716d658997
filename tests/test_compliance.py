import httpx

from app.models import UserType, VendorStatus
from app.services.billing_provider import AuthorizeNetProvider
from app.services.compliance import (
    REASON_COMPLIANT,
    REASON_NO_PLAN,
    REASON_NO_SUBSCRIPTION,
    REASON_PLAN_NOT_FOUND,
    REASON_PROVIDER_UNAVAILABLE,
    REASON_SUBSCRIPTION_INACTIVE,
)
from app.services.hooks import build_hooks

from conftest import registered_days_ago


def test_suspends_without_subscription(hooks, accounts, provider):
    accounts.add(7, registered_days_ago(90), plan_id=5)

    decision = hooks.compliance.evaluate(7)

    assert decision.compliant is False
    assert decision.reason == REASON_NO_SUBSCRIPTION
    assert decision.suspended is True
    assert accounts.get_status(7) == VendorStatus.suspended
    assert provider.calls == []


def test_suspends_when_subscription_inactive(hooks, accounts, subscriptions, provider):
    accounts.add(7, registered_days_ago(90), plan_id=5)
    subscriptions.subscriptions[7] = "sub-7"
    provider.add("sub-7", status="canceled")

    decision = hooks.compliance.evaluate(7)

    assert decision.reason == REASON_SUBSCRIPTION_INACTIVE
    assert decision.snapshot.status == "canceled"
    assert accounts.get_status(7) == VendorStatus.suspended


def test_status_comparison_is_exact(hooks, accounts, subscriptions, provider):
    accounts.add(7, registered_days_ago(90), plan_id=5)
    subscriptions.subscriptions[7] = "sub-7"
    provider.add("sub-7", status="Active")

    decision = hooks.compliance.evaluate(7)

    assert decision.compliant is False
    assert accounts.get_status(7) == VendorStatus.suspended


def test_active_matching_subscription_is_left_alone(hooks, accounts, subscriptions, provider):
    accounts.add(7, registered_days_ago(90), plan_id=5)
    subscriptions.subscriptions[7] = "sub-7"
    provider.add("sub-7", status="active", amount="29.99")

    decision = hooks.compliance.evaluate(7)

    assert decision.compliant is True
    assert decision.reason == REASON_COMPLIANT
    assert decision.suspended is False
    assert decision.snapshot.plan_match_status == ""
    assert accounts.get_status(7) == VendorStatus.active
    assert accounts.history == []


def test_active_subscription_with_price_mismatch_is_not_suspended(hooks, accounts, subscriptions, provider):
    accounts.add(7, registered_days_ago(90), plan_id=3)
    subscriptions.subscriptions[7] = "sub-7"
    provider.add("sub-7", status="active", amount="29.99")

    decision = hooks.compliance.evaluate(7)

    assert decision.compliant is True
    assert decision.snapshot.plan_match is False
    assert accounts.get_status(7) == VendorStatus.active


def test_provider_failure_suspends(hooks, accounts, subscriptions):
    accounts.add(7, registered_days_ago(90), plan_id=5)
    subscriptions.subscriptions[7] = "unknown-sub"

    decision = hooks.compliance.evaluate(7)

    assert decision.reason == REASON_PROVIDER_UNAVAILABLE
    assert accounts.get_status(7) == VendorStatus.suspended


def test_missing_plan_suspends(hooks, accounts, subscriptions, provider):
    accounts.add(7, registered_days_ago(90), plan_id=None)
    subscriptions.subscriptions[7] = "sub-7"
    provider.add("sub-7")

    decision = hooks.compliance.evaluate(7)

    assert decision.reason == REASON_NO_PLAN
    assert accounts.get_status(7) == VendorStatus.suspended


def test_check_does_not_suspend(hooks, accounts):
    accounts.add(7, registered_days_ago(90), plan_id=5)

    decision = hooks.compliance.check(7)

    assert decision.compliant is False
    assert decision.suspended is False
    assert accounts.get_status(7) == VendorStatus.active


def test_unknown_plan_price_is_reported_without_calling_provider(hooks, accounts, subscriptions, provider):
    accounts.add(7, registered_days_ago(90), plan_id=99)
    subscriptions.subscriptions[7] = "sub-7"
    provider.add("sub-7")

    decision = hooks.compliance.evaluate(7)

    assert decision.reason == REASON_PLAN_NOT_FOUND
    assert decision.suspended is True
    assert provider.calls == []
    assert accounts.history == [(7, VendorStatus.suspended, REASON_PLAN_NOT_FOUND)]


def test_missing_credentials_suspend_vendor(accounts, subscriptions, plans, payouts):
    accounts.add(7, registered_days_ago(90), plan_id=5)
    subscriptions.subscriptions[7] = "sub-7"
    provider = AuthorizeNetProvider(api_login_id=None, transaction_key=None)
    hooks = build_hooks(accounts, subscriptions, plans, payouts, provider, grace_period_days=30)

    decision = hooks.on_login(70, 7, {"user_type": UserType.vendor.value}, "ok", "V")

    assert decision.reason == REASON_PROVIDER_UNAVAILABLE
    assert decision.suspended is True
    assert accounts.get_status(7) == VendorStatus.suspended


def test_malformed_provider_response_suspends_on_login(accounts, subscriptions, plans, payouts):
    accounts.add(7, registered_days_ago(90), plan_id=5)
    subscriptions.subscriptions[7] = "sub-7"
    body = {
        "subscription": {
            "paymentSchedule": {"interval": "months", "startDate": "2025-01-15"},
            "amount": 29.99,
            "status": "active",
        },
        "messages": {"resultCode": "Ok", "message": [{"code": "I00001", "text": "Successful."}]},
    }
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))
    provider = AuthorizeNetProvider("login-id", "txn-key", transport=transport)
    hooks = build_hooks(accounts, subscriptions, plans, payouts, provider, grace_period_days=30)

    decision = hooks.on_login(70, 7, {"user_type": UserType.vendor.value}, "ok", "V")

    assert decision.reason == REASON_PROVIDER_UNAVAILABLE
    assert accounts.get_status(7) == VendorStatus.suspended
