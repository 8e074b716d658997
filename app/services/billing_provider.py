import json
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Protocol

import httpx

from app.services.exceptions import BillingProviderError, ConfigurationMissing

logger = logging.getLogger(__name__)

PRODUCTION_URL = "https://api.authorize.net/xml/v1/request.api"
SANDBOX_URL = "https://apitest.authorize.net/xml/v1/request.api"


@dataclass(frozen=True)
class ProviderSubscription:
    subscription_id: str
    status: str
    amount: Decimal
    start_date: date
    interval_length: int
    interval_unit: str
    profile_id: str | None
    payment_profile_id: str | None


class BillingProvider(Protocol):
    def get_subscription(self, subscription_id: str) -> ProviderSubscription: ...


def api_url_for_mode(mode: str) -> str:
    return PRODUCTION_URL if mode == "live" else SANDBOX_URL


def parse_amount(value: Any) -> Decimal:
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise BillingProviderError(f"Invalid subscription amount: {value!r}") from exc


def require_dict(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise BillingProviderError(f"Malformed subscription payload: {name} is not an object")
    return value


def parse_subscription(subscription_id: str, payload: dict[str, Any]) -> ProviderSubscription:
    subscription = require_dict(payload.get("subscription"), "subscription")
    schedule = require_dict(subscription.get("paymentSchedule"), "paymentSchedule")
    interval = require_dict(schedule.get("interval"), "interval")
    profile = require_dict(subscription.get("profile") or {}, "profile")
    payment_profile = require_dict(profile.get("paymentProfile") or {}, "paymentProfile")
    try:
        return ProviderSubscription(
            subscription_id=str(subscription_id),
            status=str(subscription["status"]),
            amount=parse_amount(subscription["amount"]),
            start_date=date.fromisoformat(str(schedule["startDate"])[:10]),
            interval_length=int(interval.get("length", 1)),
            interval_unit=str(interval["unit"]),
            profile_id=profile.get("customerProfileId"),
            payment_profile_id=payment_profile.get("customerPaymentProfileId"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise BillingProviderError("Malformed subscription payload") from exc


class AuthorizeNetProvider:
    """Reads ARB subscriptions through the Authorize.Net JSON API."""

    def __init__(
        self,
        api_login_id: str | None,
        transaction_key: str | None,
        mode: str = "sandbox",
        timeout_seconds: float = 10,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_login_id = api_login_id
        self.transaction_key = transaction_key
        self.mode = mode
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @property
    def url(self) -> str:
        return api_url_for_mode(self.mode)

    def build_request(self, subscription_id: str) -> dict[str, Any]:
        if not self.api_login_id or not self.transaction_key:
            raise ConfigurationMissing("Authorize.Net credentials are not configured")
        return {
            "ARBGetSubscriptionRequest": {
                "merchantAuthentication": {
                    "name": self.api_login_id,
                    "transactionKey": self.transaction_key,
                },
                "subscriptionId": str(subscription_id),
            }
        }

    def get_subscription(self, subscription_id: str) -> ProviderSubscription:
        body = self.build_request(subscription_id)
        timeout = httpx.Timeout(self.timeout_seconds)

        try:
            with httpx.Client(timeout=timeout, transport=self.transport) as client:
                response = client.post(self.url, json=body)
        except httpx.RequestError as exc:
            logger.error("Authorize.Net request failed: %s", exc)
            raise BillingProviderError("Authorize.Net request failed") from exc

        if response.status_code >= 400:
            logger.warning("Authorize.Net error %s for subscription %s", response.status_code, subscription_id)
            raise BillingProviderError(f"Authorize.Net returned HTTP {response.status_code}")

        # Responses are prefixed with a UTF-8 byte order mark.
        try:
            payload = json.loads(response.content.decode("utf-8-sig"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise BillingProviderError("Authorize.Net returned an unreadable body") from exc
        if not isinstance(payload, dict):
            raise BillingProviderError("Authorize.Net returned an unexpected body")

        messages = payload.get("messages")
        if not isinstance(messages, dict):
            logger.warning("Authorize.Net response for subscription %s has no messages block", subscription_id)
            raise BillingProviderError("Authorize.Net returned an unexpected body")

        result_code = messages.get("resultCode")
        if result_code != "Ok":
            items = messages.get("message")
            details = "; ".join(
                f"{item.get('code')}: {item.get('text')}"
                for item in (items if isinstance(items, list) else [])
                if isinstance(item, dict)
            )
            logger.warning("Authorize.Net result %s for subscription %s: %s", result_code, subscription_id, details)
            raise BillingProviderError(f"Authorize.Net result code {result_code}")

        return parse_subscription(subscription_id, payload)
