from app.schemas.compliance import ComplianceResponse, SubscriptionSnapshotResponse
from app.schemas.hooks import CompanyUpdateEvent, HookResponse, LoginEvent

__all__ = [
    "CompanyUpdateEvent",
    "ComplianceResponse",
    "HookResponse",
    "LoginEvent",
    "SubscriptionSnapshotResponse",
]
