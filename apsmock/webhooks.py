"""In-memory store of webhook subscriptions."""

from __future__ import annotations

import copy
import threading
import time
import uuid
from dataclasses import dataclass, field


@dataclass
class WebhookScope:
    folder: str | None = None
    project: str | None = None


@dataclass
class WebhookSubscription:
    hook_id: str
    tenant: str
    callback_url: str
    scope: WebhookScope = field(default_factory=WebhookScope)
    status: str = "active"
    created_at: int = 0


class WebhooksState:
    """Subscriptions keyed by hook id."""

    def __init__(self) -> None:
        self._subscriptions: dict[str, WebhookSubscription] = {}
        self._lock = threading.Lock()

    def create_subscription(
        self, tenant: str, callback_url: str, scope: WebhookScope
    ) -> WebhookSubscription:
        """Create an active subscription with a fresh hook id."""
        subscription = WebhookSubscription(
            hook_id=str(uuid.uuid4()),
            tenant=tenant,
            callback_url=callback_url,
            scope=copy.copy(scope),
            status="active",
            created_at=int(time.time() * 1000),
        )
        with self._lock:
            self._subscriptions[subscription.hook_id] = subscription
        return copy.deepcopy(subscription)

    def get_subscription(self, hook_id: str) -> WebhookSubscription | None:
        """Return a copy of the subscription, or None."""
        with self._lock:
            subscription = self._subscriptions.get(hook_id)
            return None if subscription is None else copy.deepcopy(subscription)

    def list_subscriptions(self) -> list[WebhookSubscription]:
        """Return copies of all subscriptions."""
        with self._lock:
            return [copy.deepcopy(sub) for sub in self._subscriptions.values()]

    def delete_subscription(self, hook_id: str) -> bool:
        """Remove a subscription; tell whether it existed."""
        with self._lock:
            return self._subscriptions.pop(hook_id, None) is not None