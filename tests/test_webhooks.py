import time
import uuid

from apsmock.webhooks import WebhookScope, WebhooksState

CALLBACK = "http://localhost:8080/hook"


def test_create_subscription_fields():
    state = WebhooksState()
    scope = WebhookScope(folder="urn:folder", project=None)
    before = int(time.time() * 1000)
    sub = state.create_subscription("tenant-a", CALLBACK, scope)
    after = int(time.time() * 1000)
    assert sub.tenant == "tenant-a"
    assert sub.callback_url == CALLBACK
    assert sub.scope == scope
    assert sub.status == "active"
    assert before <= sub.created_at <= after
    assert uuid.UUID(sub.hook_id).version == 4


def test_get_subscription_round_trip():
    state = WebhooksState()
    sub = state.create_subscription("t", CALLBACK, WebhookScope(project="p"))
    assert state.get_subscription(sub.hook_id) == sub
    assert state.get_subscription("missing") is None


def test_list_subscriptions():
    state = WebhooksState()
    first = state.create_subscription("t", CALLBACK, WebhookScope())
    second = state.create_subscription("t", CALLBACK, WebhookScope())
    ids = {sub.hook_id for sub in state.list_subscriptions()}
    assert ids == {first.hook_id, second.hook_id}


def test_delete_subscription():
    state = WebhooksState()
    sub = state.create_subscription("t", CALLBACK, WebhookScope())
    assert state.delete_subscription(sub.hook_id) is True
    assert state.get_subscription(sub.hook_id) is None
    assert state.delete_subscription(sub.hook_id) is False
    assert state.list_subscriptions() == []


def test_returned_scope_is_a_copy():
    state = WebhooksState()
    scope = WebhookScope(folder="f")
    sub = state.create_subscription("t", CALLBACK, scope)
    sub.scope.folder = "changed"
    scope.folder = "also changed"
    assert state.get_subscription(sub.hook_id).scope.folder == "f"