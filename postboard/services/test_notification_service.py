# postboard/services/test_notification_service.py
import re
import pytest

from postboard.core.exceptions import NotificationNotFoundError
from postboard.models.notification import Notification

def test_create_notification_for_other_user(notification_service, notification_store):
    saved = notification_service.create_notification("u2", "u1", "Alice Kim liked your post: Trip")

    assert saved is not None
    stored = notification_store.for_user("u2")
    assert len(stored) == 1
    assert stored[0].message == "Alice Kim liked your post: Trip"
    assert stored[0].read is False
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", stored[0].created_at)

def test_no_self_notification(notification_service, notification_store):
    assert notification_service.create_notification("u1", "u1", "msg") is None
    assert notification_store.notifications == {}

def test_store_failure_is_logged_not_raised(notification_service, notification_store, monkeypatch):
    def broken_save(notification):
        raise RuntimeError("firestore unavailable")
    monkeypatch.setattr(notification_store, "save", broken_save)

    assert notification_service.create_notification("u2", "u1", "msg") is None

def test_get_notifications_newest_first(notification_service, notification_store):
    notification_store.save(Notification(user_id="u2", message="old", created_at="2024-01-01 09:00:00"))
    notification_store.save(Notification(user_id="u2", message="new", created_at="2024-03-01 09:00:00"))
    notification_store.save(Notification(user_id="u3", message="other", created_at="2024-02-01 09:00:00"))

    messages = [n.message for n in notification_service.get_notifications("u2")]
    assert messages == ["new", "old"]

def test_mark_as_read(notification_service, notification_store):
    saved = notification_store.save(Notification(user_id="u2", message="m", created_at="2024-01-01 09:00:00"))

    updated = notification_service.mark_as_read(saved.notification_id)
    assert updated.read is True
    assert notification_store.find_by_id(saved.notification_id).read is True

def test_mark_as_read_unknown(notification_service):
    with pytest.raises(NotificationNotFoundError):
        notification_service.mark_as_read("missing")

def test_delete_notification(notification_service, notification_store):
    saved = notification_store.save(Notification(user_id="u2", message="m", created_at="2024-01-01 09:00:00"))

    notification_service.delete_notification(saved.notification_id)
    assert notification_store.find_by_id(saved.notification_id) is None

    with pytest.raises(NotificationNotFoundError):
        notification_service.delete_notification(saved.notification_id)
