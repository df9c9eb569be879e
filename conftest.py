# conftest.py
"""
테스트 공용 픽스처

Firestore 대신 메모리 저장소를 create_app에 주입하고,
업로드 디렉터리는 pytest의 tmp_path 아래로 돌립니다.
"""

import copy
import uuid
from io import BytesIO

import pytest
from werkzeug.datastructures import FileStorage

from postboard import create_app
from postboard.core.config import TestingConfig
from postboard.models.notification import Notification
from postboard.models.post import Post
from postboard.services.media_storage_service import MediaStorageService
from postboard.services.notification_service import NotificationService


class InMemoryPostStore:
    """문서 전체를 복사해 저장하는 메모리 게시글 저장소"""

    def __init__(self):
        self.posts = {}

    def save(self, post: Post) -> Post:
        if not post.post_id:
            post.post_id = uuid.uuid4().hex
        self.posts[post.post_id] = copy.deepcopy(post)
        return post

    def find_by_id(self, post_id):
        post = self.posts.get(post_id)
        return copy.deepcopy(post) if post else None

    def find_all(self):
        return [copy.deepcopy(p) for p in self.posts.values()]

    def find_by_user(self, user_id):
        return [copy.deepcopy(p) for p in self.posts.values() if p.user_id == user_id]

    def delete(self, post_id):
        self.posts.pop(post_id, None)


class InMemoryUserLookup:
    def __init__(self, names=None):
        self.names = dict(names or {})

    def find_display_name(self, user_id):
        return self.names.get(user_id)


class InMemoryNotificationStore:
    def __init__(self):
        self.notifications = {}

    def save(self, notification: Notification) -> Notification:
        if not notification.notification_id:
            notification.notification_id = uuid.uuid4().hex
        self.notifications[notification.notification_id] = copy.deepcopy(notification)
        return notification

    def find_by_id(self, notification_id):
        notification = self.notifications.get(notification_id)
        return copy.deepcopy(notification) if notification else None

    def find_by_user(self, user_id):
        return [copy.deepcopy(n) for n in self.notifications.values() if n.user_id == user_id]

    def delete(self, notification_id):
        self.notifications.pop(notification_id, None)

    def for_user(self, user_id):
        return [n for n in self.notifications.values() if n.user_id == user_id]


def make_file(filename="photo.png", content_type="image/png", data=b"fake-bytes"):
    """서비스 테스트용 업로드 파일"""
    return FileStorage(stream=BytesIO(data), filename=filename, content_type=content_type)


def upload(filename="photo.png", content_type="image/png", data=b"fake-bytes"):
    """Flask 테스트 클라이언트 multipart 업로드용 튜플"""
    return (BytesIO(data), filename, content_type)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "media"


@pytest.fixture
def post_store():
    return InMemoryPostStore()


@pytest.fixture
def user_lookup():
    return InMemoryUserLookup({"u1": "Alice Kim", "u2": "Bob Lee", "u3": "Chris Park"})


@pytest.fixture
def notification_store():
    return InMemoryNotificationStore()


@pytest.fixture
def storage_service(upload_dir):
    return MediaStorageService(upload_dir=str(upload_dir))


@pytest.fixture
def notification_service(notification_store):
    return NotificationService(notification_store=notification_store)


@pytest.fixture
def app(monkeypatch, upload_dir, post_store, user_lookup, notification_store):
    monkeypatch.setattr(TestingConfig, "MEDIA_UPLOAD_DIR", str(upload_dir))
    monkeypatch.setattr(TestingConfig, "MAX_CONTENT_LENGTH", 1024 * 1024)
    return create_app(
        config_name="testing",
        post_store=post_store,
        user_lookup=user_lookup,
        notification_store=notification_store,
    )


@pytest.fixture
def client(app):
    return app.test_client()
