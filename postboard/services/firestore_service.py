# postboard/services/firestore_service.py
import logging
from typing import Optional, List
from firebase_admin import firestore

from postboard.models.post import Post
from postboard.models.notification import Notification


class FirestorePostStore:
    """'posts' 컬렉션에 게시글 문서를 통째로 읽고 쓰는 저장소."""

    def __init__(self):
        self.db = firestore.client()
        self.posts_ref = self.db.collection('posts')

    def save(self, post: Post) -> Post:
        if post.post_id:
            doc_ref = self.posts_ref.document(post.post_id)
        else:
            # 문서 ID를 Firestore가 발급하도록 함
            doc_ref = self.posts_ref.document()
            post.post_id = doc_ref.id
        try:
            doc_ref.set(post.to_dict())
        except Exception as e:
            logging.error(f"Firestore 게시글 저장 실패 (post_id: {post.post_id}): {e}", exc_info=True)
            raise
        return post

    def find_by_id(self, post_id: str) -> Optional[Post]:
        doc = self.posts_ref.document(post_id).get()
        if not doc.exists:
            return None
        return Post.from_dict(doc.to_dict())

    def find_all(self) -> List[Post]:
        return [Post.from_dict(doc.to_dict()) for doc in self.posts_ref.stream()]

    def find_by_user(self, user_id: str) -> List[Post]:
        docs = self.posts_ref.where('user_id', '==', user_id).stream()
        return [Post.from_dict(doc.to_dict()) for doc in docs]

    def delete(self, post_id: str) -> None:
        self.posts_ref.document(post_id).delete()
        logging.info(f"Firestore 게시글 삭제 완료 (post_id: {post_id})")


class FirestoreUserLookup:
    """'users' 컬렉션에서 알림/댓글에 표시할 사용자 이름을 조회합니다."""

    def __init__(self):
        self.db = firestore.client()
        self.users_ref = self.db.collection('users')

    def find_display_name(self, user_id: str) -> Optional[str]:
        if not user_id:
            return None
        doc = self.users_ref.document(user_id).get()
        if not doc.exists:
            return None
        return doc.to_dict().get('fullname')


class FirestoreNotificationStore:
    """'notifications' 컬렉션 저장소."""

    def __init__(self):
        self.db = firestore.client()
        self.notifications_ref = self.db.collection('notifications')

    def save(self, notification: Notification) -> Notification:
        if notification.notification_id:
            doc_ref = self.notifications_ref.document(notification.notification_id)
        else:
            doc_ref = self.notifications_ref.document()
            notification.notification_id = doc_ref.id
        doc_ref.set(notification.to_dict())
        return notification

    def find_by_id(self, notification_id: str) -> Optional[Notification]:
        doc = self.notifications_ref.document(notification_id).get()
        if not doc.exists:
            return None
        return Notification.from_dict(doc.to_dict())

    def find_by_user(self, user_id: str) -> List[Notification]:
        docs = self.notifications_ref.where('user_id', '==', user_id).stream()
        return [Notification.from_dict(doc.to_dict()) for doc in docs]

    def delete(self, notification_id: str) -> None:
        self.notifications_ref.document(notification_id).delete()
