# postboard/services/stores.py
"""
서비스 계층이 의존하는 저장소 인터페이스.

운영 환경에서는 firestore_service.py의 Firestore 구현체가,
테스트에서는 메모리 구현체가 create_app을 통해 주입됩니다.
"""
from typing import Optional, List, Protocol

from postboard.models.post import Post
from postboard.models.notification import Notification


class PostStore(Protocol):
    def save(self, post: Post) -> Post:
        """게시글 문서 전체를 저장합니다. post_id가 없으면 새로 발급합니다."""
        ...

    def find_by_id(self, post_id: str) -> Optional[Post]:
        ...

    def find_all(self) -> List[Post]:
        ...

    def find_by_user(self, user_id: str) -> List[Post]:
        ...

    def delete(self, post_id: str) -> None:
        ...


class UserLookup(Protocol):
    def find_display_name(self, user_id: str) -> Optional[str]:
        """사용자의 표시 이름을 반환합니다. 찾을 수 없으면 None."""
        ...


class NotificationStore(Protocol):
    def save(self, notification: Notification) -> Notification:
        ...

    def find_by_id(self, notification_id: str) -> Optional[Notification]:
        ...

    def find_by_user(self, user_id: str) -> List[Notification]:
        ...

    def delete(self, notification_id: str) -> None:
        ...
