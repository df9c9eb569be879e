# postboard/services/notification_service.py
import logging
from typing import List

from postboard.core.exceptions import NotificationNotFoundError
from postboard.models.notification import Notification
from postboard.services.stores import NotificationStore
from postboard.utils.datetime_utils import DateTimeUtils

class NotificationService:
    """
    알림 관련 비즈니스 로직을 담당하는 공용 서비스 클래스.
    """
    def __init__(self, notification_store: NotificationStore):
        self.notification_store = notification_store

    def create_notification(self, recipient_id: str, sender_id: str, message: str):
        """
        게시글 작성자에게 보낼 알림을 생성하여 저장합니다.
        - 자기 자신에게 보내는 알림은 생성하지 않습니다.

        :param recipient_id: 알림을 받을 사용자 ID (게시글 작성자)
        :param sender_id: 알림을 유발한 사용자 ID
        :param message: 알림에 표시될 문장
        :return: 저장된 Notification, 생성하지 않았으면 None
        """
        if recipient_id == sender_id:
            return None  # 자기 자신에게는 알림을 생성하지 않음

        notification = Notification(
            user_id=recipient_id,
            message=message,
            created_at=DateTimeUtils.now_string(),
            read=False
        )
        try:
            saved = self.notification_store.save(notification)
            logging.info(f"알림 생성 완료: {sender_id} -> {recipient_id}")
            return saved
        except Exception as e:
            # 알림 저장 실패는 로그만 남기고 호출자에게 전파하지 않음
            logging.error(f"알림 생성 중 오류 발생: {e}", exc_info=True)
            return None

    def get_notifications(self, user_id: str) -> List[Notification]:
        """사용자의 알림을 최신순으로 반환합니다."""
        notifications = self.notification_store.find_by_user(user_id)
        return sorted(notifications, key=lambda n: DateTimeUtils.sort_key(n.created_at), reverse=True)

    def mark_as_read(self, notification_id: str) -> Notification:
        notification = self.notification_store.find_by_id(notification_id)
        if notification is None:
            raise NotificationNotFoundError(notification_id)
        notification.read = True
        return self.notification_store.save(notification)

    def delete_notification(self, notification_id: str) -> None:
        if self.notification_store.find_by_id(notification_id) is None:
            raise NotificationNotFoundError(notification_id)
        self.notification_store.delete(notification_id)
        logging.info(f"알림 삭제 완료 (notification_id: {notification_id})")
