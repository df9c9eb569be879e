# postboard/models/notification.py
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

@dataclass
class Notification:
    """
    Firestore 'notifications' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    """
    user_id: str           # 알림을 받는 사용자 ID (항상 게시글 작성자)
    message: str
    created_at: str        # 로컬 시간 'YYYY-MM-DD HH:MM:SS'
    read: bool = False
    notification_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Notification":
        return cls(
            user_id=data.get('user_id'),
            message=data.get('message'),
            created_at=data.get('created_at'),
            read=bool(data.get('read', False)),
            notification_id=data.get('notification_id'),
        )
