# postboard/models/post.py
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

from postboard.models.comment import Comment

@dataclass
class Post:
    """
    Firestore 'posts' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    좋아요와 댓글은 별도 컬렉션이 아닌 게시글 문서 안에 함께 저장됩니다.
    """
    user_id: str
    title: str
    description: str
    category: str
    media: List[str] = field(default_factory=list)
    likes: Dict[str, bool] = field(default_factory=dict)
    comments: List[Comment] = field(default_factory=list)
    post_id: Optional[str] = None  # 최초 저장 시 저장소가 발급

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        """Firestore에서 받은 딕셔너리로부터 Post 인스턴스를 생성합니다."""
        processed_data = data.copy()

        # 누락된 컬렉션 필드는 빈 값으로 초기화
        processed_data['media'] = list(processed_data.get('media') or [])
        processed_data['likes'] = dict(processed_data.get('likes') or {})
        processed_data['comments'] = [
            Comment.from_dict(c) for c in (processed_data.get('comments') or [])
        ]
        return cls(**processed_data)

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id
