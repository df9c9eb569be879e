# postboard/models/comment.py
from dataclasses import dataclass
from typing import Dict, Any

@dataclass
class Comment:
    """
    Post 문서의 'comments' 배열에 저장되는 댓글 구조.
    user_full_name은 작성 시점의 표시 이름 스냅샷이며 이후 갱신되지 않습니다.
    """
    comment_id: str
    user_id: str
    user_full_name: str
    content: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        return cls(
            comment_id=data.get('comment_id'),
            user_id=data.get('user_id'),
            user_full_name=data.get('user_full_name'),
            content=data.get('content'),
        )
