# postboard/api/comments/services.py

import logging
import uuid
from typing import Optional

from postboard.core.exceptions import PostNotFoundError
from postboard.models.comment import Comment
from postboard.models.post import Post
from postboard.services.stores import PostStore, UserLookup
from postboard.services.notification_service import NotificationService

COMMENT_AUTHOR_FALLBACK_NAME = "Anonymous"

class CommentService:
    """
    댓글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    - 댓글은 게시글 문서의 'comments' 배열에 저장됩니다.
    - 요청에 담긴 userID를 그대로 신뢰합니다. (인증 없음)
    """
    def __init__(self, post_store: PostStore, user_lookup: UserLookup,
                 notification_service: NotificationService):
        self.post_store = post_store
        self.user_lookup = user_lookup
        self.notification_service = notification_service

    def _get_post_or_raise(self, post_id: str) -> Post:
        post = self.post_store.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def add_comment(self, post_id: str, user_id: str, content: str) -> Post:
        """새로운 댓글을 추가하고 게시글 작성자에게 알림을 보냅니다."""
        post = self._get_post_or_raise(post_id)

        user_full_name = self.user_lookup.find_display_name(user_id) or COMMENT_AUTHOR_FALLBACK_NAME
        comment = Comment(
            comment_id=str(uuid.uuid4()),
            user_id=user_id,
            user_full_name=user_full_name,
            content=content
        )
        post.comments.append(comment)
        self.post_store.save(post)

        if not post.is_owned_by(user_id):
            self.notification_service.create_notification(
                recipient_id=post.user_id, sender_id=user_id,
                message=f"{user_full_name} commented on your post: {post.title}"
            )
        return post

    def update_comment(self, post_id: str, comment_id: str, user_id: str, content: str) -> Post:
        """작성자 본인의 댓글 내용만 수정합니다. 일치하는 댓글이 없으면 아무것도 바꾸지 않습니다."""
        post = self._get_post_or_raise(post_id)

        comment: Optional[Comment] = next(
            (c for c in post.comments if c.comment_id == comment_id and c.user_id == user_id),
            None
        )
        if comment:
            comment.content = content
        else:
            logging.info(f"수정할 댓글 없음 (post_id: {post_id}, comment_id: {comment_id}, user_id: {user_id})")

        self.post_store.save(post)
        return post

    def delete_comment(self, post_id: str, comment_id: str, user_id: str) -> Post:
        """댓글 작성자 또는 게시글 작성자가 요청한 경우에만 댓글을 삭제합니다."""
        post = self._get_post_or_raise(post_id)

        can_delete_any = post.is_owned_by(user_id)
        post.comments = [
            c for c in post.comments
            if not (c.comment_id == comment_id and (c.user_id == user_id or can_delete_any))
        ]

        self.post_store.save(post)
        return post
