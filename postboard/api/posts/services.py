# postboard/api/posts/services.py
import logging
from typing import Optional, List

from werkzeug.datastructures import FileStorage

from postboard.core.exceptions import (
    PostNotFoundError, MediaNotFoundError, MediaValidationError, MediaStorageError
)
from postboard.models.post import Post
from postboard.services.stores import PostStore, UserLookup
from postboard.services.media_storage_service import MediaStorageService
from postboard.services.notification_service import NotificationService

MIN_MEDIA_FILES = 1
MAX_MEDIA_FILES = 3
LIKE_SENDER_FALLBACK_NAME = "Someone"

class PostService:
    """
    게시글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    게시글 CRUD, 미디어 파일 관리, 좋아요 토글 및 알림 생성을 포함합니다.
    """
    def __init__(self,
                 post_store: PostStore,
                 user_lookup: UserLookup,
                 notification_service: NotificationService,
                 storage_service: MediaStorageService):
        self.post_store = post_store
        self.user_lookup = user_lookup
        self.notification_service = notification_service
        self.storage_service = storage_service
        logging.info("PostService initialized with dependencies.")

    def _get_post_or_raise(self, post_id: str) -> Post:
        post = self.post_store.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    def _store_media_files(self, files: List[FileStorage]) -> List[str]:
        """파일들을 디스크에 저장하고 URL 목록을 반환합니다."""
        return [self.storage_service.store(f) for f in files]

    def _filter_allowed(self, files: List[FileStorage]) -> List[FileStorage]:
        accepted = [f for f in files if self.storage_service.is_allowed(f)]
        dropped = len(files) - len(accepted)
        if dropped:
            logging.warning(f"허용되지 않은 형식의 미디어 파일 {dropped}개를 제외했습니다.")
        return accepted

    def create_post(self, user_id: str, title: str, description: str, category: str,
                    media_files: List[FileStorage]) -> Post:
        """새로운 게시글을 생성하고 첨부된 미디어를 저장합니다."""
        if not MIN_MEDIA_FILES <= len(media_files) <= MAX_MEDIA_FILES:
            raise MediaValidationError(
                f"You must upload between {MIN_MEDIA_FILES} and {MAX_MEDIA_FILES} media files."
            )

        accepted_files = self._filter_allowed(media_files)
        if not accepted_files:
            raise MediaValidationError("Only image/jpeg, image/png, image/jpg and video/mp4 media files are allowed.")

        media_urls = self._store_media_files(accepted_files)
        new_post = Post(
            user_id=user_id, title=title, description=description,
            category=category, media=media_urls
        )
        saved_post = self.post_store.save(new_post)
        logging.info(f"게시글 생성 완료 (post_id: {saved_post.post_id}, user_id: {user_id}, media: {len(media_urls)})")
        return saved_post

    def get_all_posts(self) -> List[Post]:
        return self.post_store.find_all()

    def get_posts_by_user(self, user_id: str) -> List[Post]:
        return self.post_store.find_by_user(user_id)

    def get_post_by_id(self, post_id: str) -> Post:
        return self._get_post_or_raise(post_id)

    def delete_post(self, post_id: str) -> str:
        """
        게시글을 삭제한 뒤 연결된 미디어 파일을 지웁니다.
        - 문서를 먼저 삭제하므로 남아있는 게시글이 이미 지워진 파일을 참조하는 일은 없습니다.
        - 모든 파일 삭제를 시도한 뒤, 하나라도 실패하면 MediaStorageError를 발생시킵니다.
        """
        post = self._get_post_or_raise(post_id)
        self.post_store.delete(post_id)

        failed_urls = []
        for url in post.media:
            try:
                self.storage_service.delete(url)
            except OSError as e:
                logging.error(f"미디어 파일 삭제 실패 (url: {url}): {e}")
                failed_urls.append(url)

        if failed_urls:
            logging.error(f"게시글 {post_id} 삭제 후 남은 미디어 파일: {failed_urls}")
            raise MediaStorageError(f"Failed to delete media: {failed_urls[0]}")

        logging.info(f"게시글 삭제 완료 (post_id: {post_id})")
        return "Post deleted successfully!"

    def update_post(self, post_id: str, title: str, description: str, category: str,
                    new_media_files: Optional[List[FileStorage]] = None) -> str:
        """제목/설명/카테고리를 덮어쓰고, 새 미디어가 있으면 목록 뒤에 추가합니다."""
        post = self._get_post_or_raise(post_id)
        post.title = title
        post.description = description
        post.category = category

        if new_media_files:
            post.media.extend(self._store_media_files(self._filter_allowed(new_media_files)))

        self.post_store.save(post)
        return "Post updated successfully!"

    def delete_media(self, post_id: str, media_url: str) -> str:
        """게시글의 미디어 목록에서 URL 하나를 제거하고 해당 파일을 삭제합니다."""
        post = self._get_post_or_raise(post_id)
        if media_url not in post.media:
            raise MediaNotFoundError(media_url)

        post.media.remove(media_url)
        self.post_store.save(post)

        try:
            self.storage_service.delete(media_url)
        except OSError as e:
            logging.error(f"미디어 파일 삭제 실패 (post_id: {post_id}, url: {media_url}): {e}", exc_info=True)
            raise MediaStorageError("Failed to delete media file.") from e
        return "Media deleted successfully!"

    def toggle_post_like(self, post_id: str, user_id: str) -> Post:
        """게시글 좋아요를 누르거나 취소하고, 작성자가 아니면 알림을 생성합니다."""
        post = self._get_post_or_raise(post_id)
        post.likes[user_id] = not post.likes.get(user_id, False)
        self.post_store.save(post)

        if not post.is_owned_by(user_id):
            sender_name = self.user_lookup.find_display_name(user_id) or LIKE_SENDER_FALLBACK_NAME
            self.notification_service.create_notification(
                recipient_id=post.user_id,
                sender_id=user_id,
                message=f"{sender_name} liked your post: {post.title}"
            )
        return post
