# postboard/core/exceptions.py
"""
게시글 도메인에서 발생하는 예외 정의.

서비스 메서드는 성공 시 결과(Post, 목록, 메시지)를 반환하고,
실패 시 아래 예외 중 하나를 발생시킵니다. 라우트는 각 예외의
status_code / error_code를 그대로 응답에 사용합니다.
"""


class PostboardError(Exception):
    """애플리케이션 기본 예외 클래스"""
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error_code": self.error_code, "message": self.message}


class PostNotFoundError(PostboardError):
    """게시글을 찾을 수 없는 경우"""
    status_code = 404
    error_code = "POST_NOT_FOUND"

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Post not found: {post_id}")


class MediaNotFoundError(PostboardError):
    """게시글의 미디어 목록에 해당 URL이 없는 경우"""
    status_code = 404
    error_code = "MEDIA_NOT_FOUND"

    def __init__(self, media_url: str):
        self.media_url = media_url
        super().__init__("Media file not found.")


class NotificationNotFoundError(PostboardError):
    """알림을 찾을 수 없는 경우"""
    status_code = 404
    error_code = "NOTIFICATION_NOT_FOUND"

    def __init__(self, notification_id: str):
        self.notification_id = notification_id
        super().__init__(f"Notification not found: {notification_id}")


class MediaValidationError(PostboardError):
    """업로드된 미디어 파일 개수나 형식이 올바르지 않은 경우"""
    status_code = 400
    error_code = "VALIDATION_ERROR"


class MediaStorageError(PostboardError):
    """디스크에 미디어 파일을 쓰거나 지우는 중 I/O 오류가 발생한 경우"""
    status_code = 500
    error_code = "MEDIA_STORAGE_FAILED"
