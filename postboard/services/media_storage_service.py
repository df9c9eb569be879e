# postboard/services/media_storage_service.py
import os
import re
import time
import uuid
import logging
from typing import Optional
from flask import Flask
from werkzeug.datastructures import FileStorage

from postboard.core.exceptions import MediaStorageError

MEDIA_URL_PREFIX = "/media/"

# 게시글에 첨부할 수 있는 MIME 타입 (전체 문자열 일치)
ALLOWED_CONTENT_TYPE_PATTERN = re.compile(r"image/(jpeg|png|jpg)|video/mp4")


class MediaStorageService:
    """
    로컬 디스크에 게시글 미디어 파일을 저장/삭제하는 서비스 클래스입니다.
    저장된 파일은 '/media/<파일명>' 형태의 URL로 게시글에서 참조됩니다.
    """

    def __init__(self, upload_dir: Optional[str] = None):
        """
        업로드 디렉터리를 직접 지정하거나, init_app을 통해 앱 설정에서 주입받습니다.
        """
        self.upload_dir = None
        if upload_dir:
            self._set_upload_dir(upload_dir)

    def init_app(self, app: Flask):
        """
        Flask 앱 초기화 과정에서 호출되어 업로드 디렉터리를 설정합니다.

        :param app: Flask 애플리케이션 객체
        """
        upload_dir = app.config.get('MEDIA_UPLOAD_DIR')
        if not upload_dir:
            raise ValueError("MEDIA_UPLOAD_DIR 설정이 .env 또는 설정 파일에 필요합니다.")
        self._set_upload_dir(upload_dir)
        logging.info(f"MediaStorageService: 업로드 디렉터리 '{self.upload_dir}'가 설정되었습니다.")

    def _set_upload_dir(self, upload_dir: str):
        # 상대 경로는 프로세스 작업 디렉터리 기준
        self.upload_dir = os.path.join(os.getcwd(), upload_dir)

    def _ensure_upload_dir(self) -> str:
        if not self.upload_dir:
            raise RuntimeError("MediaStorageService가 초기화되지 않았습니다. init_app을 먼저 호출해주세요.")
        os.makedirs(self.upload_dir, exist_ok=True)
        return self.upload_dir

    @staticmethod
    def is_allowed(file: FileStorage) -> bool:
        """선언된 content type이 허용 목록과 일치하는지 확인합니다."""
        return ALLOWED_CONTENT_TYPE_PATTERN.fullmatch(file.content_type or "") is not None

    @staticmethod
    def generate_filename(original_filename: Optional[str]) -> str:
        """'<epoch 밀리초>_<uuid4>.<원본 확장자>' 형식의 고유 파일명을 만듭니다."""
        # 경로 구분자 앞의 점은 확장자로 보지 않음
        filename = os.path.basename(original_filename or '')
        extension = filename.split('.')[-1] if '.' in filename else ''
        return f"{int(time.time() * 1000)}_{uuid.uuid4()}.{extension}"

    def store(self, file: FileStorage) -> str:
        """
        업로드된 파일을 디스크에 저장하고 게시글에서 참조할 URL을 반환합니다.

        :param file: multipart 요청에서 받은 파일
        :return: '/media/<파일명>' 형식의 URL
        """
        unique_filename = self.generate_filename(file.filename)
        try:
            file_path = os.path.join(self._ensure_upload_dir(), unique_filename)
            file.save(file_path)
        except OSError as e:
            logging.error(f"미디어 파일 저장 실패 (filename: {file.filename}): {e}", exc_info=True)
            raise MediaStorageError("Failed to store media file.") from e

        logging.info(f"미디어 파일 저장 완료: {unique_filename}")
        return MEDIA_URL_PREFIX + unique_filename

    def path_for(self, media_url: str) -> str:
        """미디어 URL을 업로드 디렉터리 내부의 실제 경로로 변환합니다."""
        if not self.upload_dir:
            raise RuntimeError("MediaStorageService가 초기화되지 않았습니다. init_app을 먼저 호출해주세요.")
        return os.path.join(self.upload_dir, media_url.replace(MEDIA_URL_PREFIX, "", 1))

    def delete(self, media_url: str) -> bool:
        """
        미디어 URL이 가리키는 파일을 삭제합니다. 파일이 없으면 아무 일도 하지 않습니다.

        :return: 실제로 파일을 지웠으면 True
        :raises OSError: 파일 시스템 오류
        """
        file_path = self.path_for(media_url)
        try:
            os.remove(file_path)
        except FileNotFoundError:
            return False
        logging.info(f"미디어 파일 삭제 완료: {media_url}")
        return True
