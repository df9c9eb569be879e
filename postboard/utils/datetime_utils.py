# postboard/utils/datetime_utils.py
"""
알림 생성 시각 처리를 위한 유틸리티 모듈

알림의 created_at은 timezone 정보 없이 서버 로컬 시간 문자열
('YYYY-MM-DD HH:MM:SS')로 저장됩니다. 이 모듈은 해당 문자열의
생성과 파싱을 한곳에서 담당합니다.
"""

import logging
from datetime import datetime
from typing import Optional
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

class DateTimeUtils:
    """알림 타임스탬프 처리를 위한 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 로컬 시간을 timezone-naive datetime으로 반환"""
        return datetime.now()

    @staticmethod
    def to_timestamp_string(dt: datetime) -> str:
        """datetime 객체를 'YYYY-MM-DD HH:MM:SS' 문자열로 변환"""
        try:
            return dt.strftime(TIMESTAMP_FORMAT)
        except Exception as e:
            logger.error(f"타임스탬프 문자열 변환 실패: {dt} - {e}")
            raise ValueError(f"datetime 객체를 문자열로 변환할 수 없습니다: {dt}")

    @staticmethod
    def now_string() -> str:
        """현재 로컬 시간을 알림 저장 형식 문자열로 반환"""
        return DateTimeUtils.to_timestamp_string(DateTimeUtils.now())

    @staticmethod
    def parse_timestamp(value: str) -> datetime:
        """
        저장된 타임스탬프 문자열을 datetime으로 파싱

        지원 포맷:
        - 2024-01-15 10:30:00
        - 2024-01-15T10:30:00
        """
        try:
            if not value:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")
            return dateutil_parser.parse(value)
        except Exception as e:
            logger.error(f"타임스탬프 파싱 실패: {value} - {e}")
            raise ValueError(f"잘못된 타임스탬프 형식입니다: {value}")

    @staticmethod
    def sort_key(value: Optional[str]) -> datetime:
        """정렬용 키. 파싱할 수 없는 값은 가장 오래된 것으로 취급합니다."""
        try:
            return DateTimeUtils.parse_timestamp(value)
        except ValueError:
            return datetime.min
