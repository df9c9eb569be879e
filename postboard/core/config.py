# postboard/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 업로드된 미디어 파일이 저장될 디렉터리입니다. 프로세스 작업 디렉터리 기준 상대 경로로 해석됩니다.
    MEDIA_UPLOAD_DIR = os.getenv('MEDIA_UPLOAD_DIR', 'uploads/media')
    # 요청 본문 최대 크기(바이트). 초과 시 Flask가 413 Payload Too Large를 발생시킵니다.
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', 50 * 1024 * 1024))
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False

class ProductionConfig(Config):
    """운영 환경을 위한 설정 클래스입니다."""
    DEBUG = False

# FLASK_ENV 값에 따라 create_app에서 적절한 설정을 선택하는 데 사용됩니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
