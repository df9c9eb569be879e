# postboard/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from typing import Optional
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
import firebase_admin
from firebase_admin import credentials

# - 설정
from postboard.core.config import config_by_name

# - API 블루프린트
from postboard.api.posts.routes import posts_bp
from postboard.api.comments.routes import comments_bp
from postboard.api.notifications.routes import notifications_bp
from postboard.api.media.routes import media_bp

# - 서비스 모듈
from postboard.services.media_storage_service import MediaStorageService
from postboard.services.notification_service import NotificationService
from postboard.services.stores import PostStore, UserLookup, NotificationStore
from postboard.services.firestore_service import (
    FirestorePostStore, FirestoreUserLookup, FirestoreNotificationStore
)
from postboard.api.posts.services import PostService
from postboard.api.comments.services import CommentService


def _init_firebase(app: Flask):
    if firebase_admin._apps:
        return
    cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
    if not cred_path or not os.path.exists(cred_path):
        raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
    firebase_admin.initialize_app(credentials.Certificate(cred_path))
    logging.info("Firebase app initialized successfully")


def create_app(config_name: Optional[str] = None,
               post_store: Optional[PostStore] = None,
               user_lookup: Optional[UserLookup] = None,
               notification_store: Optional[NotificationStore] = None):
    """
    Flask 애플리케이션 팩토리 함수.

    저장소를 인자로 넘기면 그대로 사용하고, 하나라도 비어 있으면
    Firebase를 초기화한 뒤 Firestore 구현체로 채웁니다.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 외부 저장소 초기화
    # =====================================================================================
    if post_store is None or user_lookup is None or notification_store is None:
        _init_firebase(app)
        post_store = post_store or FirestorePostStore()
        user_lookup = user_lookup or FirestoreUserLookup()
        notification_store = notification_store or FirestoreNotificationStore()

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    try:
        storage_instance = MediaStorageService()
        storage_instance.init_app(app)
        app.services['storage'] = storage_instance
        logging.info("Media storage service initialized successfully")
    except Exception as e:
        logging.error(f"Failed to initialize media storage service: {e}")
        raise

    app.services['notifications'] = NotificationService(notification_store=notification_store)
    app.services['posts'] = PostService(
        post_store=post_store,
        user_lookup=user_lookup,
        notification_service=app.services['notifications'],
        storage_service=app.services['storage']
    )
    app.services['comments'] = CommentService(
        post_store=post_store,
        user_lookup=user_lookup,
        notification_service=app.services['notifications']
    )

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(posts_bp, url_prefix='/posts')
    app.register_blueprint(comments_bp, url_prefix='/posts')
    app.register_blueprint(notifications_bp, url_prefix='/notifications')
    app.register_blueprint(media_bp, url_prefix='/media')

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(RequestEntityTooLarge)
    def handle_payload_too_large(err):
        response = {"error_code": "PAYLOAD_TOO_LARGE", "message": "File size exceeds maximum limit!"}
        return jsonify(response), 413

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        # 404, 405 등 Flask가 만든 HTTP 오류는 그대로 응답
        return err

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "An unexpected server error occurred."}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
