# postboard/api/media/routes.py
from flask import Blueprint, send_from_directory, current_app

# 게시글의 '/media/<파일명>' URL을 업로드 디렉터리의 파일로 연결하는 블루프린트
media_bp = Blueprint('media_bp', __name__)

@media_bp.route('/<path:filename>', methods=['GET'])
def get_media(filename: str):
    """저장된 미디어 파일을 그대로 내려줍니다. 없으면 404."""
    storage_service = current_app.services['storage']
    return send_from_directory(storage_service.upload_dir, filename)
