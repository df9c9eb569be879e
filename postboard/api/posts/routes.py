# postboard/api/posts/routes.py
import logging
from flask import Blueprint, request, jsonify, Response, current_app
from marshmallow import ValidationError

from postboard.api.posts.schemas import (
    PostCreateSchema, PostUpdateSchema, MediaDeleteSchema, UserQuerySchema, PostResponseSchema
)
from postboard.core.exceptions import PostboardError, PostNotFoundError


posts_bp = Blueprint('posts_bp', __name__)


def _uploaded_files(field_name: str):
    """multipart 요청에서 실제로 파일이 선택된 항목만 추려냅니다."""
    return [f for f in request.files.getlist(field_name) if f and f.filename]


@posts_bp.route('', methods=['POST'])
def create_post():
    """
    새로운 게시글을 생성합니다.
    - multipart 폼: userID, title, description, category, mediaFiles(1~3개)
    - 성공 시, 생성된 게시글 정보를 201 Created 상태 코드와 함께 반환합니다.
    """
    post_service = current_app.services['posts']
    try:
        data = PostCreateSchema().load(request.form)
        new_post = post_service.create_post(
            data['user_id'], data['title'], data['description'], data['category'],
            _uploaded_files('mediaFiles')
        )
        return jsonify(PostResponseSchema().dump(new_post)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PostboardError as e:
        return jsonify(e.to_dict()), e.status_code


@posts_bp.route('', methods=['GET'])
def get_posts():
    """전체 게시글 목록을 조회합니다."""
    post_service = current_app.services['posts']
    try:
        posts = post_service.get_all_posts()
        return jsonify(PostResponseSchema(many=True).dump(posts)), 200
    except Exception as e:
        logging.error(f"게시글 목록 조회 중 오류 발생: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to fetch posts."}), 500


@posts_bp.route('/user/<string:user_id>', methods=['GET'])
def get_user_posts(user_id: str):
    """특정 사용자가 작성한 게시글 목록을 조회합니다. 없으면 빈 목록을 반환합니다."""
    post_service = current_app.services['posts']
    try:
        posts = post_service.get_posts_by_user(user_id)
        return jsonify(PostResponseSchema(many=True).dump(posts)), 200
    except Exception as e:
        logging.error(f"사용자 게시물 목록 조회 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Failed to fetch posts."}), 500


@posts_bp.route('/<string:post_id>', methods=['GET'])
def get_post(post_id: str):
    """특정 게시글의 상세 정보를 조회합니다."""
    post_service = current_app.services['posts']
    try:
        post = post_service.get_post_by_id(post_id)
        return jsonify(PostResponseSchema().dump(post)), 200
    except PostNotFoundError as e:
        return jsonify(e.to_dict()), 404


@posts_bp.route('/<string:post_id>', methods=['DELETE'])
def delete_post(post_id: str):
    """특정 게시글과 첨부된 미디어 파일을 삭제합니다."""
    post_service = current_app.services['posts']
    try:
        message = post_service.delete_post(post_id)
        return jsonify({"message": message}), 200
    except PostboardError as e:
        return jsonify(e.to_dict()), e.status_code


@posts_bp.route('/<string:post_id>', methods=['PUT'])
def update_post(post_id: str):
    """
    게시글의 제목/설명/카테고리를 수정하고, newMediaFiles가 있으면 미디어 목록에 추가합니다.
    """
    post_service = current_app.services['posts']
    try:
        data = PostUpdateSchema().load(request.form)
        message = post_service.update_post(
            post_id, data['title'], data['description'], data['category'],
            _uploaded_files('newMediaFiles')
        )
        return jsonify({"message": message}), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PostboardError as e:
        return jsonify(e.to_dict()), e.status_code


@posts_bp.route('/<string:post_id>/media', methods=['DELETE'])
def delete_media(post_id: str):
    """게시글에서 미디어 하나를 제거합니다. 요청 본문: {"mediaUrl": "..."}"""
    post_service = current_app.services['posts']
    try:
        data = MediaDeleteSchema().load(request.get_json(silent=True) or {})
        message = post_service.delete_media(post_id, data['media_url'])
        return jsonify({"message": message}), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PostboardError as e:
        return jsonify(e.to_dict()), e.status_code


@posts_bp.route('/<string:post_id>/like', methods=['PUT'])
def toggle_post_like(post_id: str):
    """
    게시글의 좋아요를 누르거나 취소합니다.
    게시글이 없으면 본문 없이 404를 반환합니다.
    """
    post_service = current_app.services['posts']
    try:
        data = UserQuerySchema().load(request.args)
        post = post_service.toggle_post_like(post_id, data['user_id'])
        return jsonify(PostResponseSchema().dump(post)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PostNotFoundError:
        return Response(status=404)
