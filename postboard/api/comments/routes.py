# postboard/api/comments/routes.py
from flask import Blueprint, request, jsonify, Response, current_app
from marshmallow import ValidationError

from postboard.api.comments.schemas import CommentRequestSchema
from postboard.api.posts.schemas import PostResponseSchema, UserQuerySchema
from postboard.core.exceptions import PostNotFoundError


# 댓글은 게시글 문서에 포함되므로 '/posts' 접두사 아래에 등록됩니다.
comments_bp = Blueprint('comments_bp', __name__)

@comments_bp.route('/<string:post_id>/comment', methods=['POST'])
def add_comment(post_id: str):
    """
    특정 게시글에 새로운 댓글을 작성합니다.
    - 성공 시, 댓글이 추가된 게시글 전체를 반환합니다.
    - 작성자가 게시글 주인이 아니면 게시글 주인에게 알림이 생성됩니다.
    """
    comment_service = current_app.services['comments']
    try:
        data = CommentRequestSchema().load(request.get_json(silent=True) or {})
        post = comment_service.add_comment(post_id, data['user_id'], data['content'])
        return jsonify(PostResponseSchema().dump(post)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PostNotFoundError:
        return Response(status=404)


@comments_bp.route('/<string:post_id>/comment/<string:comment_id>', methods=['PUT'])
def update_comment(post_id: str, comment_id: str):
    """댓글 내용을 수정합니다. (작성자 본인의 댓글만 변경됨)"""
    comment_service = current_app.services['comments']
    try:
        data = CommentRequestSchema().load(request.get_json(silent=True) or {})
        post = comment_service.update_comment(post_id, comment_id, data['user_id'], data['content'])
        return jsonify(PostResponseSchema().dump(post)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PostNotFoundError:
        return Response(status=404)


@comments_bp.route('/<string:post_id>/comment/<string:comment_id>', methods=['DELETE'])
def delete_comment(post_id: str, comment_id: str):
    """댓글을 삭제합니다. (댓글 작성자 또는 게시글 작성자만 가능)"""
    comment_service = current_app.services['comments']
    try:
        data = UserQuerySchema().load(request.args)
        post = comment_service.delete_comment(post_id, comment_id, data['user_id'])
        return jsonify(PostResponseSchema().dump(post)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PostNotFoundError:
        return Response(status=404)
