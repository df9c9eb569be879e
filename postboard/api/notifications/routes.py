# postboard/api/notifications/routes.py
from flask import Blueprint, jsonify, Response, current_app

from postboard.api.notifications.schemas import NotificationResponseSchema
from postboard.core.exceptions import NotificationNotFoundError


notifications_bp = Blueprint('notifications_bp', __name__)

@notifications_bp.route('/<string:user_id>', methods=['GET'])
def get_notifications(user_id: str):
    """사용자가 받은 알림 목록을 최신순으로 조회합니다."""
    notification_service = current_app.services['notifications']
    notifications = notification_service.get_notifications(user_id)
    return jsonify(NotificationResponseSchema(many=True).dump(notifications)), 200


@notifications_bp.route('/<string:notification_id>/markAsRead', methods=['PUT'])
def mark_as_read(notification_id: str):
    """알림을 읽음 처리합니다."""
    notification_service = current_app.services['notifications']
    try:
        notification = notification_service.mark_as_read(notification_id)
        return jsonify(NotificationResponseSchema().dump(notification)), 200
    except NotificationNotFoundError as e:
        return jsonify(e.to_dict()), 404


@notifications_bp.route('/<string:notification_id>', methods=['DELETE'])
def delete_notification(notification_id: str):
    """알림을 삭제합니다."""
    notification_service = current_app.services['notifications']
    try:
        notification_service.delete_notification(notification_id)
        return Response(status=204)
    except NotificationNotFoundError as e:
        return jsonify(e.to_dict()), 404
