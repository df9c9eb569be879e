# postboard/api/notifications/schemas.py
from marshmallow import Schema, fields

class NotificationResponseSchema(Schema):
    """알림 정보 응답 형식."""
    notification_id = fields.Str(data_key="id")
    user_id = fields.Str(data_key="userID")
    message = fields.Str()
    read = fields.Bool()
    created_at = fields.Str(data_key="createdAt")
