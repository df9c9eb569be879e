# postboard/api/comments/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

class CommentRequestSchema(Schema):
    """
    POST /posts/{post_id}/comment, PUT /posts/{post_id}/comment/{comment_id}
    댓글 작성/수정 요청 본문의 형식을 정의하고 유효성을 검사합니다.
    """
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Str(required=True, data_key="userID", validate=validate.Length(min=1))
    content = fields.Str(required=True)
