# postboard/api/posts/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

# --- 재사용을 위한 중첩 스키마 ---
class CommentResponseSchema(Schema):
    """게시물 응답에 포함될 댓글 정보 스키마."""
    comment_id = fields.Str(data_key="id")
    user_id = fields.Str(data_key="userID")
    user_full_name = fields.Str(data_key="userFullName")
    content = fields.Str()

# --- API 요청/응답 스키마 ---

class PostCreateSchema(Schema):
    """POST /posts multipart 폼 필드의 유효성을 검사합니다."""
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Str(required=True, data_key="userID", validate=validate.Length(min=1))
    title = fields.Str(required=True)
    description = fields.Str(required=True)
    category = fields.Str(required=True)

class PostUpdateSchema(Schema):
    """PUT /posts/{post_id} multipart 폼 필드의 유효성을 검사합니다."""
    class Meta:
        unknown = EXCLUDE

    title = fields.Str(required=True)
    description = fields.Str(required=True)
    category = fields.Str(required=True)

class MediaDeleteSchema(Schema):
    """DELETE /posts/{post_id}/media 요청 본문."""
    class Meta:
        unknown = EXCLUDE

    media_url = fields.Str(required=True, data_key="mediaUrl")

class UserQuerySchema(Schema):
    """?userID= 쿼리 파라미터를 받는 API용 스키마."""
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Str(required=True, data_key="userID", validate=validate.Length(min=1))

class PostResponseSchema(Schema):
    """게시글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    post_id = fields.Str(data_key="id")
    user_id = fields.Str(data_key="userID")
    title = fields.Str()
    description = fields.Str()
    category = fields.Str()
    media = fields.List(fields.Str())
    likes = fields.Dict(keys=fields.Str(), values=fields.Bool())
    comments = fields.List(fields.Nested(CommentResponseSchema))
