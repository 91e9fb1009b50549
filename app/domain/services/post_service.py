from typing import Any
from app.domain.entities import (
    NOT_CREATED,
    NOT_FOUND,
    UNKNOWN_ERROR,
    CreatePostResult,
    GetPostResult,
    NewPost,
    Post,
    PostError,
)
from app.domain.ports import PostsGateway
from infra.logging_config import get_logger

POST_NOT_FOUND_MESSAGE = "Post not found!!!!!!!"
POST_NOT_CREATED_MESSAGE = "Post could not be created"
POST_NOT_CREATED_CODE = "1000"

logger = get_logger(__name__)

class PostService:
    """Resolvers behind the Query and Mutation fields.

    Each method makes at most one gateway call and maps the outcome to a
    single variant. Error handling differs per operation: ``get_posts`` has
    none, ``get_post_by_id`` maps downstream failures, and ``create_post``
    only guards against an empty body.
    """

    def __init__(self, gateway: PostsGateway):
        self._gateway = gateway

    async def get_posts(self) -> Any:
        return await self._gateway.list_posts()

    async def get_post_by_id(self, post_id: str) -> GetPostResult:
        result = await self._gateway.get_post(post_id)
        if result.ok:
            return Post.from_record(result.record)

        failure = result.error
        if failure.code == 404:
            logger.info("post_not_found", post_id=post_id)
            return PostError(kind=NOT_FOUND, message=POST_NOT_FOUND_MESSAGE, code=failure.code)

        logger.warning("post_lookup_failed", post_id=post_id, code=failure.code, error=failure.message)
        return PostError(kind=UNKNOWN_ERROR, message=failure.message, code=failure.code)

    async def create_post(self, title: str, body: str, user_id: Any) -> CreatePostResult:
        record = await self._gateway.create_post(NewPost(title=title, body=body, user_id=user_id))
        if not record:
            logger.warning("post_not_created", title=title, user_id=user_id)
            return PostError(kind=NOT_CREATED, message=POST_NOT_CREATED_MESSAGE, code=POST_NOT_CREATED_CODE)
        return Post.from_record(record)
