from typing import Annotated, List, Optional, Union
import strawberry
from strawberry.fastapi import GraphQLRouter
from app.domain import entities
from app.domain.services.post_service import PostService


@strawberry.type(name="Post")
class PostType:
    id: strawberry.ID
    title: str
    body: str
    user_id: strawberry.ID

    @classmethod
    def from_entity(cls, post: entities.Post) -> "PostType":
        return cls(id=post.id, title=post.title, body=post.body, user_id=post.user_id)


@strawberry.interface(name="PostError")
class PostErrorType:
    message: str
    # String! on the wire; ints (e.g. 404) rely on the default String coercion
    code: str


@strawberry.type
class NotCreated(PostErrorType):
    pass


@strawberry.type
class NotFound(PostErrorType):
    pass


@strawberry.type
class UnknownError(PostErrorType):
    pass


GetPostResponse = Annotated[Union[PostType, NotFound, UnknownError], strawberry.union("GetPostResponse")]
CreatePostResponse = Annotated[Union[PostType, NotCreated], strawberry.union("CreatePostResponse")]

ERROR_TYPES = {
    entities.NOT_CREATED: NotCreated,
    entities.NOT_FOUND: NotFound,
    entities.UNKNOWN_ERROR: UnknownError,
}


def to_graphql(result):
    """Map a domain outcome onto its union member."""
    if isinstance(result, entities.Post):
        return PostType.from_entity(result)
    if isinstance(result, entities.PostError):
        return ERROR_TYPES[result.kind](message=result.message, code=result.code)
    raise TypeError(f"Unexpected resolver result: {result!r}")


def build_schema(service: PostService) -> strawberry.Schema:
    @strawberry.type
    class Query:
        @strawberry.field
        async def get_posts(self) -> Optional[List[Optional[PostType]]]:
            records = await service.get_posts()
            if records is None:
                return None
            return [None if r is None else PostType.from_entity(entities.Post.from_record(r)) for r in records]

        @strawberry.field
        async def get_post_by_id(self, id: strawberry.ID) -> Optional[GetPostResponse]:
            return to_graphql(await service.get_post_by_id(id))

    @strawberry.type
    class Mutation:
        @strawberry.mutation
        async def create_post(self, title: str, body: str, user_id: strawberry.ID) -> Optional[CreatePostResponse]:
            return to_graphql(await service.create_post(title=title, body=body, user_id=user_id))

    return strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(service: PostService, graphiql: bool = True) -> GraphQLRouter:
    return GraphQLRouter(
        build_schema(service),
        path="/",
        graphql_ide="graphiql" if graphiql else None,
    )
