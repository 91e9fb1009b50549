from abc import ABC, abstractmethod
from typing import Optional
from app.domain.entities import DownstreamResult, NewPost, Record

class PostsGateway(ABC):
    @abstractmethod
    async def list_posts(self) -> Record:
        ...

    @abstractmethod
    async def get_post(self, post_id: str) -> DownstreamResult:
        ...

    @abstractmethod
    async def create_post(self, new_post: NewPost) -> Optional[Record]:
        ...
