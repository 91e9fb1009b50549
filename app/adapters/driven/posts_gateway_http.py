# app/adapters/driven/posts_gateway_http.py
import json
from dataclasses import dataclass, field
from typing import Optional
import httpx
from infra.settings import settings
from infra.logging_config import get_logger
from app.domain.entities import DownstreamError, DownstreamResult, NewPost, Record
from app.domain.ports import PostsGateway

JSON_HEADERS = {"Content-type": "application/json; charset=UTF-8"}

logger = get_logger(__name__)

@dataclass
class HttpPostsGateway(PostsGateway):
    base_url: str = field(default_factory=lambda: settings.POSTS_API_URL)
    transport: Optional[httpx.AsyncBaseTransport] = None

    def _client(self) -> httpx.AsyncClient:
        # one client per call; no timeout, like the fetch API
        return httpx.AsyncClient(transport=self.transport, timeout=None, follow_redirects=True)

    def _post_url(self, post_id: str) -> str:
        return f"{self.base_url.rstrip('/')}/{post_id}"

    async def list_posts(self) -> Record:
        logger.debug("downstream_request", method="GET", url=self.base_url)
        async with self._client() as client:
            r = await client.get(self.base_url)
        return r.json()

    async def get_post(self, post_id: str) -> DownstreamResult:
        url = self._post_url(post_id)
        logger.debug("downstream_request", method="GET", url=url)
        try:
            async with self._client() as client:
                r = await client.get(url)
            if not r.is_success:
                logger.warning("downstream_status_error", url=url, status=r.status_code)
                return DownstreamResult.failure(DownstreamError("API error", r.status_code))
            return DownstreamResult.success(r.json())
        except Exception as e:
            logger.warning("downstream_transport_error", url=url, error=str(e))
            return DownstreamResult.failure(DownstreamError(str(e)))

    async def create_post(self, new_post: NewPost) -> Optional[Record]:
        logger.debug("downstream_request", method="POST", url=self.base_url)
        async with self._client() as client:
            r = await client.post(
                self.base_url,
                content=json.dumps(new_post.as_payload()),
                headers=JSON_HEADERS,
            )
        if not r.content.strip():
            return None
        return r.json()
