from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from infra.settings import settings
from infra.logging_config import configure_logging, get_logger
from app.domain.services.post_service import PostService
from app.adapters.driven.posts_gateway_http import HttpPostsGateway
from app.adapters.driver.controllers.graphql_controller import create_graphql_router

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Running a GraphQL API server at http://localhost:{settings.PORT}/")
    yield

def create_app(service: Optional[PostService] = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    if service is None:
        service = PostService(gateway=HttpPostsGateway(base_url=settings.POSTS_API_URL))
    app = FastAPI(title="Posts GraphQL Gateway", lifespan=lifespan)
    app.include_router(create_graphql_router(service, graphiql=settings.GRAPHIQL), tags=["graphql"])
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
