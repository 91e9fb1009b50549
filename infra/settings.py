import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass(frozen=True)
class Settings:
    # Upstream
    POSTS_API_URL: str = os.getenv("POSTS_API_URL", "https://jsonplaceholder.typicode.com/posts")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "4000"))
    GRAPHIQL: bool = os.getenv("GRAPHIQL", "true").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "console").lower()

settings = Settings()
