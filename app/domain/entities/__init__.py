from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

ErrorKind = Literal["NotCreated", "NotFound", "UnknownError"]

NOT_CREATED: ErrorKind = "NotCreated"
NOT_FOUND: ErrorKind = "NotFound"
UNKNOWN_ERROR: ErrorKind = "UnknownError"

Record = Any

@dataclass(frozen=True)
class Post:
    id: Any
    title: Optional[str]
    body: Optional[str]
    user_id: Any

    @classmethod
    def from_record(cls, record: Record) -> "Post":
        record = record or {}
        return cls(
            id=record.get("id"),
            title=record.get("title"),
            body=record.get("body"),
            user_id=record.get("userId"),
        )

@dataclass(frozen=True)
class NewPost:
    title: str
    body: str
    user_id: Any

    def as_payload(self) -> dict:
        return {"title": self.title, "body": self.body, "userId": self.user_id}

@dataclass(frozen=True)
class PostError:
    kind: ErrorKind
    message: str
    code: Union[int, str, None] = None

@dataclass(frozen=True)
class DownstreamError:
    message: str
    code: Optional[int] = None

@dataclass(frozen=True)
class DownstreamResult:
    record: Record = None
    error: Optional[DownstreamError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, record: Record) -> "DownstreamResult":
        return cls(record=record)

    @classmethod
    def failure(cls, error: DownstreamError) -> "DownstreamResult":
        return cls(error=error)

GetPostResult = Union[Post, PostError]
CreatePostResult = Union[Post, PostError]
