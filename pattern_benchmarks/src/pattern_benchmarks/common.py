"""Domain types shared by the pattern benchmark suites."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal

UserRole = Literal["admin", "user"]
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


class UserNotFoundError(LookupError):
    """Raised when a user id is not present in a store."""

    def __init__(self, user_id: int):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


@dataclass
class User:
    id: int
    name: str
    email: str
    role: UserRole = "user"


@dataclass
class Request:
    user: User
    path: str
    method: HttpMethod = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


@dataclass
class Response:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


def ok_response() -> Response:
    return Response(status=200, body="OK")


class RequestHandler(ABC):
    """Link in a chain of responsibility over requests."""

    def __init__(self):
        self._next_handler: RequestHandler | None = None

    def set_next(self, handler: RequestHandler) -> RequestHandler:
        """Attach the next handler and return it, so calls can be chained."""
        self._next_handler = handler
        return handler

    async def handle_next(self, request: Request) -> Response:
        if self._next_handler is not None:
            return await self._next_handler.handle(request)
        return ok_response()

    @abstractmethod
    async def handle(self, request: Request) -> Response:
        """Handle the request or pass it on with handle_next()."""
