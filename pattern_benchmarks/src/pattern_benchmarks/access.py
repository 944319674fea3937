"""Single-class access manager: authentication, rate limiting, permissions and input checks inline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import random
from typing import Any, Literal

from bench_harness import BenchmarkSuite, SuiteContext

from .common import User
from .rate_limit import RateLimiter

DEFAULT_ITERATIONS = 10_000

Action = Literal["read", "write", "delete"]
AccessRequestKind = Literal[
    "success", "auth-error", "rate-limit", "permission-error", "validation-error"
]
ACCESS_REQUEST_KINDS: tuple[AccessRequestKind, ...] = (
    "success",
    "auth-error",
    "rate-limit",
    "permission-error",
    "validation-error",
)


@dataclass
class AccessRequest:
    user: User
    resource: str
    action: Action
    payload: Any = None


@dataclass
class AccessResponse:
    success: bool
    message: str
    data: dict[str, Any] = field(default_factory=dict)


class UserAccessManager:
    def __init__(self, limiter: RateLimiter | None = None):
        # No window: counts only grow for the lifetime of the manager.
        self.limiter = limiter or RateLimiter(window_s=None)

    def process_request(self, request: AccessRequest) -> AccessResponse:
        if not self.is_authenticated(request.user):
            return AccessResponse(success=False, message="User is not authenticated")
        if not self.limiter.allow(request.user.id):
            return AccessResponse(success=False, message="Rate limit exceeded")
        if not self.has_permission(request.user, request.resource, request.action):
            return AccessResponse(success=False, message="Permission denied")
        if not self.validate_input(request):
            return AccessResponse(success=False, message="Invalid input")
        return self.execute_action(request)

    @staticmethod
    def is_authenticated(user: User) -> bool:
        return user.id > 0 and "@" in user.email

    @staticmethod
    def has_permission(user: User, resource: str, action: Action) -> bool:
        if user.role == "admin":
            return True
        if resource.startswith("/admin"):
            return False
        return action != "write"

    @staticmethod
    def validate_input(request: AccessRequest) -> bool:
        if request.action == "write" and not request.payload:
            return False
        return len(request.resource) > 0

    @staticmethod
    def execute_action(request: AccessRequest) -> AccessResponse:
        return AccessResponse(
            success=True,
            message="Action executed successfully",
            data={"timestamp": datetime.now(timezone.utc).isoformat()},
        )


def generate_access_request(kind: AccessRequestKind) -> AccessRequest:
    request = AccessRequest(
        user=User(1, "Test User", "test@example.com", "user"),
        resource="/api/data",
        action="read",
    )
    if kind == "auth-error":
        request.user = User(-1, "Invalid User", "invalid", "user")
    elif kind == "rate-limit":
        request.user = User(2, "Limited User", "limited@example.com", "user")
    elif kind == "permission-error":
        request.resource = "/admin/settings"
        request.action = "write"
    elif kind == "validation-error":
        request.action = "write"
        request.payload = None
    return request


class AccessManagerSuite(BenchmarkSuite):
    name = "access"
    description = "Traditional Approach Benchmark"

    CASES = (
        ("Successful Request Processing", "success"),
        ("Authentication Error Processing", "auth-error"),
        ("Rate Limit Processing", "rate-limit"),
        ("Permission Error Processing", "permission-error"),
        ("Validation Error Processing", "validation-error"),
    )

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        self.iterations = iterations

    def setup(self, context: SuiteContext) -> None:
        self.manager = UserAccessManager()

    def execute(self, context: SuiteContext) -> None:
        manager = self.manager
        for label, kind in self.CASES:
            context.measure(
                label,
                self.iterations,
                lambda kind=kind: manager.process_request(generate_access_request(kind)),
            )

        rng: random.Random = context.rng
        context.measure(
            "Mixed Request Processing",
            self.iterations,
            lambda: manager.process_request(
                generate_access_request(rng.choice(ACCESS_REQUEST_KINDS))
            ),
        )
