"""Chain of responsibility over async request handlers vs. one processor with inline checks."""

from __future__ import annotations

import random
from typing import Literal

from bench_harness import BenchmarkSuite, SuiteContext

from .common import Request, RequestHandler, Response, User, ok_response
from .rate_limit import RateLimiter

DEFAULT_ITERATIONS = 10_000
ADMIN_PATHS = ("/admin", "/settings")
RATE_LIMITED_USER_ID = 1

RequestKind = Literal["success", "auth-error", "rate-limit", "forbidden", "validation-error"]
REQUEST_KINDS: tuple[RequestKind, ...] = (
    "success",
    "auth-error",
    "rate-limit",
    "forbidden",
    "validation-error",
)


def unauthorized() -> Response:
    return Response(status=401, body="Unauthorized")


def too_many_requests() -> Response:
    return Response(status=429, body="Too Many Requests")


def forbidden() -> Response:
    return Response(status=403, body="Forbidden")


def bad_request(reason: str) -> Response:
    return Response(status=400, body=f"Bad Request: {reason}")


def _is_admin_only(request: Request) -> bool:
    return request.path.startswith(ADMIN_PATHS) and request.user.role != "admin"


def _body_error(request: Request) -> Response | None:
    if request.method in ("POST", "PUT"):
        if not request.body:
            return bad_request("Body is required")
        if not isinstance(request.body, dict):
            return bad_request("Invalid body format")
    return None


class AuthenticationHandler(RequestHandler):
    async def handle(self, request: Request) -> Response:
        if not request.headers.get("authorization"):
            return unauthorized()
        return await self.handle_next(request)


class RateLimitHandler(RequestHandler):
    def __init__(self, limiter: RateLimiter | None = None):
        super().__init__()
        self.limiter = limiter or RateLimiter()

    async def handle(self, request: Request) -> Response:
        if not self.limiter.allow(request.user.id):
            return too_many_requests()
        return await self.handle_next(request)


class AuthorizationHandler(RequestHandler):
    async def handle(self, request: Request) -> Response:
        if _is_admin_only(request):
            return forbidden()
        return await self.handle_next(request)


class ValidationHandler(RequestHandler):
    async def handle(self, request: Request) -> Response:
        error = _body_error(request)
        if error is not None:
            return error
        return await self.handle_next(request)


def build_chain(limiter: RateLimiter | None = None) -> RequestHandler:
    """Authentication -> rate limit -> authorization -> validation."""
    head = AuthenticationHandler()
    head.set_next(RateLimitHandler(limiter)).set_next(AuthorizationHandler()).set_next(
        ValidationHandler()
    )
    return head


class TraditionalRequestProcessor:
    """The same checks as the chain, in one method."""

    def __init__(self, limiter: RateLimiter | None = None):
        self.limiter = limiter or RateLimiter()

    async def process_request(self, request: Request) -> Response:
        if not request.headers.get("authorization"):
            return unauthorized()

        if not self.limiter.allow(request.user.id):
            return too_many_requests()

        if _is_admin_only(request):
            return forbidden()

        error = _body_error(request)
        if error is not None:
            return error

        return ok_response()


def generate_test_request(kind: RequestKind, rng: random.Random) -> Request:
    request = Request(
        user=User(rng.randrange(1_000), "Test User", "test@example.com", "user"),
        path="/api/data",
        method="GET",
        headers={"authorization": "Bearer token123"},
    )
    if kind == "auth-error":
        del request.headers["authorization"]
    elif kind == "rate-limit":
        request.user.id = RATE_LIMITED_USER_ID
    elif kind == "forbidden":
        request.path = "/admin/settings"
    elif kind == "validation-error":
        request.method = "POST"
        request.body = "invalid-body"
    return request


class ChainOfResponsibilitySuite(BenchmarkSuite):
    name = "chain"
    description = "Chain of Responsibility Pattern Benchmark"

    CASES = (
        ("Success", "success"),
        ("Auth Error", "auth-error"),
        ("Rate Limit", "rate-limit"),
        ("Forbidden", "forbidden"),
        ("Validation Error", "validation-error"),
    )

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        self.iterations = iterations

    def setup(self, context: SuiteContext) -> None:
        self.chain_limiter = RateLimiter()
        self.traditional_limiter = RateLimiter()
        self.chain = build_chain(self.chain_limiter)
        self.processor = TraditionalRequestProcessor(self.traditional_limiter)

    def execute(self, context: SuiteContext) -> None:
        rng = context.rng
        for case_label, kind in self.CASES:
            print(f"\n=== {case_label} Case Benchmarks ===")
            context.measure(
                f"Request Processing (Chain of Responsibility) - {case_label}",
                self.iterations,
                lambda kind=kind: self.chain.handle(generate_test_request(kind, rng)),
                group=case_label,
            )
            context.measure(
                f"Request Processing (Traditional) - {case_label}",
                self.iterations,
                lambda kind=kind: self.processor.process_request(generate_test_request(kind, rng)),
                group=case_label,
            )

        print("\n=== Mixed Case Benchmarks ===")
        context.measure(
            "Request Processing (Chain of Responsibility) - Mixed",
            self.iterations,
            lambda: self.chain.handle(generate_test_request(rng.choice(REQUEST_KINDS), rng)),
            group="Mixed",
        )
        context.measure(
            "Request Processing (Traditional) - Mixed",
            self.iterations,
            lambda: self.processor.process_request(
                generate_test_request(rng.choice(REQUEST_KINDS), rng)
            ),
            group="Mixed",
        )

    def teardown(self, context: SuiteContext) -> None:
        self.chain_limiter.cancel_all()
        self.traditional_limiter.cancel_all()
