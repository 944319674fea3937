"""Result values vs. exceptions for reporting user-service failures."""

from __future__ import annotations

from dataclasses import dataclass
import itertools
import random
from typing import Generic, TypeVar, Union

from bench_harness import BenchmarkSuite, SuiteContext

from .common import UserNotFoundError

DEFAULT_ITERATIONS = 10_000
SUCCESS_RATIO = 0.8
MISSING_USER_ID = 999_999

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: str


Result = Union[Success[T], Failure]


@dataclass
class Member:
    id: int
    name: str
    email: str
    age: int


class UnexpectedOutcomeError(RuntimeError):
    """A benchmark case produced the opposite outcome of the one it measures."""


class DuplicateEmailError(ValueError):
    pass


def _validation_error(name: str, email: str, age: int) -> str | None:
    if not name or len(name.strip()) < 2:
        return "Name must be at least 2 characters long"
    if not email or "@" not in email:
        return "Invalid email format"
    if age < 0 or age > 150:
        return "Invalid age"
    return None


class MemberServiceWithResult:
    def __init__(self):
        self._members: dict[int, Member] = {}
        self._ids = itertools.count(1)

    def create_member(self, name: str, email: str, age: int) -> Result[Member]:
        error = _validation_error(name, email, age)
        if error is not None:
            return Failure(error)

        normalized_email = email.lower()
        if any(m.email == normalized_email for m in self._members.values()):
            return Failure(f"Email already exists: {email}")

        member = Member(next(self._ids), name.strip(), normalized_email, age)
        self._members[member.id] = member
        return Success(member)

    def get_member(self, member_id: int) -> Result[Member]:
        member = self._members.get(member_id)
        if member is None:
            return Failure(f"User not found with id: {member_id}")
        return Success(member)


class MemberServiceWithExceptions:
    def __init__(self):
        self._members: dict[int, Member] = {}
        self._ids = itertools.count(1)

    def create_member(self, name: str, email: str, age: int) -> Member:
        error = _validation_error(name, email, age)
        if error is not None:
            raise ValueError(error)

        normalized_email = email.lower()
        if any(m.email == normalized_email for m in self._members.values()):
            raise DuplicateEmailError(f"Email already exists: {email}")

        member = Member(next(self._ids), name.strip(), normalized_email, age)
        self._members[member.id] = member
        return member

    def get_member(self, member_id: int) -> Member:
        member = self._members.get(member_id)
        if member is None:
            raise UserNotFoundError(member_id)
        return member


def generate_member_data(index: int, serial: int) -> tuple[str, str, int]:
    return f"User{index}", f"user{serial}.{index}@example.com", 20 + index % 50


class ResultPatternSuite(BenchmarkSuite):
    name = "result"
    description = "Result Pattern Benchmark"

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        self.iterations = iterations

    def setup(self, context: SuiteContext) -> None:
        self.result_service = MemberServiceWithResult()
        self.exception_service = MemberServiceWithExceptions()

    def execute(self, context: SuiteContext) -> None:
        iterations = context.iterations(self.iterations)
        success_cases = max(1, int(iterations * SUCCESS_RATIO))
        error_cases = max(1, iterations - success_cases)
        rng: random.Random = context.rng
        serials = itertools.count()
        result_service, exception_service = self.result_service, self.exception_service

        print("\n=== Success Case Benchmarks ===")

        def create_with_result():
            data = generate_member_data(rng.randrange(1_000_000), next(serials))
            result = result_service.create_member(*data)
            if isinstance(result, Failure):
                raise UnexpectedOutcomeError(f"Unexpected failure: {result.error}")

        context.measure(
            "Create User (Result Pattern) - Success Cases",
            success_cases,
            create_with_result,
            group="Create Success",
        )
        context.measure(
            "Create User (Exceptions) - Success Cases",
            success_cases,
            lambda: exception_service.create_member(
                *generate_member_data(rng.randrange(1_000_000), next(serials))
            ),
            group="Create Success",
        )

        print("\n=== Error Case Benchmarks ===")

        def invalid_with_result():
            if isinstance(result_service.create_member("A", "invalid-email", -1), Success):
                raise UnexpectedOutcomeError("Unexpected success")

        def invalid_with_exceptions():
            try:
                exception_service.create_member("A", "invalid-email", -1)
            except ValueError:
                pass

        context.measure(
            "Create User (Result Pattern) - Error Cases",
            error_cases,
            invalid_with_result,
            group="Create Error",
        )
        context.measure(
            "Create User (Exceptions) - Error Cases",
            error_cases,
            invalid_with_exceptions,
            group="Create Error",
        )

        print("\n=== Retrieval Benchmarks ===")

        created = result_service.create_member(
            "Test User", f"test{next(serials)}@example.com", 25
        )
        known = exception_service.create_member(
            "Test User", f"test{next(serials)}@example.com", 25
        )

        if isinstance(created, Success):
            member_id = created.value.id

            def get_with_result():
                if isinstance(result_service.get_member(member_id), Failure):
                    raise UnexpectedOutcomeError("Unexpected failure in get user")

            context.measure(
                "Get User (Result Pattern)", iterations, get_with_result, group="Get User"
            )
        context.measure(
            "Get User (Exceptions)",
            iterations,
            lambda: exception_service.get_member(known.id),
            group="Get User",
        )

        print("\n=== Not Found Case Benchmarks ===")

        def missing_with_result():
            if isinstance(result_service.get_member(MISSING_USER_ID), Success):
                raise UnexpectedOutcomeError("Unexpected success in get non-existent user")

        def missing_with_exceptions():
            try:
                exception_service.get_member(MISSING_USER_ID)
            except UserNotFoundError:
                pass

        context.measure(
            "Get Non-existent User (Result Pattern)",
            iterations,
            missing_with_result,
            group="Get Missing User",
        )
        context.measure(
            "Get Non-existent User (Exceptions)",
            iterations,
            missing_with_exceptions,
            group="Get Missing User",
        )
