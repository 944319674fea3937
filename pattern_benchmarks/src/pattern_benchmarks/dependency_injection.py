"""Dependency injection: a user service wired from collaborators vs. one that does everything itself."""

from __future__ import annotations

import logging
import random
from typing import Protocol

from bench_harness import BenchmarkSuite, SuiteContext

from .common import User, UserNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 10


class Logger(Protocol):
    def log(self, message: str) -> None: ...


class UserStore(Protocol):
    def find_by_id(self, user_id: int) -> User: ...

    def save(self, user: User) -> None: ...


class EmailService(Protocol):
    def send_email(self, to: str, subject: str, body: str) -> None: ...


class ConsoleLogger:
    def log(self, message: str) -> None:
        print(f"[LOG]: {message}")


class InMemoryUserStore:
    def __init__(self):
        self._users: dict[int, User] = {}

    def find_by_id(self, user_id: int) -> User:
        try:
            return self._users[user_id]
        except KeyError:
            raise UserNotFoundError(user_id) from None

    def save(self, user: User) -> None:
        self._users[user.id] = user


class ConsoleEmailService:
    def send_email(self, to: str, subject: str, body: str) -> None:
        print(f"Sending email to {to}")
        print(f"Subject: {subject}")
        print(f"Body: {body}")


class UserService:
    def __init__(
        self,
        logger: Logger,
        user_store: UserStore,
        email_service: EmailService,
        rng: random.Random | None = None,
    ):
        self.logger = logger
        self.user_store = user_store
        self.email_service = email_service
        self.rng = rng or random.Random()

    def register_user(self, name: str, email: str) -> User:
        self.logger.log(f"Registering new user: {name}")
        user = User(self.rng.randrange(1_000_000), name, email)
        self.user_store.save(user)
        self.email_service.send_email(email, "Welcome!", f"Welcome to our service, {name}!")
        return user

    def get_user(self, user_id: int) -> User:
        self.logger.log(f"Fetching user: {user_id}")
        return self.user_store.find_by_id(user_id)


class UserServiceWithoutDI:
    """Same behavior with logging, storage and email hard-wired in."""

    def __init__(self, rng: random.Random | None = None):
        self._users: dict[int, User] = {}
        self.rng = rng or random.Random()

    def register_user(self, name: str, email: str) -> User:
        print(f"[LOG]: Registering new user: {name}")
        user = User(self.rng.randrange(1_000_000), name, email)
        self._users[user.id] = user
        print(f"Sending email to {email}")
        print("Subject: Welcome!")
        print(f"Body: Welcome to our service, {name}!")
        return user

    def get_user(self, user_id: int) -> User:
        print(f"[LOG]: Fetching user: {user_id}")
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user


class DependencyInjectionSuite(BenchmarkSuite):
    name = "di"
    description = "DI Pattern Benchmark"

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        self.iterations = iterations

    def setup(self, context: SuiteContext) -> None:
        self.services = {
            "DI": UserService(
                ConsoleLogger(), InMemoryUserStore(), ConsoleEmailService(), rng=context.rng
            ),
            "Non-DI": UserServiceWithoutDI(rng=context.rng),
        }

    def execute(self, context: SuiteContext) -> None:
        rng = context.rng
        for variant, service in self.services.items():
            context.measure(
                f"User Registration ({variant})",
                self.iterations,
                lambda service=service: service.register_user(
                    f"User{rng.random()}", f"user{rng.random()}@example.com"
                ),
                group="User Registration",
            )

            test_user = service.register_user("Test User", "test@example.com")
            context.measure(
                f"User Retrieval ({variant})",
                self.iterations,
                lambda service=service, user_id=test_user.id: service.get_user(user_id),
                group="User Retrieval",
            )
