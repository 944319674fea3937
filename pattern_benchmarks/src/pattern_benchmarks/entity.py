"""Encapsulated entities with validating properties vs. plain records validated by the service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import random
from typing import Literal, Optional

from bench_harness import BenchmarkSuite, SuiteContext

from .common import UserNotFoundError

DEFAULT_DATA_SIZE = 10_000
DEFAULT_OPERATION_ITERATIONS = 1_000

Status = Literal["active", "inactive"]


def _check_name(name: str) -> None:
    if not name or len(name) < 2:
        raise ValueError("Name must be at least 2 characters long")
    if len(name) > 100:
        raise ValueError("Name must be less than 100 characters")


def _check_email(email: str) -> None:
    if not email or "@" not in email:
        raise ValueError("Invalid email format")


def _check_age(age: int) -> None:
    if age < 0 or age > 150:
        raise ValueError("Invalid age")


class UserEntity:
    """User whose invariants are enforced on every assignment."""

    def __init__(self, user_id: int, name: str, email: str, age: int, status: Status = "active"):
        self._id = user_id
        self._name = name
        self._email = email
        self._age = age
        self._status: Status = status
        self._created_at = datetime.now()
        self._updated_at = self._created_at
        self._last_login_at: Optional[datetime] = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        _check_name(value)
        self._name = value
        self._touch()

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        _check_email(value)
        self._email = value
        self._touch()

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        _check_age(value)
        self._age = value
        self._touch()

    @property
    def status(self) -> Status:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def last_login_at(self) -> Optional[datetime]:
        return self._last_login_at

    def _touch(self) -> None:
        self._updated_at = datetime.now()

    def activate(self) -> None:
        self._status = "active"
        self._touch()

    def deactivate(self) -> None:
        self._status = "inactive"
        self._touch()

    def record_login(self) -> None:
        self._last_login_at = datetime.now()
        self._touch()

    def is_adult(self) -> bool:
        return self._age >= 18

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "email": self._email,
            "age": self._age,
            "status": self._status,
            "created_at": self._created_at,
            "updated_at": self._updated_at,
            "last_login_at": self._last_login_at,
        }


@dataclass
class PlainUser:
    id: int
    name: str
    email: str
    age: int
    status: Status
    created_at: datetime
    updated_at: datetime
    last_login_at: Optional[datetime] = None


class UserServiceWithEntity:
    def __init__(self, rng: random.Random | None = None):
        self._users: dict[int, UserEntity] = {}
        self.rng = rng or random.Random()

    def create_user(self, name: str, email: str, age: int) -> UserEntity:
        user = UserEntity(self.rng.randrange(1_000_000), name, email, age)
        self._users[user.id] = user
        return user

    def get_user(self, user_id: int) -> Optional[UserEntity]:
        return self._users.get(user_id)

    def update_user(self, user_id: int, name: str, email: str, age: int) -> UserEntity:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        user.name = name
        user.email = email
        user.age = age
        return user

    def deactivate_user(self, user_id: int) -> None:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        user.deactivate()


class UserServiceWithPlainObject:
    def __init__(self, rng: random.Random | None = None):
        self._users: dict[int, PlainUser] = {}
        self.rng = rng or random.Random()

    @staticmethod
    def validate_user_data(name: str, email: str, age: int) -> None:
        _check_name(name)
        _check_email(email)
        _check_age(age)

    def create_user(self, name: str, email: str, age: int) -> PlainUser:
        self.validate_user_data(name, email, age)
        now = datetime.now()
        user = PlainUser(
            id=self.rng.randrange(1_000_000),
            name=name,
            email=email,
            age=age,
            status="active",
            created_at=now,
            updated_at=now,
        )
        self._users[user.id] = user
        return user

    def get_user(self, user_id: int) -> Optional[PlainUser]:
        return self._users.get(user_id)

    def update_user(self, user_id: int, name: str, email: str, age: int) -> PlainUser:
        self.validate_user_data(name, email, age)
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        user.name = name
        user.email = email
        user.age = age
        user.updated_at = datetime.now()
        return user

    def deactivate_user(self, user_id: int) -> None:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        user.status = "inactive"
        user.updated_at = datetime.now()


class EntitySuite(BenchmarkSuite):
    name = "entity"
    description = "Entity Pattern Comparison Benchmark"

    def __init__(
        self,
        data_size: int = DEFAULT_DATA_SIZE,
        operation_iterations: int = DEFAULT_OPERATION_ITERATIONS,
    ):
        self.data_size = data_size
        self.operation_iterations = operation_iterations

    def setup(self, context: SuiteContext) -> None:
        self.services = {
            "With Entity": UserServiceWithEntity(rng=context.rng),
            "Plain Object": UserServiceWithPlainObject(rng=context.rng),
        }

    def execute(self, context: SuiteContext) -> None:
        rng = context.rng

        def random_fields(prefix: str) -> tuple[str, str, int]:
            return (
                f"{prefix}User{rng.random()}",
                f"{prefix.lower()}user{rng.random()}@example.com",
                rng.randrange(18, 68),
            )

        print("\n=== Create Operations ===")
        for variant, service in self.services.items():
            context.measure(
                f"User Creation ({variant})",
                self.data_size,
                lambda service=service: service.create_user(*random_fields("")),
                group="User Creation",
            )

        test_ids = {
            variant: service.create_user(f"Test {variant}", "test@example.com", 25).id
            for variant, service in self.services.items()
        }

        print("\n=== Read Operations ===")
        for variant, service in self.services.items():
            context.measure(
                f"User Retrieval ({variant})",
                self.operation_iterations,
                lambda service=service, user_id=test_ids[variant]: service.get_user(user_id),
                group="User Retrieval",
            )

        print("\n=== Update Operations ===")
        for variant, service in self.services.items():
            context.measure(
                f"User Update ({variant})",
                self.operation_iterations,
                lambda service=service, user_id=test_ids[variant]: service.update_user(
                    user_id, *random_fields("Updated")
                ),
                group="User Update",
            )

        print("\n=== Status Change Operations ===")
        for variant, service in self.services.items():
            context.measure(
                f"User Deactivation ({variant})",
                self.operation_iterations,
                lambda service=service, user_id=test_ids[variant]: service.deactivate_user(user_id),
                group="User Deactivation",
            )
