"""Repository pattern: the same user store backed by a dict, a list, and object attributes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import SimpleNamespace

from bench_harness import BenchmarkSuite, SuiteContext

from .common import User, UserNotFoundError

DEFAULT_DATA_SIZE = 10_000
DEFAULT_OPERATION_ITERATIONS = 1_000
DEFAULT_FIND_ALL_ITERATIONS = 100


class UserRepository(ABC):
    @abstractmethod
    def find_by_id(self, user_id: int) -> User: ...

    @abstractmethod
    def find_all(self) -> list[User]: ...

    @abstractmethod
    def save(self, user: User) -> None: ...

    @abstractmethod
    def update(self, user: User) -> None: ...

    @abstractmethod
    def delete(self, user_id: int) -> None: ...


class InMemoryUserRepository(UserRepository):
    """Dict keyed by user id."""

    def __init__(self):
        self._users: dict[int, User] = {}

    def find_by_id(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def find_all(self) -> list[User]:
        return list(self._users.values())

    def save(self, user: User) -> None:
        self._users[user.id] = user

    def update(self, user: User) -> None:
        if user.id not in self._users:
            raise UserNotFoundError(user.id)
        self._users[user.id] = user

    def delete(self, user_id: int) -> None:
        if self._users.pop(user_id, None) is None:
            raise UserNotFoundError(user_id)


class ListUserRepository(UserRepository):
    """Linear scans over a list; saving never deduplicates."""

    def __init__(self):
        self._users: list[User] = []

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise UserNotFoundError(user_id)

    def find_by_id(self, user_id: int) -> User:
        return self._users[self._index_of(user_id)]

    def find_all(self) -> list[User]:
        return list(self._users)

    def save(self, user: User) -> None:
        self._users.append(user)

    def update(self, user: User) -> None:
        self._users[self._index_of(user.id)] = user

    def delete(self, user_id: int) -> None:
        del self._users[self._index_of(user_id)]


class AttributeUserRepository(UserRepository):
    """Users stored as attributes of a namespace object."""

    def __init__(self):
        self._users = SimpleNamespace()

    @staticmethod
    def _key(user_id: int) -> str:
        return f"user_{user_id}"

    def find_by_id(self, user_id: int) -> User:
        user = getattr(self._users, self._key(user_id), None)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def find_all(self) -> list[User]:
        return list(vars(self._users).values())

    def save(self, user: User) -> None:
        setattr(self._users, self._key(user.id), user)

    def update(self, user: User) -> None:
        if not hasattr(self._users, self._key(user.id)):
            raise UserNotFoundError(user.id)
        setattr(self._users, self._key(user.id), user)

    def delete(self, user_id: int) -> None:
        if not hasattr(self._users, self._key(user_id)):
            raise UserNotFoundError(user_id)
        delattr(self._users, self._key(user_id))


class RepositorySuite(BenchmarkSuite):
    """Compare CRUD costs of the three repository backends."""

    name = "repository"
    description = "Repository Pattern Benchmark"

    def __init__(
        self,
        data_size: int = DEFAULT_DATA_SIZE,
        operation_iterations: int = DEFAULT_OPERATION_ITERATIONS,
        find_all_iterations: int = DEFAULT_FIND_ALL_ITERATIONS,
    ):
        self.data_size = data_size
        self.operation_iterations = operation_iterations
        self.find_all_iterations = find_all_iterations

    def setup(self, context: SuiteContext) -> None:
        self.repositories: dict[str, UserRepository] = {
            "Dict-based Repository": InMemoryUserRepository(),
            "List-based Repository": ListUserRepository(),
            "Attribute-based Repository": AttributeUserRepository(),
        }

    def execute(self, context: SuiteContext) -> None:
        rng = context.rng
        for name, repository in self.repositories.items():
            print(f"\n=== Testing {name} ===")

            def insert(repository=repository):
                repository.save(
                    User(
                        rng.randrange(1_000_000),
                        f"User{rng.random()}",
                        f"user{rng.random()}@example.com",
                    )
                )

            context.measure(f"{name} - Bulk Insert", self.data_size, insert, group="Bulk Insert")

            repository.save(User(1, "Test User", "test@example.com"))

            context.measure(
                f"{name} - Single User Retrieval",
                self.operation_iterations,
                lambda repository=repository: repository.find_by_id(1),
                group="Single User Retrieval",
            )
            context.measure(
                f"{name} - Get All Users",
                self.find_all_iterations,
                repository.find_all,
                group="Get All Users",
            )

            def update(repository=repository):
                repository.update(User(1, f"Updated{rng.random()}", "test@example.com"))

            context.measure(
                f"{name} - Update User",
                self.operation_iterations,
                update,
                group="Update User",
            )

            def delete_and_insert(repository=repository):
                user_id = rng.randrange(self.data_size)
                try:
                    repository.delete(user_id)
                except UserNotFoundError:
                    pass
                repository.save(
                    User(user_id, f"User{rng.random()}", f"user{rng.random()}@example.com")
                )

            context.measure(
                f"{name} - Delete and Insert",
                self.operation_iterations,
                delete_and_insert,
                group="Delete and Insert",
            )
