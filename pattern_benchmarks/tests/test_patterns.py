"""Behavior of the pattern implementations compared by the suites."""

import asyncio

import pytest

from pattern_benchmarks.access import UserAccessManager, generate_access_request
from pattern_benchmarks.chain import (
    REQUEST_KINDS,
    TraditionalRequestProcessor,
    build_chain,
    generate_test_request,
)
from pattern_benchmarks.command import (
    AddTextCommand,
    CommandInvoker,
    DeleteTextCommand,
    Document,
    SimpleDocument,
)
from pattern_benchmarks.common import Request, User, UserNotFoundError
from pattern_benchmarks.dependency_injection import (
    InMemoryUserStore,
    UserService,
    UserServiceWithoutDI,
)
from pattern_benchmarks.entity import UserEntity, UserServiceWithEntity, UserServiceWithPlainObject
from pattern_benchmarks.rate_limit import RateLimiter
from pattern_benchmarks.repository import (
    AttributeUserRepository,
    InMemoryUserRepository,
    ListUserRepository,
)
from pattern_benchmarks.result import (
    Failure,
    MemberServiceWithExceptions,
    MemberServiceWithResult,
    Success,
)
from pattern_benchmarks.validation import (
    PRODUCT_KINDS,
    TraditionalProductValidator,
    default_product_validator,
    generate_product_data,
)

REPOSITORIES = [InMemoryUserRepository, ListUserRepository, AttributeUserRepository]


@pytest.mark.parametrize("repository_cls", REPOSITORIES)
def test_repository_crud(repository_cls):
    repository = repository_cls()
    alice = User(1, "Alice", "alice@example.com")
    bob = User(2, "Bob", "bob@example.com")
    repository.save(alice)
    repository.save(bob)

    assert repository.find_by_id(2) == bob
    assert sorted(u.id for u in repository.find_all()) == [1, 2]

    repository.update(User(1, "Alicia", "alice@example.com"))
    assert repository.find_by_id(1).name == "Alicia"

    repository.delete(1)
    with pytest.raises(UserNotFoundError, match="User not found: 1"):
        repository.find_by_id(1)


@pytest.mark.parametrize("repository_cls", REPOSITORIES)
def test_repository_missing_user_errors(repository_cls):
    repository = repository_cls()

    with pytest.raises(UserNotFoundError):
        repository.update(User(5, "Nobody", "nobody@example.com"))
    with pytest.raises(UserNotFoundError) as excinfo:
        repository.delete(5)
    assert excinfo.value.user_id == 5


def test_find_all_returns_a_copy():
    repository = ListUserRepository()
    repository.save(User(1, "Alice", "alice@example.com"))

    repository.find_all().clear()

    assert len(repository.find_all()) == 1


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)


class RecordingEmailService:
    def __init__(self):
        self.sent = []

    def send_email(self, to, subject, body):
        self.sent.append((to, subject, body))


def test_user_service_uses_injected_collaborators(rng):
    logger = RecordingLogger()
    emails = RecordingEmailService()
    service = UserService(logger, InMemoryUserStore(), emails, rng=rng)

    user = service.register_user("Carol", "carol@example.com")

    assert service.get_user(user.id) == user
    assert logger.messages == [
        "Registering new user: Carol",
        f"Fetching user: {user.id}",
    ]
    assert emails.sent == [("carol@example.com", "Welcome!", "Welcome to our service, Carol!")]


def test_user_service_without_di_prints(rng, capsys):
    service = UserServiceWithoutDI(rng=rng)

    user = service.register_user("Dan", "dan@example.com")

    out = capsys.readouterr().out
    assert "[LOG]: Registering new user: Dan" in out
    assert "Sending email to dan@example.com" in out
    assert service.get_user(user.id) is user
    with pytest.raises(UserNotFoundError):
        service.get_user(-1)


def test_command_invoker_undo():
    document = Document()
    invoker = CommandInvoker()

    invoker.execute_command(AddTextCommand(document, "Hello, "))
    invoker.execute_command(AddTextCommand(document, "World"))
    invoker.execute_command(DeleteTextCommand(document, 0, 7))
    assert document.content == "World"

    invoker.undo()
    assert document.content == "Hello, World"
    invoker.undo()
    invoker.undo()
    assert document.content == ""
    invoker.undo()
    assert document.content == ""


def test_simple_document_undo():
    document = SimpleDocument()

    document.add_text("Hello, World")
    document.delete_text(5, 7)
    assert document.content == "Hello"

    document.undo()
    assert document.content == "Hello, World"
    document.undo()
    document.undo()
    assert document.content == ""


EXPECTED_STATUS = {
    "success": 200,
    "auth-error": 401,
    "forbidden": 403,
    "validation-error": 400,
}


@pytest.mark.parametrize("kind", sorted(EXPECTED_STATUS))
def test_chain_and_processor_agree(kind, rng):
    chain = build_chain()
    processor = TraditionalRequestProcessor()
    request = generate_test_request(kind, rng)

    chained = asyncio.run(chain.handle(request))
    inline = asyncio.run(processor.process_request(request))

    assert chained.status == inline.status == EXPECTED_STATUS[kind]
    assert chained.body == inline.body


def test_chain_rate_limit(rng):
    chain = build_chain(RateLimiter(limit=2))

    async def send_three():
        return [
            (await chain.handle(generate_test_request("rate-limit", rng))).status
            for _ in range(3)
        ]

    assert asyncio.run(send_three()) == [200, 200, 429]


def test_chain_validation_requires_object_body():
    chain = build_chain()
    user = User(7, "Eve", "eve@example.com")
    headers = {"authorization": "Bearer token"}

    missing = asyncio.run(chain.handle(Request(user, "/api/data", "PUT", dict(headers))))
    valid = asyncio.run(
        chain.handle(Request(user, "/api/data", "POST", dict(headers), body={"a": 1}))
    )

    assert missing.status == 400
    assert missing.body == "Bad Request: Body is required"
    assert valid.status == 200


def test_admin_may_reach_admin_paths():
    chain = build_chain()
    admin = User(3, "Root", "root@example.com", role="admin")
    request = Request(admin, "/settings/users", "GET", {"authorization": "Bearer x"})

    assert asyncio.run(chain.handle(request)).status == 200


def test_generate_test_request_kinds_cover_all(rng):
    assert set(REQUEST_KINDS) == set(EXPECTED_STATUS) | {"rate-limit"}
    assert generate_test_request("rate-limit", rng).user.id == 1


@pytest.mark.parametrize(
    ("kind", "message"),
    [
        ("success", "Action executed successfully"),
        ("auth-error", "User is not authenticated"),
        ("permission-error", "Permission denied"),
        # Plain users may not write at all, so the permission check answers first.
        ("validation-error", "Permission denied"),
    ],
)
def test_access_manager_outcomes(kind, message):
    response = UserAccessManager().process_request(generate_access_request(kind))

    assert response.message == message
    assert response.success is (kind == "success")


def test_access_manager_input_validation():
    request = generate_access_request("validation-error")
    request.user = User(9, "Admin", "admin@example.com", role="admin")

    assert UserAccessManager().process_request(request).message == "Invalid input"
    request.payload = {"key": "value"}
    assert UserAccessManager().process_request(request).success


def test_access_manager_rate_limit_never_resets():
    manager = UserAccessManager(RateLimiter(limit=3, window_s=None))

    messages = [
        manager.process_request(generate_access_request("rate-limit")).message
        for _ in range(4)
    ]

    assert messages[-1] == "Rate limit exceeded"
    assert manager.limiter.pending_resets == {}


def test_result_service_success_and_failures():
    service = MemberServiceWithResult()

    created = service.create_member("  Frank ", "Frank@Example.com", 40)
    assert isinstance(created, Success)
    assert created.value.name == "Frank"
    assert created.value.email == "frank@example.com"

    assert service.create_member("A", "a@example.com", 1) == Failure(
        "Name must be at least 2 characters long"
    )
    assert service.create_member("Gina", "invalid", 1) == Failure("Invalid email format")
    assert service.create_member("Gina", "g@example.com", 151) == Failure("Invalid age")
    assert service.create_member("Frank", "FRANK@example.com", 40) == Failure(
        "Email already exists: FRANK@example.com"
    )
    assert service.get_member(created.value.id) == created
    assert isinstance(service.get_member(999), Failure)


def test_exception_service_raises():
    service = MemberServiceWithExceptions()
    member = service.create_member("Hank", "hank@example.com", 30)

    assert service.get_member(member.id) is member
    with pytest.raises(ValueError, match="Invalid age"):
        service.create_member("Hank", "hank2@example.com", -1)
    with pytest.raises(ValueError, match="Email already exists"):
        service.create_member("Hank", "HANK@example.com", 30)
    with pytest.raises(UserNotFoundError):
        service.get_member(12345)


@pytest.mark.parametrize("kind", PRODUCT_KINDS)
def test_validators_agree(kind, rng):
    product = generate_product_data(kind, rng)

    composite = default_product_validator().validate(product)
    traditional = TraditionalProductValidator().validate(product)

    assert composite.errors == traditional.errors
    assert composite.is_valid is (kind == "valid")


def test_all_invalid_reports_every_field(rng):
    result = default_product_validator().validate(generate_product_data("all-invalid", rng))

    assert result.errors == [
        "Product name must be at least 3 characters long",
        "Price must be non-negative",
        "Stock quantity must be non-negative",
    ]


def test_stock_must_be_integer(rng):
    product = generate_product_data("valid", rng)
    product.stock = 2.5

    assert default_product_validator().validate(product).errors == [
        "Stock quantity must be an integer"
    ]


def test_missing_fields(rng):
    product = generate_product_data("valid", rng)
    product.name = None
    product.price = None
    product.stock = None

    assert TraditionalProductValidator().validate(product).errors == [
        "Product name is required",
        "Price is required",
        "Stock quantity is required",
    ]


def test_entity_validates_assignments():
    user = UserEntity(1, "Ivy", "ivy@example.com", 17)

    with pytest.raises(ValueError, match="Invalid email format"):
        user.email = "ivy"
    with pytest.raises(ValueError, match="at least 2 characters"):
        user.name = "I"
    assert not user.is_adult()

    user.age = 18
    user.record_login()
    user.deactivate()

    assert user.is_adult()
    assert user.status == "inactive"
    assert user.last_login_at is not None
    assert user.updated_at >= user.created_at
    assert user.to_dict()["age"] == 18


@pytest.mark.parametrize("service_cls", [UserServiceWithEntity, UserServiceWithPlainObject])
def test_entity_services(service_cls, rng):
    service = service_cls(rng=rng)
    user = service.create_user("Jack", "jack@example.com", 30)

    service.update_user(user.id, "Jackie", "jackie@example.com", 31)
    service.deactivate_user(user.id)

    stored = service.get_user(user.id)
    assert (stored.name, stored.email, stored.age, stored.status) == (
        "Jackie",
        "jackie@example.com",
        31,
        "inactive",
    )
    with pytest.raises(ValueError, match="Invalid age"):
        service.update_user(user.id, "Jackie", "jackie@example.com", 200)
    with pytest.raises(UserNotFoundError):
        service.deactivate_user(-1)
    assert service.get_user(-1) is None
