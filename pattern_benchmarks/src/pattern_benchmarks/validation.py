"""Composed single-field validators vs. one monolithic product validator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import random
import string
from typing import Literal, Optional, Union

from bench_harness import BenchmarkSuite, SuiteContext

DEFAULT_ITERATIONS = 10_000
MAX_PRICE = 1_000_000

ProductKind = Literal["valid", "invalid-name", "invalid-price", "invalid-stock", "all-invalid"]
PRODUCT_KINDS: tuple[ProductKind, ...] = (
    "valid",
    "invalid-name",
    "invalid-price",
    "invalid-stock",
    "all-invalid",
)


@dataclass
class Dimensions:
    length: float
    width: float
    height: float


@dataclass
class ProductData:
    id: str
    name: Optional[str]
    price: Optional[float]
    description: str
    stock: Optional[Union[int, float]]
    category: str
    tags: list[str] = field(default_factory=list)
    image_urls: list[str] = field(default_factory=list)
    weight: float = 0.0
    dimensions: Dimensions = field(default_factory=lambda: Dimensions(0, 0, 0))


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _name_errors(data: ProductData) -> list[str]:
    if not data.name:
        return ["Product name is required"]
    if len(data.name) < 3:
        return ["Product name must be at least 3 characters long"]
    if len(data.name) > 100:
        return ["Product name must not exceed 100 characters"]
    return []


def _price_errors(data: ProductData) -> list[str]:
    if data.price is None:
        return ["Price is required"]
    if data.price < 0:
        return ["Price must be non-negative"]
    if data.price > MAX_PRICE:
        return ["Price must not exceed 1,000,000"]
    return []


def _stock_errors(data: ProductData) -> list[str]:
    if data.stock is None:
        return ["Stock quantity is required"]
    if isinstance(data.stock, bool) or not float(data.stock).is_integer():
        return ["Stock quantity must be an integer"]
    if data.stock < 0:
        return ["Stock quantity must be non-negative"]
    return []


class Validator(ABC):
    @abstractmethod
    def validate(self, data: ProductData) -> ValidationResult: ...


class ProductNameValidator(Validator):
    def validate(self, data: ProductData) -> ValidationResult:
        return ValidationResult(_name_errors(data))


class PriceValidator(Validator):
    def validate(self, data: ProductData) -> ValidationResult:
        return ValidationResult(_price_errors(data))


class StockValidator(Validator):
    def validate(self, data: ProductData) -> ValidationResult:
        return ValidationResult(_stock_errors(data))


class CompositeValidator(Validator):
    """Runs every validator and concatenates their errors in order."""

    def __init__(self, validators: list[Validator]):
        self.validators = validators

    def validate(self, data: ProductData) -> ValidationResult:
        errors: list[str] = []
        for validator in self.validators:
            errors.extend(validator.validate(data).errors)
        return ValidationResult(errors)


class TraditionalProductValidator(Validator):
    def validate(self, data: ProductData) -> ValidationResult:
        errors: list[str] = []

        if not data.name:
            errors.append("Product name is required")
        elif len(data.name) < 3:
            errors.append("Product name must be at least 3 characters long")
        elif len(data.name) > 100:
            errors.append("Product name must not exceed 100 characters")

        if data.price is None:
            errors.append("Price is required")
        elif data.price < 0:
            errors.append("Price must be non-negative")
        elif data.price > MAX_PRICE:
            errors.append("Price must not exceed 1,000,000")

        if data.stock is None:
            errors.append("Stock quantity is required")
        elif isinstance(data.stock, bool) or not float(data.stock).is_integer():
            errors.append("Stock quantity must be an integer")
        elif data.stock < 0:
            errors.append("Stock quantity must be non-negative")

        return ValidationResult(errors)


def default_product_validator() -> CompositeValidator:
    return CompositeValidator([ProductNameValidator(), PriceValidator(), StockValidator()])


def generate_product_data(kind: ProductKind, rng: random.Random) -> ProductData:
    suffix = "".join(rng.choices(string.ascii_lowercase + string.digits, k=9))
    product = ProductData(
        id=f"prod-{suffix}",
        name="Test Product",
        price=99.99,
        description="A test product description",
        stock=100,
        category="Test Category",
        tags=["test", "sample"],
        image_urls=["http://example.com/image.jpg"],
        weight=1.5,
        dimensions=Dimensions(length=10, width=10, height=10),
    )
    if kind in ("invalid-name", "all-invalid"):
        product.name = "A"
    if kind in ("invalid-price", "all-invalid"):
        product.price = -10
    if kind in ("invalid-stock", "all-invalid"):
        product.stock = -5
    return product


class ValidationSuite(BenchmarkSuite):
    name = "validation"
    description = "Validation Pattern Benchmark"

    CASES = (
        ("Valid Product", "valid"),
        ("Invalid Name", "invalid-name"),
        ("Invalid Price", "invalid-price"),
        ("All Invalid", "all-invalid"),
    )

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        self.iterations = iterations

    def setup(self, context: SuiteContext) -> None:
        self.validators = {
            "Validation Pattern": default_product_validator(),
            "Traditional Approach": TraditionalProductValidator(),
        }

    def execute(self, context: SuiteContext) -> None:
        rng = context.rng
        for case_label, kind in self.CASES:
            for approach, validator in self.validators.items():
                context.measure(
                    f"{approach} - {case_label}",
                    self.iterations,
                    lambda validator=validator, kind=kind: validator.validate(
                        generate_product_data(kind, rng)
                    ),
                    group=case_label,
                )

        for approach, validator in self.validators.items():
            context.measure(
                f"{approach} - Mixed Cases",
                self.iterations,
                lambda validator=validator: validator.validate(
                    generate_product_data(rng.choice(PRODUCT_KINDS), rng)
                ),
                group="Mixed Cases",
            )
