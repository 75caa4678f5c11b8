"""Product aggregate and its variants.

Products are identified by ``id`` for their whole life. Every field is
fixed once construction finishes; the price alone may change, and only
through ``set_price()`` so it can never go negative or lose its
two-decimal precision.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import FrozenInstanceError, dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, ClassVar

from inventory.domain.exceptions import ValidationError
from inventory.domain.model.capabilities import Perishable, Shippable
from inventory.domain.model.category import Category
from inventory.domain.model.value_objects import Money, Weight

# ---------------------------------------------------------------------------
# Constants for shipping rules
# ---------------------------------------------------------------------------
ELECTRONICS_BASE_SHIPPING = Money(Decimal("79"))
HEAVY_ELECTRONICS_SURCHARGE = Money(Decimal("49"))
HEAVY_ELECTRONICS_THRESHOLD = Weight(Decimal("5.0"))
FOOD_SHIPPING_RATE_PER_KG = Money(Decimal("50"))


def _new_id() -> str:
    return str(uuid.uuid4())


def _coerce_price(price: Money | str | int | float | Decimal | None) -> Money:
    if price is None:
        raise ValidationError("Price cannot be null or negative")
    if isinstance(price, Money):
        return price
    return Money.of(price)


def _coerce_weight(weight: Weight | str | int | float | Decimal | None) -> Weight:
    if weight is None:
        raise ValidationError("Weight cannot be null or negative")
    if isinstance(weight, Weight):
        return weight
    return Weight.of(weight)


@dataclass(eq=False, kw_only=True)
class Product(ABC):
    """A sellable item in the catalog.

    ``id`` may be supplied by the caller; when left out a UUID4 string is
    generated. Equality and hashing go by ``id`` alone, so a product keeps
    its identity across price changes.

    Subclasses add their own checks by extending ``_validate()``; the
    instance is sealed against assignment once it passes.
    """

    name: str
    category: Category
    price: Money
    id: str = field(default_factory=_new_id)

    _sealed: ClassVar[bool] = False

    def __post_init__(self) -> None:
        self._validate()
        object.__setattr__(self, "_sealed", True)

    def _validate(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("Product ID cannot be null or blank")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Product name cannot be null or blank")
        if not isinstance(self.category, Category):
            raise ValidationError("Product category cannot be null")
        self.price = _coerce_price(self.price)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._sealed:
            hint = "; use set_price()" if name == "price" else ""
            raise FrozenInstanceError(f"cannot assign to field {name!r}{hint}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._sealed:
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    def set_price(self, new_price: Money | str | int | float | Decimal) -> None:
        """Replace the price, re-normalized to two decimals.

        The stored price is left untouched if *new_price* is invalid.
        """
        object.__setattr__(self, "price", _coerce_price(new_price))

    @abstractmethod
    def product_details(self) -> str:
        """Human-readable one-line description of the product."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False, kw_only=True)
class ElectronicsProduct(Product, Shippable):

    warranty_months: int
    weight: Weight

    def _validate(self) -> None:
        super()._validate()
        if isinstance(self.warranty_months, bool) or not isinstance(
            self.warranty_months, int
        ):
            raise ValidationError("Warranty months must be a whole number")
        if self.warranty_months < 0:
            raise ValidationError("Warranty months cannot be negative")
        self.weight = _coerce_weight(self.weight)

    def product_details(self) -> str:
        return f"Electronics: {self.name}, Warranty: {self.warranty_months} months"

    def calculate_shipping_cost(self) -> Money:
        """Flat base rate, plus a surcharge for anything over 5 kg."""
        cost = ELECTRONICS_BASE_SHIPPING
        if self.weight > HEAVY_ELECTRONICS_THRESHOLD:
            cost = cost + HEAVY_ELECTRONICS_SURCHARGE
        return cost


@dataclass(eq=False, kw_only=True)
class FoodProduct(Product, Shippable, Perishable):

    expiration_date: date
    weight: Weight

    def _validate(self) -> None:
        super()._validate()
        if not isinstance(self.expiration_date, date):
            raise ValidationError("Expiration date cannot be null")
        self.weight = _coerce_weight(self.weight)

    def product_details(self) -> str:
        return f"Food: {self.name}, Expires: {self.expiration_date.isoformat()}"

    def calculate_shipping_cost(self) -> Money:
        return FOOD_SHIPPING_RATE_PER_KG * self.weight.kilograms
