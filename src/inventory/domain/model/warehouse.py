"""Warehouse aggregate — a named, keyed store of products.

There is one canonical Warehouse per name for the life of the process;
``Warehouse.get_instance()`` is the only way to obtain one. Besides the
products themselves, each warehouse remembers which product ids have had
their price changed since they were added (or since the last clear).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import ClassVar

from inventory.domain.exceptions import EntityNotFoundError, ValidationError
from inventory.domain.model.capabilities import Perishable, Shippable
from inventory.domain.model.category import Category
from inventory.domain.model.product import Product
from inventory.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

# Passed only by get_instance().
_REGISTRY_TOKEN = object()


class Warehouse:
    """Aggregate root for a product store.

    Invariants:
    - product ids are unique; adding a product with a known id replaces it
    - ``changed_product_ids`` only ever holds ids that are currently stored
    """

    _instances: ClassVar[dict[str, Warehouse]] = {}
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, name: str, _token: object = None) -> None:
        if _token is not _REGISTRY_TOKEN:
            raise ValidationError(
                "Warehouses are obtained through Warehouse.get_instance()"
            )
        self._name = name
        self._products: dict[str, Product] = {}
        self._changed_product_ids: set[str] = set()
        self._lock = threading.RLock()

    # --- Registry -------------------------------------------------------------

    @classmethod
    def get_instance(cls, name: str) -> Warehouse:
        """Return the canonical warehouse for *name*, creating it on first use."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Warehouse name cannot be null or blank")
        with cls._registry_lock:
            warehouse = cls._instances.get(name)
            if warehouse is None:
                warehouse = cls(name, _REGISTRY_TOKEN)
                cls._instances[name] = warehouse
                logger.debug("Created warehouse %r", name)
        return warehouse

    # --- Accessors ------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def products(self) -> Mapping[str, Product]:
        """Read-only live view of the stored products, keyed by id."""
        return MappingProxyType(self._products)

    @property
    def changed_product_ids(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._changed_product_ids)

    def get_products(self) -> list[Product]:
        with self._lock:
            return list(self._products.values())

    def is_empty(self) -> bool:
        return not self._products

    # --- Commands -------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Store *product*, replacing any product with the same id."""
        if product is None:
            raise ValidationError("Product cannot be null")
        if not isinstance(product, Product):
            raise ValidationError(
                f"Expected a Product, got {type(product).__name__}"
            )
        with self._lock:
            replaced = product.id in self._products
            self._products[product.id] = product
        logger.debug(
            "%s product %s in warehouse %r",
            "Replaced" if replaced else "Added",
            product.id,
            self._name,
        )

    def get_product_by_id(self, product_id: str) -> Product | None:
        """Return the product with *product_id*, or None if not stored."""
        with self._lock:
            return self._products.get(product_id)

    def update_product_price(
        self, product_id: str, new_price: Money | str | int | float | Decimal
    ) -> None:
        """Change a stored product's price and mark it as changed.

        Raises EntityNotFoundError if no product has *product_id*. An
        invalid price raises ValidationError and leaves the product (and
        the changed set) as they were.
        """
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)
            product.set_price(new_price)
            self._changed_product_ids.add(product_id)
        logger.debug(
            "Updated price of product %s to %s in warehouse %r",
            product_id,
            product.price,
            self._name,
        )

    def remove(self, product_id: str) -> None:
        """Remove a product and its changed marker. Unknown ids are ignored."""
        with self._lock:
            removed = self._products.pop(product_id, None)
            self._changed_product_ids.discard(product_id)
        if removed is not None:
            logger.debug("Removed product %s from warehouse %r", product_id, self._name)

    def clear_products(self) -> None:
        with self._lock:
            self._products.clear()
            self._changed_product_ids.clear()
        logger.debug("Cleared all products from warehouse %r", self._name)

    # --- Queries --------------------------------------------------------------

    def expired_products(self, today: date | None = None) -> list[Perishable]:
        """Perishable products whose expiration date is today or earlier."""
        if today is None:
            today = date.today()
        return [
            product
            for product in self.get_products()
            if isinstance(product, Perishable) and product.is_expired(today)
        ]

    def shippable_products(self) -> list[Shippable]:
        return [
            product
            for product in self.get_products()
            if isinstance(product, Shippable)
        ]

    def get_products_grouped_by_categories(self) -> dict[Category, list[Product]]:
        """Partition every stored product by its category.

        Groups appear in the order their first product was added, and
        products within a group keep insertion order.
        """
        groups: dict[Category, list[Product]] = {}
        for product in self.get_products():
            groups.setdefault(product.category, []).append(product)
        return groups

    def __repr__(self) -> str:
        return f"Warehouse(name={self._name!r}, products={len(self._products)})"
