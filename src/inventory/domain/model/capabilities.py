"""Capabilities a product variant may opt into.

Consumers ask ``isinstance(product, Shippable)`` rather than checking for
a concrete product class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from inventory.domain.model.value_objects import Money, Weight


class Shippable(ABC):

    weight: Weight

    @abstractmethod
    def calculate_shipping_cost(self) -> Money:
        """Return what it costs to ship one unit of this product."""


class Perishable(ABC):

    expiration_date: date

    def is_expired(self, today: date | None = None) -> bool:
        """True once *today* has reached the expiration date.

        A product expiring today already counts as expired.
        """
        if today is None:
            today = date.today()
        return not self.expiration_date > today
