"""Category value object.

Categories are interned: asking for the same normalized name twice hands
back the same instance. Equality never depends on that, though; every
instance normalizes its name on construction, so two categories are equal
whenever their normalized names are.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import ClassVar

from inventory.domain.exceptions import ValidationError


def _normalize(name: object) -> str:
    if name is None:
        raise ValidationError("Category name can't be null")
    if not isinstance(name, str):
        raise ValidationError(
            f"Category name must be a string, got {type(name).__name__}"
        )
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError("Category name can't be blank")
    return trimmed[0].upper() + trimmed[1:].lower()


@dataclass(frozen=True)
class Category:
    """A product category, e.g. ``Category.of(" dairy ")`` -> ``Dairy``.

    Prefer the ``Category.of()`` factory; it hands out the shared instance
    for the normalized name.
    """

    name: str

    _cache: ClassVar[dict[str, Category]] = {}
    _cache_lock: ClassVar[threading.Lock] = threading.Lock()

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _normalize(self.name))

    @classmethod
    def of(cls, name: str | None) -> Category:
        normalized = _normalize(name)
        with cls._cache_lock:
            category = cls._cache.get(normalized)
            if category is None:
                category = cls(normalized)
                cls._cache[normalized] = category
        return category

    def __str__(self) -> str:
        return self.name
