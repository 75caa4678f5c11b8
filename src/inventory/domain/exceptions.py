"""Errors raised by the catalog domain.

Everything derives from DomainException, so an embedding application can
catch catalog failures in one place and still tell bad input apart from a
missing product.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input broke an invariant (blank name, negative price, ...)."""


class EntityNotFoundError(DomainException):
    """A mutation targeted an entity that is not stored."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found with id: {key}")
        self.entity = entity
        self.key = key
