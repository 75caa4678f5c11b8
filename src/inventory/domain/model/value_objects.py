"""Money and Weight, the two measured quantities a product carries.

Both are frozen and compared by value. Negative amounts are refused at
construction, and the ``of()`` factories turn loose input (strings, ints,
floats) into ValidationError when it does not parse.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from inventory.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "SEK"
_CENTS = Decimal("0.01")


def _to_decimal(value: str | float | int | Decimal, what: str) -> Decimal:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"Invalid {what}: {value!r}")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {what}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {what}: {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Amounts are always held at two fractional digits, rounded half-up,
    so prices read back exactly as they will be charged.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        object.__setattr__(
            self, "amount", self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"))


@dataclass(frozen=True, order=True)
class Weight:
    """A non-negative weight in kilograms."""

    kilograms: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.kilograms, Decimal):
            raise ValidationError(
                f"Weight must be a Decimal, got {type(self.kilograms).__name__}"
            )
        if self.kilograms < Decimal("0"):
            raise ValidationError(
                f"Weight cannot be negative, got {self.kilograms}"
            )

    def __str__(self) -> str:
        return f"{self.kilograms} kg"

    @staticmethod
    def of(kilograms: str | float | int | Decimal) -> Weight:
        return Weight(_to_decimal(kilograms, "weight"))
