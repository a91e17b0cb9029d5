"""Module including value objects used across the domain layer."""

from dataclasses import dataclass

from .errors import InvalidStoreHoursError

PAYMENT_ERROR = "payment_error"


@dataclass(frozen=True)
class Order:
    """Value object representing an order awaiting payment."""

    total_amount: float


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of submitting an order.

    `error` is set if and only if the submission failed.
    """

    success: bool
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("A failed result must carry an error")

    @classmethod
    def ok(cls) -> "SubmitResult":
        """Build a successful result."""
        return cls(success=True)

    @classmethod
    def payment_failed(cls) -> "SubmitResult":
        """Build the result reported when the payment was not accepted."""
        return cls(success=False, error=PAYMENT_ERROR)

    def as_dict(self) -> dict[str, object]:
        """Render the result as a plain mapping, omitting `error` on success."""
        if self.success:
            return {"success": True}
        return {"success": False, "error": self.error}


@dataclass(frozen=True)
class StoreHours:
    """Value object representing the daily opening hours of the store.

    The store is open from `opening_hour` (inclusive) until `closing_hour`
    (exclusive), both in local time.
    """

    opening_hour: int = 8
    closing_hour: int = 20

    def __post_init__(self) -> None:
        if not 0 <= self.opening_hour < self.closing_hour <= 24:
            raise InvalidStoreHoursError(self.opening_hour, self.closing_hour)

    def includes(self, hour: int) -> bool:
        """Return True if the store is open during `hour`."""
        return self.opening_hour <= hour < self.closing_hour
