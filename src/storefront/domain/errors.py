"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Store related errors
# ============================================================================


class InvalidStoreHoursError(DomainError, ValueError):
    """Raised when opening hours do not describe a non-empty range within a day."""

    def __init__(self, opening_hour: int, closing_hour: int) -> None:
        super().__init__(
            f"Invalid store hours: opening hour {opening_hour} must be before "
            f"closing hour {closing_hour}, both within 0-24."
        )
        self.opening_hour = opening_hour
        self.closing_hour = closing_hour
