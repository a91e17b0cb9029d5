"""Security code generators for STOREFRONT."""

import secrets
import threading

from storefront.interfaces.security import SecurityCodeGenerator

# pylint: disable=too-few-public-methods


class RandomSecurityCodeGenerator(SecurityCodeGenerator):
    """Cryptographically random codes with a fixed number of digits.

    Codes never start with zero, so `str(code)` always has exactly `digits`
    characters.
    """

    def __init__(self, digits: int = 6) -> None:
        if digits < 1:
            raise ValueError(f"digits must be positive, got {digits}")
        self._low = 10 ** (digits - 1)
        self._high = 10**digits

    def generate_code(self) -> int:
        """Generate a new random code."""
        return self._low + secrets.randbelow(self._high - self._low)


class SequentialSecurityCodeGenerator(SecurityCodeGenerator):
    """A generator that produces consecutive six-digit codes.

    After 999999 the sequence wraps around to 100000.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    FIRST = 100000
    LAST = 999999

    def __init__(self, start: int = FIRST) -> None:
        if not self.FIRST <= start <= self.LAST:
            raise ValueError(f"start must be a six-digit code, got {start}")
        self._lock = threading.Lock()
        self._next = start

    def generate_code(self) -> int:
        """Generate the next code in sequence."""
        with self._lock:
            code = self._next
            self._next = code + 1 if code < self.LAST else self.FIRST
            return code
