"""Small pure business rules."""

import re

EMAIL_PATTERN = re.compile(r"^[\w.+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}$")


def maximum(a: float, b: float) -> float:
    """Return the greater of two numbers, or `a` when they are equal."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    """Return the FizzBuzz word for `n`.

    "FizzBuzz" when `n` is divisible by 15, "Fizz" when divisible by 3 only,
    "Buzz" when divisible by 5 only, otherwise `n` as a decimal string.
    """
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def is_valid_email(email: str) -> bool:
    """Return True if `email` looks like a deliverable address.

    This is a deliberately small check rather than an RFC 5322 validator: a
    local part, a single "@", and a dotted domain ending in an alphabetic
    top-level domain of at least two letters.
    """
    return EMAIL_PATTERN.fullmatch(email) is not None
