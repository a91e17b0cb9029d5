"""Interface for one-time security code generators."""

import abc

# pylint: disable=too-few-public-methods


class SecurityCodeGenerator(abc.ABC):
    """Contract for a one-time numeric security code generator."""

    @abc.abstractmethod
    def generate_code(self) -> int:
        """Generate a new one-time numeric code."""
