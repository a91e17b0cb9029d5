"""STOREFRONT

Business rules for a small online store: pricing, shipping quotes, order
submission, account sign-up and login, store hours and seasonal discounts.
Every external collaborator is injected so it can be swapped for a test double.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
