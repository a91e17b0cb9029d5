"""Adapters (infrastructure) for STOREFRONT.

Provide concrete implementations of the collaborator interfaces (exchange
rates, shipping quotes, payments, email, security codes, analytics, clocks).

Dependency rule: may import `storefront.domain` and `storefront.interfaces`;
the domain must not import this package.
"""
