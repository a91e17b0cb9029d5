"""Entrypoints (inbound adapters) for STOREFRONT.

Expose the application to the outside world. Parse and validate inputs, call
the bootstrapped use-cases, and present results.

Dependency rule: may import `storefront.bootstrap` and `storefront.domain`;
avoid importing `storefront.adapters` directly.
"""
