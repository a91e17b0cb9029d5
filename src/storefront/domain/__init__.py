"""Domain layer for STOREFRONT.

Contains business rules: value objects, domain errors, and small pure rules
(comparison, FizzBuzz, email validation). This package is deliberately
technology-agnostic.

Dependency rule: do not import from `storefront.adapters` or
`storefront.entrypoints`.
"""
