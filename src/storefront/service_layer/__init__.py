"""Service layer for STOREFRONT.

Implements application use-cases: pricing, shipping, order submission, account
sign-up and login, page rendering, and store-hour/discount checks. Each use-case
receives the collaborators it needs as arguments; wiring happens in
`storefront.bootstrap`.

Dependency rule: may import `storefront.domain` and `storefront.interfaces`,
but not `storefront.adapters` or `storefront.entrypoints`.
"""
