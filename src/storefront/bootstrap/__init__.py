"""Bootstrap (composition root) for STOREFRONT.

Assembles the application at runtime: builds concrete adapters from
configuration and binds them into the service-layer use-cases.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `storefront.adapters`, `storefront.service_layer`,
  `storefront.interfaces`, `storefront.domain`, and `storefront.config`.
- Inner layers must not import `storefront.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
