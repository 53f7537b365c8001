"""Product enablement modules.

Each module exposes `PRODUCT_ID`, `PRODUCT_NAME`, `get`, `enable` and
`disable` (plus configuration calls where the product has them), all built on
`adapters.productcore`.
"""

from types import ModuleType

from adapters.products import (
    api_discovery,
    bot_management,
    brotli_compression,
    ddos_protection,
    domain_inspector,
    fanout,
    image_optimizer,
    log_explorer_insights,
    ngwaf,
    origin_inspector,
    websockets,
)

PRODUCTS: dict[str, ModuleType] = {
    module.PRODUCT_ID: module
    for module in (
        api_discovery,
        bot_management,
        brotli_compression,
        ddos_protection,
        domain_inspector,
        fanout,
        image_optimizer,
        log_explorer_insights,
        ngwaf,
        origin_inspector,
        websockets,
    )
}

__all__ = [
    "PRODUCTS",
    "api_discovery",
    "bot_management",
    "brotli_compression",
    "ddos_protection",
    "domain_inspector",
    "fanout",
    "image_optimizer",
    "log_explorer_insights",
    "ngwaf",
    "origin_inspector",
    "websockets",
]
