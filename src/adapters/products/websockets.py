"""WebSockets product enablement."""

from __future__ import annotations

from adapters import productcore
from core.domain.products import EnableOutput
from core.interfaces import APIClient

PRODUCT_ID = "websockets"
PRODUCT_NAME = "WebSockets"


def get(client: APIClient, service_id: str) -> EnableOutput:
    """Gets the status of the WebSockets product on the service."""

    return productcore.get(client, EnableOutput, product_id=PRODUCT_ID, service_id=service_id)


def enable(client: APIClient, service_id: str) -> EnableOutput:
    """Enables the WebSockets product on the service."""

    return productcore.put(client, EnableOutput, product_id=PRODUCT_ID, service_id=service_id)


def disable(client: APIClient, service_id: str) -> None:
    """Disables the WebSockets product on the service."""

    productcore.delete(client, product_id=PRODUCT_ID, service_id=service_id)
