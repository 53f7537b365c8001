"""DDoS Protection product enablement and configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from adapters import productcore
from core.domain.products import ConfigureOutput as _ConfigureOutput
from core.domain.products import EnableOutput
from core.errors import MissingModeError
from core.interfaces import APIClient

PRODUCT_ID = "ddos_protection"
PRODUCT_NAME = "DDoS Protection"


class ConfigureInput(BaseModel):
    mode: str = ""


class Configuration(BaseModel):
    model_config = ConfigDict(extra="ignore")

    mode: str | None = None


class ConfigureOutput(_ConfigureOutput):
    configuration: Configuration | None = None


def get(client: APIClient, service_id: str) -> EnableOutput:
    """Gets the status of the DDoS Protection product on the service."""

    return productcore.get(client, EnableOutput, product_id=PRODUCT_ID, service_id=service_id)


def enable(client: APIClient, service_id: str) -> EnableOutput:
    """Enables the DDoS Protection product on the service."""

    return productcore.put(client, EnableOutput, product_id=PRODUCT_ID, service_id=service_id)


def disable(client: APIClient, service_id: str) -> None:
    """Disables the DDoS Protection product on the service."""

    productcore.delete(client, product_id=PRODUCT_ID, service_id=service_id)


def get_configuration(client: APIClient, service_id: str) -> ConfigureOutput:
    return productcore.get(
        client,
        ConfigureOutput,
        product_id=PRODUCT_ID,
        service_id=service_id,
        url_components=["configuration"],
    )


def update_configuration(client: APIClient, service_id: str, i: ConfigureInput) -> ConfigureOutput:
    """Updates the mode (e.g. 'block', 'log', 'off') of DDoS Protection on the service."""

    if not i.mode:
        raise MissingModeError()

    return productcore.patch(
        client,
        ConfigureOutput,
        product_id=PRODUCT_ID,
        service_id=service_id,
        url_components=["configuration"],
        input=i,
    )
