"""Next-Gen WAF product enablement and configuration.

Enabling NGWAF links the service to an existing workspace, so `enable`
requires a workspace ID.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from adapters import productcore
from core.domain.products import ConfigureOutput as _ConfigureOutput
from core.domain.products import EnableOutput
from core.errors import MissingWorkspaceIDError
from core.interfaces import APIClient

PRODUCT_ID = "ngwaf"
PRODUCT_NAME = "Next-Gen WAF"


class EnableInput(BaseModel):
    workspace_id: str = Field(default="", description="Workspace the service is linked to.")


class ConfigureInput(BaseModel):
    workspace_id: str | None = None
    traffic_ramp: str | None = Field(
        default=None,
        description="Percentage of traffic inspected by the WAF (e.g. '100').",
    )


class Configuration(BaseModel):
    model_config = ConfigDict(extra="ignore")

    workspace_id: str | None = None
    traffic_ramp: str | None = None


class ConfigureOutput(_ConfigureOutput):
    configuration: Configuration | None = None


def get(client: APIClient, service_id: str) -> EnableOutput:
    """Gets the status of the Next-Gen WAF product on the service."""

    return productcore.get(client, EnableOutput, product_id=PRODUCT_ID, service_id=service_id)


def enable(client: APIClient, service_id: str, i: EnableInput) -> EnableOutput:
    """Enables the Next-Gen WAF product on the service."""

    if not i.workspace_id:
        raise MissingWorkspaceIDError()

    return productcore.put(client, EnableOutput, product_id=PRODUCT_ID, service_id=service_id, input=i)


def disable(client: APIClient, service_id: str) -> None:
    """Disables the Next-Gen WAF product on the service."""

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
    return productcore.patch(
        client,
        ConfigureOutput,
        product_id=PRODUCT_ID,
        service_id=service_id,
        url_components=["configuration"],
        input=i,
    )
