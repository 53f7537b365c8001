"""Shared output shapes of the product enablement API.

Every product answers `enable`/`get` with the same `{product, service}`
envelope; products with configuration add a `configuration` object on top.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EnableOutputNested(BaseModel):
    model_config = ConfigDict(extra="ignore")

    object: str | None = None
    id: str | None = None


class EnableOutput(BaseModel):
    """Enablement status of one product on one service."""

    model_config = ConfigDict(extra="ignore")

    product: EnableOutputNested | None = Field(
        default=None,
        description="Product reference ({object: 'product', id}).",
    )
    service: EnableOutputNested | None = Field(
        default=None,
        description="Service reference ({object: 'service', id}).",
    )

    @property
    def product_id(self) -> str:
        if self.product is not None and self.product.id is not None:
            return self.product.id
        return ""

    @property
    def service_id(self) -> str:
        if self.service is not None and self.service.id is not None:
            return self.service.id
        return ""


class ConfigureOutput(EnableOutput):
    """Enablement envelope plus the product configuration.

    Products narrow `configuration` to their own model.
    """

    configuration: Any = None
