"""Generic operations of the product enablement API.

All products expose the same four verbs against
`/enabled-products/v1/{product_id}/services/{service_id}[/...]`; the product
modules only choose the output model (and input, for put/patch).
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from pydantic import BaseModel

from adapters.http_client import decode_response, expect_no_content
from core.codec import encode_json
from core.errors import MissingProductIDError, MissingServiceIDError
from core.interfaces import APIClient
from core.paths import to_safe_url

O = TypeVar("O", bound=BaseModel)


def _product_path(product_id: str, service_id: str, url_components: Sequence[str]) -> str:
    if not product_id:
        raise MissingProductIDError()
    if not service_id:
        raise MissingServiceIDError()
    return to_safe_url("enabled-products", "v1", product_id, "services", service_id, *url_components)


def get(
    client: APIClient,
    output_type: type[O],
    *,
    product_id: str,
    service_id: str,
    url_components: Sequence[str] = (),
) -> O:
    path = _product_path(product_id, service_id, url_components)
    resp = client.get(path)
    return decode_response(resp, output_type)


def put(
    client: APIClient,
    output_type: type[O],
    *,
    product_id: str,
    service_id: str,
    url_components: Sequence[str] = (),
    input: BaseModel | None = None,
) -> O:
    path = _product_path(product_id, service_id, url_components)
    if input is None:
        resp = client.put(path)
    else:
        resp = client.put_json(path, encode_json(input))
    return decode_response(resp, output_type)


def patch(
    client: APIClient,
    output_type: type[O],
    *,
    product_id: str,
    service_id: str,
    url_components: Sequence[str] = (),
    input: BaseModel | None = None,
) -> O:
    path = _product_path(product_id, service_id, url_components)
    resp = client.patch_json(path, encode_json(input))
    return decode_response(resp, output_type)


def delete(
    client: APIClient,
    *,
    product_id: str,
    service_id: str,
    url_components: Sequence[str] = (),
) -> None:
    path = _product_path(product_id, service_id, url_components)
    resp = client.delete(path)
    expect_no_content(resp)
