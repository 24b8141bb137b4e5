"""Fetching product data from the product JSON API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .errors import JsonError, ParseError
from .product_api_models import ProductApiContent, parse_product_api_content

if TYPE_CHECKING:
    from .client import DlsiteClient

_log = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(
    field.alias or name for name, field in ProductApiContent.model_fields.items()
)


def _log_unknown_keys(index: int, entry: Any, product_id: str) -> None:
    if not isinstance(entry, dict):
        return
    for key in sorted(entry.keys() - _KNOWN_KEYS):
        _log.error("Ignored path: '[%d].%s' for '%s'", index, key, product_id)


def _decode_products(body: str, product_id: str) -> list[ProductApiContent]:
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Failed to parse json: {exc}") from exc
    if not isinstance(data, list):
        raise ParseError("Failed to parse json: invalid type: expected a sequence")

    products = []
    for index, entry in enumerate(data):
        _log_unknown_keys(index, entry, product_id)
        try:
            products.append(parse_product_api_content(entry))
        except JsonError as exc:
            raise ParseError(f"Failed to parse json: {exc}") from exc
    return products


@dataclass(frozen=True)
class ProductApiClient:
    """Retrieves product data from the JSON API used by the DLsite apps.

    Unlike the scraping client this returns no download count.
    """

    client: DlsiteClient

    async def get(self, product_id: str) -> ProductApiContent:
        """Fetch the details of ``product_id``."""
        body = await self.client.get(f"/api/=/product.json?workno={product_id}")
        products = _decode_products(body, product_id)
        if not products:
            raise ParseError("No product found")
        return products[0]