"""Listing the works of a circle."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup

from .circle_query import CircleQuery
from .errors import ParseError, require
from .search import SearchResult, parse_search_html

if TYPE_CHECKING:
    from .client import DlsiteClient

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_count(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ParseError("Failed to parse total item count")
    count = int(text)
    if not _I32_MIN <= count <= _I32_MAX:
        raise ParseError("Failed to parse total item count")
    return count


@dataclass(frozen=True)
class CircleClient:
    """Fetches circle-related content from DLsite."""

    client: DlsiteClient

    async def get_circle(self, circle_id: str, options: CircleQuery | None = None) -> SearchResult:
        """List the works of ``circle_id``."""
        query = options if options is not None else CircleQuery()
        query_path = query.to_path(circle_id)
        html = await self.client.get(query_path)
        soup = BeautifulSoup(html, "html.parser")

        product_list = require(soup.select_one("#search_result_list"), "Product list not found")
        total = require(soup.select_one(".page_total > strong"), "No total item count found")
        count_text = require(next(iter(total.strings), None), "No total item count found 2")
        count = _parse_count(str(count_text))

        return SearchResult(
            products=parse_search_html(str(product_list)),
            count=count,
            query_path=query_path,
        )