"""Product search and parsing of search result listings."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bs4 import BeautifulSoup, Tag

from .errors import JsonError, ParseError, require
from .product_types import AgeCategory, WorkType
from .search_query import SearchProductQuery

if TYPE_CHECKING:
    from .client import DlsiteClient

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class SearchProductItem:
    """One product as shown in a search result listing."""

    id: str
    title: str
    creator: str | None
    creator_omitted: bool | None
    circle_name: str
    circle_id: str
    dl_count: int | None
    rate_count: int | None
    review_count: int | None
    price_original: int
    price_sale: int | None
    age_category: AgeCategory
    work_type: WorkType
    thumbnail_url: str
    rating: float | None


@dataclass
class SearchResult:
    """A page of search results."""

    products: list[SearchProductItem]
    count: int
    query_path: str


def _parse_i32(text: str, message: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ParseError(message)
    number = int(text)
    if not _I32_MIN <= number <= _I32_MAX:
        raise ParseError(message)
    return number


def _parse_count_str(text: str) -> int:
    cleaned = text.replace("(", "").replace(")", "").replace(",", "")
    return _parse_i32(cleaned, "Failed to parse string to count")


def _parse_num_str(text: str) -> int:
    return _parse_i32(text.replace(",", ""), "Failed to parse string to number")


def _first_text(element: Tag) -> str | None:
    """Return the first text node below ``element``, whitespace included."""
    return next(iter(element.strings), None)


def _classes(element: Tag) -> list[str] | None:
    value = element.get("class")
    if value is None:
        return None
    if isinstance(value, str):
        return value.split(" ")
    return list(value)


def _age_category(item: Tag) -> AgeCategory:
    span = item.select_one(".work_genre span")
    if span is None:
        return AgeCategory.ADULT
    title = span.get("title")
    if title is None:
        raise ParseError("Age category parse error")
    if title == "全年齢":
        return AgeCategory.GENERAL
    if title == "R-15":
        return AgeCategory.R15
    raise ParseError("Age category parse error: invalid title")


def _circle_id(maker: Tag) -> str:
    href = require(maker.get("href"), "Failed to get maker link")
    return href.split("/")[-1].split(".")[0]


def _creator(author: Tag | None) -> tuple[str | None, bool | None]:
    if author is None:
        return None, None
    link = require(author.select_one("a"), "Failed to find creator")
    name = require(_first_text(link), "Failed to find creator")
    classes = require(_classes(author), "Failed to find creator")
    return str(name), "omit" in classes


def _work_type(item: Tag) -> WorkType:
    category = require(item.select_one(".work_category"), "Failed to find work category")
    classes = require(_classes(category), "Failed to find worktype")
    for name in classes:
        if name.startswith("type_"):
            work_type = WorkType(name[len("type_"):])
            if not work_type.is_unknown():
                return work_type
    return WorkType("")


def _thumbnail_url(item: Tag) -> str:
    image = require(item.select_one(".work_thumb_inner > img"), "Failed to find thumbnail")
    source = image.get("src")
    if source is None:
        source = image.get("data-src")
    if source is None:
        raise ParseError("Failed to find thumbnail")
    return f"https:{source}"


def _rating(item: Tag) -> float | None:
    stars = item.select_one(".work_rating .star_rating")
    if stars is None:
        return None
    classes = require(_classes(stars), "Failed to get rating")
    for name in classes:
        if name.startswith("star_"):
            try:
                return float(name[len("star_"):]) / 10.0
            except ValueError:
                continue
    return None


def _parse_item(item: Tag) -> SearchProductItem:
    product = require(item.select_one("div[data-product_id]"), "Failed to find data element")
    maker = require(item.select_one(".maker_name a"), "Failed to find maker element")
    author = item.select_one(".author")
    price = require(
        item.select_one(".work_price .work_price_base"), "Failed to find price element"
    )
    struck = item.select_one(".work_price_wrap .strike .work_price_base")
    sale_price, original_price = (price, struck) if struck is not None else (None, price)
    product_id = str(require(product.get("data-product_id"), "Failed to get product id"))

    title_link = require(item.select_one(".work_name a[title]"), "Failed to get title")
    title = str(title_link["title"])
    age_category = _age_category(item)
    circle_name = str(_first_text(maker) or "")
    circle_id = _circle_id(maker)
    creator, creator_omitted = _creator(author)

    dl_element = item.select_one('.work_dl span[class*="dl_count"]')
    dl_count = rate_count = None
    if dl_element is not None:
        dl_text = require(_first_text(dl_element), "Failed to get dl count")
        dl_count = _parse_i32(dl_text.replace(",", ""), "Invalid dl count")
        rate_text = require(_first_text(dl_element), "Failed to get rate count")
        rate_count = _parse_count_str(rate_text)

    review_element = item.select_one(".work_review div a")
    review_count = None
    if review_element is not None:
        review_text = require(_first_text(review_element), "Failed to get review count")
        review_count = _parse_count_str(review_text)

    price_original = _parse_num_str(require(_first_text(original_price), "Failed to find price"))
    price_sale = None
    if sale_price is not None:
        price_sale = _parse_num_str(require(_first_text(sale_price), "Failed to find price"))

    return SearchProductItem(
        id=product_id,
        title=title,
        creator=creator,
        creator_omitted=creator_omitted,
        circle_name=circle_name,
        circle_id=circle_id,
        dl_count=dl_count,
        rate_count=rate_count,
        review_count=review_count,
        price_original=price_original,
        price_sale=price_sale,
        age_category=age_category,
        work_type=_work_type(item),
        thumbnail_url=_thumbnail_url(item),
        rating=_rating(item),
    )


def parse_search_html(html: str) -> list[SearchProductItem]:
    """Parse the products of a search result listing."""
    soup = BeautifulSoup(html, "html.parser")
    return [_parse_item(item) for item in soup.select("#search_result_img_box > li")]


def _decode_search_response(text: str) -> tuple[str, int]:
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonError(str(exc)) from exc
    if not isinstance(data, dict):
        raise JsonError("invalid type: expected an object")
    if "search_result" not in data:
        raise JsonError("missing field `search_result`")
    if "page_info" not in data:
        raise JsonError("missing field `page_info`")
    search_result = data["search_result"]
    if not isinstance(search_result, str):
        raise JsonError("invalid type for `search_result`: expected str")
    page_info = data["page_info"]
    if not isinstance(page_info, dict):
        raise JsonError("invalid type for `page_info`: expected an object")
    if "count" not in page_info:
        raise JsonError("missing field `count`")
    count = page_info["count"]
    if isinstance(count, bool) or not isinstance(count, int):
        raise JsonError("invalid type for `count`: expected int")
    if not _I32_MIN <= count <= _I32_MAX:
        raise JsonError("invalid value for `count`: out of range")
    return search_result, count


@dataclass(frozen=True)
class SearchClient:
    """Searches products on DLsite."""

    client: DlsiteClient

    async def search_product(self, options: SearchProductQuery) -> SearchResult:
        """Run a product search and parse the returned page."""
        query_path = options.to_path()
        body = await self.client.get(query_path)
        html, count = _decode_search_response(body)
        return SearchResult(
            products=parse_search_html(html),
            count=count,
            query_path=query_path,
        )