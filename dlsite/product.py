"""Fetching product data by scraping the product page and its companion endpoints."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any

from .ajax import ProductAjax, parse_ajax_response
from .errors import JsonError, ParseError, ServerError
from .product_html import ProductHtml, ProductPeople, parse_product_html
from .product_types import AgeCategory, Genre, WorkType
from .review import ProductReview, ReviewSortOrder, parse_product_review

if TYPE_CHECKING:
    from .client import DlsiteClient


@dataclass
class Product:
    """A product on DLsite."""

    id: str
    title: str
    work_type: WorkType
    released_at: date
    age_rating: AgeCategory | None
    genre: list[Genre]
    circle_id: str
    circle_name: str
    price: int
    series: str | None
    sale_count: int | None
    review_count: int | None
    rating: float | None
    rate_count: int | None
    images: list[str]
    people: ProductPeople
    reviewer_genre: list[tuple[Genre, int]] = field(default_factory=list)
    file_format: list[str] = field(default_factory=list)
    file_size: str | None = None
    product_format: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProductClient:
    """Retrieves product data by scraping the product page.

    The page itself gives the basic information; details come from the
    product info AJAX endpoint and reviewer genres from the review API.
    :meth:`get_all` combines all three.
    """

    client: DlsiteClient

    async def get_all(self, product_id: str) -> Product:
        """Fetch the complete information about ``product_id`` (e.g. ``RJ123456``)."""
        html_data, ajax_data, review_data = await asyncio.gather(
            self.get_html(product_id),
            self.get_ajax(product_id),
            self.get_review(product_id, 6, 1, True, ReviewSortOrder.NEW),
        )
        return Product(
            id=product_id,
            title=ajax_data.work_name,
            work_type=ajax_data.work_type,
            released_at=html_data.released_at,
            age_rating=html_data.age_rating,
            genre=html_data.genre,
            circle_id=html_data.circle_id,
            circle_name=html_data.circle_name,
            price=ajax_data.price,
            series=html_data.series,
            sale_count=ajax_data.dl_count,
            review_count=ajax_data.review_count,
            rating=ajax_data.rate_average_2dp,
            rate_count=ajax_data.rate_count,
            images=html_data.images,
            people=html_data.people,
            reviewer_genre=review_data.reviewer_genre_list or [],
            file_format=html_data.file_format,
            file_size=html_data.file_size,
            product_format=html_data.product_format,
        )

    async def get_html(self, product_id: str) -> ProductHtml:
        """Scrape and parse the product page."""
        body = await self.client.get(f"/work/=/product_id/{product_id}")
        return parse_product_html(body)

    async def get_ajax(self, product_id: str) -> ProductAjax:
        """Fetch detailed product information from the AJAX endpoint."""
        body = await self.client.get(f"/product/info/ajax?product_id={product_id}")
        products = parse_ajax_response(body)
        try:
            return products[product_id]
        except KeyError:
            raise ParseError("Failed to parse ajax json") from None

    async def get_ajax_multiple(self, product_ids: Iterable[str]) -> dict[str, ProductAjax]:
        """Fetch details of several products with a single request."""
        joined = ",".join(product_ids)
        body = await self.client.get(f"/product/info/ajax?product_id={joined}")
        return parse_ajax_response(body)

    async def get_review(
        self,
        product_id: str,
        limit: int = 6,
        page: int = 1,
        mix_pickup: bool = True,
        order: ReviewSortOrder = ReviewSortOrder.NEW,
    ) -> ProductReview:
        """Fetch reviews and reviewer genres.

        ``mix_pickup`` must be true for reviewer genres to be returned.
        """
        pickup = "true" if mix_pickup else "false"
        path = (
            f"/api/review?product_id={product_id}&limit={limit}&mix_pickup={pickup}"
            f"&page={page}&order={order.value}&locale=ja_JP"
        )
        body = await self.client.get(path)
        try:
            data: Any = json.loads(body)
        except json.JSONDecodeError as exc:
            raise JsonError(str(exc)) from exc

        fields = data if isinstance(data, dict) else {}
        success = fields.get("is_success")
        if not isinstance(success, bool):
            raise ParseError("Failed to parse revire json")
        if not success:
            message = fields.get("error_msg")
            if not isinstance(message, str):
                message = "Failed to get error message"
            raise ServerError(f"Failed to get review: {message}")

        return parse_product_review(data)