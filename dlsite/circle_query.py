"""Query options for listing the works of a circle."""

from __future__ import annotations

from dataclasses import dataclass

from .paths import array_segment, option_segment
from .query_types import Order


@dataclass
class CircleQuery:
    """Options of a circle profile listing."""

    order: Order | None = None
    options: list[str] | None = None
    per_page: int | None = None
    """30, 50 or 100."""
    page: int | None = None

    def to_path(self, circle_id: str) -> str:
        """Build the request path listing the works of ``circle_id``."""
        return "".join(
            [
                "/circle/profile/=",
                array_segment("options", self.options),
                option_segment("per_page", self.per_page),
                option_segment("per_page", self.per_page),
                "/show_type/3/hd/1/without_order/1",
                option_segment("page", self.page),
                f"/maker_id/{circle_id}.html",
                option_segment("order", self.order),
            ]
        )