"""HTTP client for DLsite and access to its specialised sub-clients."""

from __future__ import annotations

import httpx

from .circle import CircleClient
from .errors import RequestError
from .product import ProductClient
from .product_api import ProductApiClient
from .search import SearchClient

DEFAULT_BASE_URL = "https://www.dlsite.com/maniax"


class DlsiteClient:
    """API client for DLsite.

    The default base URL reaches every product, so it rarely needs changing.
    An ``httpx.AsyncClient`` may be supplied; it is then left open by
    :meth:`aclose`, which only closes a client created here.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url
        self._owns_http_client = http_client is None
        self.http_client = (
            http_client if http_client is not None else httpx.AsyncClient(follow_redirects=True)
        )

    def __repr__(self) -> str:
        return f"DlsiteClient(base_url={self.base_url!r})"

    async def get(self, path: str) -> str:
        """GET ``path`` below the base URL and return the body."""
        return await self.get_raw(f"{self.base_url}{path}")

    async def get_raw(self, url: str) -> str:
        """GET the absolute ``url`` and return the body."""
        try:
            response = await self.http_client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RequestError(str(exc)) from exc
        return response.text

    def product(self) -> ProductClient:
        """Client that fetches products by scraping the product page."""
        return ProductClient(self)

    def product_api(self) -> ProductApiClient:
        """Client that fetches products from the JSON API."""
        return ProductApiClient(self)

    def circle(self) -> CircleClient:
        """Client that lists the works of circles."""
        return CircleClient(self)

    def search(self) -> SearchClient:
        """Client that searches products."""
        return SearchClient(self)

    async def aclose(self) -> None:
        """Close the HTTP client if it was created by this client."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> DlsiteClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()