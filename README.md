# dlsite

An asynchronous Python client for DLsite. It fetches product details,
reviews, circle listings and search results, either by reading the store's
HTML pages or through the JSON product endpoint the store uses for its apps.
It is built on `httpx`, `beautifulsoup4` and `pydantic`.

## Installation

Install the project with pip. The `test` extra adds `pytest` and
`pytest-asyncio` for running the test suite.

## Quick start

```python
import asyncio

from dlsite.client import DlsiteClient


async def main():
    async with DlsiteClient() as client:
        product = await client.product().get_all("RJ403038")
        print(product.title, product.circle_name, product.released_at)


asyncio.run(main())
```

`DlsiteClient()` uses `https://www.dlsite.com/maniax` as its base URL, which
reaches every product; pass another base URL as the first argument if needed.
An existing `httpx.AsyncClient` can be given as `http_client=`; such a client
is left open, while one created by `DlsiteClient` is closed by `aclose()` or
on leaving the `async with` block.

`client.get(path)` fetches a path below the base URL and `client.get_raw(url)`
fetches an absolute URL; both return the response body as text.

## Two ways to read a product

**Scraping** (`client.product()`, a `ProductClient`) works as a browser would:
it parses the product page, then asks the store's ajax endpoint for prices and
sales counts and the review endpoint for reviewer genres.

- `get_all(product_id)` runs all three concurrently and combines them into a
  `Product` (`dlsite.product`).
- `get_html(product_id)` returns only the parsed page as a `ProductHtml`
  (`dlsite.product_html`), including a `ProductPeople` with authors,
  scenario writers, illustrators and voice actors.
- `get_ajax(product_id)` returns a `ProductAjax` (`dlsite.ajax`);
  `get_ajax_multiple(product_ids)` fetches several in one request and returns
  a dict keyed by product id.
- `get_review(product_id, limit=6, page=1, mix_pickup=True, order=ReviewSortOrder.NEW)`
  returns a `ProductReview` (`dlsite.review`). Reviewer genres are only
  returned when `mix_pickup` is true. `ReviewSortOrder` has `NEW` and `TOP`.

Product IDs must be upper case, for example `RJ123456`.

The parsers are usable on their own: `parse_product_html` and
`parse_product_people` take HTML text or a `BeautifulSoup` document,
`parse_ajax_response` takes the ajax response body, and
`parse_product_review` takes the decoded review JSON.

**API** (`client.product_api()`, a `ProductApiClient`) reads the JSON product
endpoint:

```python
content = await client.product_api().get("RJ01014447")
print(content.creators.voice_by[0].name)
```

It returns a `ProductApiContent` (`dlsite.product_api_models`); `creators`
and some other fields are `None` when the response does not carry them. This
endpoint does not report download counts. Keys in the response that the
model does not know are reported through the `dlsite.product_api` logger at
error level and otherwise ignored.

## Searching

```python
from dlsite.search_query import SearchProductQuery
from dlsite.query_types import Order, SexCategory

query = SearchProductQuery(
    sex_category=[SexCategory.MALE],
    keyword="ASMR",
    order=Order.TREND,
    per_page=50,
)
result = await client.search().search_product(query)
print(result.count, len(result.products))
```

`search_product` returns a `SearchResult` with `products`, the total `count`
and the `query_path` that was requested. Each `SearchProductItem` has its id,
title, circle, original and sale price, age category, work type, thumbnail
URL and, where the listing shows them, creator, download, rating and review
counts. `SearchProductQuery.to_path()` gives the path without making a
request, and `parse_search_html` parses a listing given as HTML.

The enumerations used in queries live in `dlsite.query_types` (`Language`,
`SexCategory`, `AnaFlg`, `Order`, `OptionAndOr`, `ReleaseTerm`) and
`dlsite.product_types` (`AgeCategory`, `WorkCategory`, `WorkType`,
`WorkTypeCategory`, `FileType`). `WorkType`, `WorkCategory`,
`WorkTypeCategory` and `FileType` accept values they do not know; such values
report `is_unknown()` as true.

## Circles

```python
from dlsite.circle_query import CircleQuery

result = await client.circle().get_circle("RG24350", CircleQuery(page=2))
```

`get_circle` also returns a `SearchResult`; the query may be omitted.

## Errors

Every failure raises a subclass of `dlsite.errors.DlsiteError`:

- `RequestError`: the HTTP request failed.
- `JsonError`: a scraping-side response (ajax, review or search) was not the
  JSON that was expected.
- `ParseError`: a page or document did not have the expected shape; the JSON
  product endpoint reports malformed responses this way too.
- `ServerError`: the review endpoint reported an error itself.

## What it does not do

The package is a library only: it has no command-line tool, does not log in,
buy or download works, and keeps no cache or local storage of fetched data.