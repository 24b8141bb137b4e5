"""Product reviews returned by the review API."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import JsonError
from .product_types import Genre

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class ReviewSortOrder(Enum):
    """Sort order of reviews; the value is the one sent to the API."""

    NEW = "regist_d"
    TOP = "top"


@dataclass
class Review:
    member_review_id: str
    workno: str
    reviewer_id: str
    status: str
    recommend: str
    spoiler: str
    review_title: str
    review_text: str
    entry_date: str
    regist_date: str
    good_review: str
    bad_review: str
    reviewer_status: str
    is_purchased: str
    rate_num: str
    reviewer_rank: str
    circle_id: str | None = None
    nick_name: str | None = None
    popularity: str | None = None
    rate: str | None = None
    circle_name: str | None = None
    top_sort_key: str | None = None
    genre: list[Genre] = field(default_factory=list)


@dataclass
class ProductReview:
    is_success: bool = False
    error_msg: str = ""
    review_list: list[Review] = field(default_factory=list)
    reviewer_genre_list: list[tuple[Genre, int]] | None = None


_REQUIRED_REVIEW_FIELDS = (
    "member_review_id",
    "workno",
    "reviewer_id",
    "status",
    "recommend",
    "spoiler",
    "review_title",
    "review_text",
    "entry_date",
    "regist_date",
    "good_review",
    "bad_review",
    "reviewer_status",
    "is_purchased",
    "rate_num",
    "reviewer_rank",
)
_OPTIONAL_REVIEW_FIELDS = (
    "circle_id",
    "nick_name",
    "popularity",
    "rate",
    "circle_name",
    "top_sort_key",
)


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise JsonError(f"invalid type for {what}: expected an object")
    return value


def _get(data: Mapping[str, Any], key: str, kind: type, *, optional: bool = False) -> Any:
    if key not in data:
        if optional:
            return None
        raise JsonError(f"missing field `{key}`")
    value = data[key]
    if value is None and optional:
        return None
    if not isinstance(value, kind):
        raise JsonError(f"invalid type for `{key}`: expected {kind.__name__}")
    return value


def _parse_i32(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        return 0
    number = int(text)
    return number if _I32_MIN <= number <= _I32_MAX else 0


def _parse_review_genres(data: Mapping[str, Any]) -> list[Genre]:
    genres = _get(data, "genre", Mapping, optional=True)
    if genres is None:
        return []
    result = []
    for genre_id, name in genres.items():
        if not isinstance(name, str):
            raise JsonError("invalid type for genre name: expected str")
        result.append(Genre(name=name, id=genre_id))
    return result


def _parse_review(value: Any) -> Review:
    data = _mapping(value, "review")
    required = {key: _get(data, key, str) for key in _REQUIRED_REVIEW_FIELDS}
    optional = {key: _get(data, key, str, optional=True) for key in _OPTIONAL_REVIEW_FIELDS}
    return Review(**required, **optional, genre=_parse_review_genres(data))


def _parse_reviewer_genres(data: Mapping[str, Any]) -> list[tuple[Genre, int]] | None:
    if "reviewer_genre_list" not in data:
        raise JsonError("missing field `reviewer_genre_list`")
    items = data["reviewer_genre_list"]
    if items is None:
        return None
    if not isinstance(items, list):
        raise JsonError("invalid type for `reviewer_genre_list`: expected list")
    result = []
    for item in items:
        entry = _mapping(item, "reviewer genre")
        genre = Genre(name=_get(entry, "name", str), id=_get(entry, "genre", str))
        result.append((genre, _parse_i32(_get(entry, "genre_count", str))))
    return result


def parse_product_review(data: Any) -> ProductReview:
    """Build a :class:`ProductReview` from the decoded JSON of the review API."""
    body = _mapping(data, "review response")
    return ProductReview(
        is_success=_get(body, "is_success", bool),
        error_msg=_get(body, "error_msg", str),
        review_list=[_parse_review(item) for item in _get(body, "review_list", list)],
        reviewer_genre_list=_parse_reviewer_genres(body),
    )