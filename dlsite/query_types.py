"""Enumerations used to build search queries."""

from __future__ import annotations

from enum import Enum


class _DisplayEnum(str, Enum):
    """String enum whose text form is its value."""

    def __str__(self) -> str:
        return self._value_

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class Language(_DisplayEnum):
    """Display language."""

    JP = "jp"


class SexCategory(_DisplayEnum):
    MALE = "male"
    FEMALE = "female"


class AnaFlg(_DisplayEnum):
    """Sales status."""

    OFF = "off"
    ON = "on"
    RESERVE = "reserve"
    ALL = "all"


class Order(_DisplayEnum):
    """Sort order of search results."""

    TREND = "trend"
    RELEASE = "release"
    RELEASE_D = "release_d"
    DL_D = "dl_d"
    DL = "dl"
    PRICE = "price"
    PRICE_D = "price_d"
    RATE_D = "rate_d"
    REVIEW_D = "review_d"


class OptionAndOr(_DisplayEnum):
    AND = "and"
    OR = "or"


class ReleaseTerm(_DisplayEnum):
    NONE = "None"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"
    OLD = "Old"