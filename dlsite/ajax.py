"""Product data returned by the product info AJAX endpoint."""

from __future__ import annotations

import json
import re
from typing import Annotated, Any

from pydantic import BaseModel, PlainValidator, StrictBool, StrictStr, ValidationError

from .errors import JsonError
from .product_types import WorkType

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _i32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("expected an integer")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError("integer out of range")
    return value


def _i32_from_string(value: Any) -> int:
    if isinstance(value, str):
        if not _INTEGER.fullmatch(value):
            raise ValueError(f"invalid number {value!r}")
        value = int(value)
    return _i32(value)


def _optional_i32_from_string(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return _i32_from_string(value)


def _f64(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("expected a number")
    return float(value)


def _work_type(value: Any) -> WorkType:
    if not isinstance(value, str):
        raise ValueError("expected a string")
    return WorkType(value)


I32 = Annotated[int, PlainValidator(_i32)]
F64 = Annotated[float, PlainValidator(_f64)]
NumberFromString = Annotated[int, PlainValidator(_i32_from_string)]
OptionalNumberFromString = Annotated["int | None", PlainValidator(_optional_i32_from_string)]
WorkTypeField = Annotated[WorkType, PlainValidator(_work_type)]


class _Model(BaseModel):
    pass


class TranslationBonusLangs(_Model):
    child_count: I32
    price: I32
    price_in_tax: I32
    price_tax: I32
    recipient_available_count: I32
    recipient_max: I32
    status: StrictStr


class TranslationInfo(_Model):
    lang: StrictStr | None = None
    original_workno: StrictStr | None = None
    parent_workno: StrictStr | None = None
    production_trade_price_rate: I32
    is_volunteer: StrictBool
    translation_bonus_langs: list[None] | dict[str, TranslationBonusLangs]
    is_translation_bonus_child: StrictBool
    is_translation_agree: StrictBool
    is_original: StrictBool
    is_child: StrictBool
    is_parent: StrictBool
    child_worknos: list[StrictStr]


class Rank(_Model):
    rank_date: StrictStr
    rank: I32
    category: StrictStr
    term: StrictStr


class CountDetail(_Model):
    count: I32
    review_point: I32
    ratio: I32


class DlCountItem(_Model):
    edition_type: StrictStr
    lang: StrictStr
    workno: StrictStr
    display_order: I32
    display_label: StrictStr
    edition_id: I32
    label: StrictStr
    dl_count: NumberFromString


class VoicePack(_Model):
    parent_official_price: I32 | None = None
    child_price: I32
    parent_price: I32
    sum_point: I32
    sum_price: I32
    product_ids: list[StrictStr]
    child_official_price: None = None


class SalesEndInfo(_Model):
    can_download: StrictBool
    not_download: StrictBool
    end_date: dict[str, StrictStr]
    end_date_proto: StrictStr


class Bonus(_Model):
    end_date_str: StrictStr
    dist_flg: StrictStr
    description: StrictStr | None = None
    title: StrictStr
    end_date: StrictStr | None = None


class LimitedFreeTerms(_Model):
    workno: StrictStr
    id: I32
    start_date: StrictStr
    original_workno: StrictStr | None = None
    end_date: StrictStr


class ProductAjax(_Model):
    """Data of a product from the AJAX endpoint."""

    is_downloadable_touch: StrictBool | None = None
    dl_count_total: I32 | None = None
    rate_average: I32 | None = None
    rate_average_star: I32 | None = None
    title_work_count: I32 | None = None
    discount_rate: I32 | None = None
    discount_campaign_id: I32 | None = None
    title_volumn: I32 | None = None
    discount_calc_type: StrictStr | None = None
    bulkbuy_key: StrictStr | None = None
    campaign_id: StrictStr | None = None
    official_price_str: StrictStr | None = None
    discount_end_date: StrictStr | None = None
    discount_to: StrictStr | None = None
    is_tartget: StrictStr | None = None
    share_title: StrictStr | None = None
    samples: StrictStr | None = None
    product_id: StrictStr | None = None
    maker_name: StrictStr | None = None
    title_id: StrictStr | None = None
    title_name: StrictStr | None = None
    title_name_masked: StrictStr | None = None

    site_id: StrictStr
    site_id_touch: StrictStr
    price_str: StrictStr
    down_url: StrictStr
    work_name_masked: StrictStr
    work_image: StrictStr
    regist_date: StrictStr
    default_point_str: StrictStr
    options: StrictStr
    dlsiteplay_work: StrictBool
    is_discount: StrictBool
    is_pointup: StrictBool
    is_rental: StrictBool
    is_ana: StrictBool
    is_sale: StrictBool
    is_title_completed: StrictBool
    is_limit_work: StrictBool
    is_sold_out: StrictBool
    is_reserve_work: StrictBool
    is_reservable: StrictBool
    is_timesale: StrictBool
    is_free: StrictBool
    is_oly: StrictBool
    is_led: StrictBool
    is_noreduction: StrictBool
    is_wcc: StrictBool
    is_pack_work: StrictBool

    upgrade_min_price: I32
    limit_stock: I32
    timesale_stock: I32
    official_price: I32
    age_category: I32
    affiliate_deny: I32
    dl_format: I32
    wishlist_count: I32
    price_without_tax: I32
    default_point_rate: I32
    default_point: I32
    on_sale: I32

    currency_official_price: dict[str, F64] | None = None
    locale_official_price: dict[str, F64] | None = None
    book_type: dict[str, StrictStr | None] | None = None
    locale_official_price_str: dict[str, StrictStr] | None = None
    translators: list[ProductAjax] | None = None
    sales_end_info: SalesEndInfo | None = None
    voice_pack: VoicePack | None = None
    dl_count_items: list[DlCountItem] | None = None

    locale_price: dict[str, F64]
    currency_price: dict[str, F64]
    custom_genres: list[StrictStr]
    locale_price_str: dict[str, StrictStr]
    translation_info: TranslationInfo
    rank: list[Rank]
    rate_count_detail: list[CountDetail]
    bonuses: list[Bonus]
    limited_free_terms: list[LimitedFreeTerms]
    maker_id: StrictStr
    dl_count: OptionalNumberFromString
    review_count: OptionalNumberFromString
    rate_average_2dp: F64 | None = None
    rate_count: I32 | None = None
    work_name: StrictStr
    price: I32
    work_type: WorkTypeField

    product_point_rate: Any = None
    discount_caption: Any = None
    gift: list[Any]
    work_rentals: list[Any]


ProductAjax.model_rebuild()


def parse_product_ajax(data: Any) -> ProductAjax:
    """Build a :class:`ProductAjax` from one decoded product entry."""
    try:
        return ProductAjax.model_validate(data)
    except ValidationError as exc:
        raise JsonError(str(exc)) from exc


def parse_ajax_response(text: str) -> dict[str, ProductAjax]:
    """Decode an AJAX response body, a JSON object keyed by product id."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise JsonError(str(exc)) from exc
    if not isinstance(data, dict):
        raise JsonError("invalid type: expected an object")
    return {product_id: parse_product_ajax(entry) for product_id, entry in data.items()}