"""Product data returned by the product JSON API."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainValidator,
    StrictBool,
    StrictStr,
    ValidationError,
    WrapValidator,
)

from .ajax import F64, I32, WorkTypeField
from .errors import JsonError
from .product_types import AgeCategory, FileType, WorkCategory

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _i64(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("expected an integer")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError("integer out of range")
    return value


def _age_category(value: Any) -> AgeCategory:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("expected an integer")
    try:
        return AgeCategory(value)
    except ValueError:
        raise ValueError(f"invalid age category {value}") from None


def _open_enum(kind: type) -> Any:
    def validate(value: Any) -> Any:
        if not isinstance(value, str):
            raise ValueError("expected a string")
        return kind(value)

    return validate


def _default_on_error(value: Any, handler: Any) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return None


def _one_or_many(value: Any) -> Any:
    return value if isinstance(value, list) else [value]


I64 = Annotated[int, PlainValidator(_i64)]
AgeCategoryField = Annotated[AgeCategory, PlainValidator(_age_category)]
FileTypeField = Annotated[FileType, PlainValidator(_open_enum(FileType))]
WorkCategoryField = Annotated[WorkCategory, PlainValidator(_open_enum(WorkCategory))]

_LEFT_FIRST = Field(union_mode="left_to_right")


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class LimitedFree(_Model):
    end_date: StrictStr
    id: I32
    original_workno: StrictStr | None = None
    workno: StrictStr
    start_date: StrictStr


class WorkPackChild(_Model):
    inservice: I32
    product_id: StrictStr
    product_name: StrictStr
    work_name: StrictStr
    workno: StrictStr


class LanguageEdition(_Model):
    display_order: I32
    edition_id: I32
    edition_type: StrictStr
    label: StrictStr
    lang: StrictStr
    workno: StrictStr


class FrameSort(_Model):
    discount: StrictStr
    pickup: StrictStr
    pickup_free: StrictStr
    related: StrictStr


class Options(_Model):
    end_date: StrictStr | None = None
    start_date: StrictStr | None = None
    frame_sort: FrameSort
    pickups: list[StrictStr] | None = None
    timesale_search: StrictBool | None = None


class Discount(_Model):
    access_key: StrictStr | None = None
    campaign_id: I32
    campaign_price: I32
    del_flg: StrictStr
    discount_rate: I32
    end_date: I32
    id: StrictStr
    insert_date: StrictStr
    insert_id: StrictStr | None = None
    limit_dl_count: I32 | None = None
    note: Any = None
    options: Annotated[list[Options] | Options, _LEFT_FIRST]
    restore_price: I32
    restore_trade_price: I32 | None = None
    show_end_date_days: StrictStr
    start_date: I32
    status: StrictStr
    title: StrictStr
    trade_price_type: StrictStr | None = None
    update_date: StrictStr
    update_id: StrictStr | None = None
    workno: StrictStr


class Coupling(_Model):
    coupling: StrictStr
    coupling_id: StrictStr
    show_coupling: StrictStr


class SpecifiedVolumeSet(_Model):
    discount_price: I32
    start_date: StrictStr
    id: I32
    end_date: StrictStr


class Content(_Model):
    """A file contained in a product."""

    workno: StrictStr
    type_: StrictStr = Field(alias="type")
    file_name: StrictStr
    file_size: StrictStr
    file_size_unit: StrictStr | None = None
    width: StrictStr | None = None
    height: StrictStr | None = None
    hash: StrictStr | None = None
    display_mode: StrictStr | None = None
    update_date: StrictStr
    id: StrictStr
    upper_work_files_type: StrictStr = Field(alias="upper(work_files.type)")
    extension: StrictStr
    name_url: StrictStr | None = None
    title: StrictStr | None = None
    filesize: StrictStr | None = None
    name: StrictStr | None = None
    filepath: StrictStr | None = None
    size: StrictStr | None = None


class File(_Model):
    workno: StrictStr | None = None
    type_: StrictStr | None = Field(default=None, alias="type")
    file_name: StrictStr | None = None
    file_size: StrictStr | None = None
    file_size_unit: StrictStr | None = None
    width: StrictStr | None = None
    height: StrictStr | None = None
    hash: StrictStr | None = None
    display_mode: StrictStr | None = None
    update_date: StrictStr | None = None
    id: StrictStr | None = None
    upper_work_files_type: StrictStr | None = Field(
        default=None, alias="upper(work_files.type)"
    )
    extension: StrictStr | None = None
    relative_url: StrictStr | None = None
    path_short: StrictStr | None = None
    url: StrictStr
    resize_url: StrictStr | None = None


class Image(_Model):
    id: StrictStr | None = None
    file_name: StrictStr | None = None
    height: StrictStr | None = None
    update_date: StrictStr | None = None
    file_size: StrictStr | None = None
    hash: StrictStr | None = None
    display_mode: StrictStr | None = None
    relative_url: StrictStr | None = None
    file_size_unit: StrictStr | None = None
    width: StrictStr | None = None
    path_short: StrictStr | None = None
    upper_work_files_type: StrictStr | None = Field(
        default=None, alias="upper(work_files.type)"
    )
    type_: StrictStr | None = Field(default=None, alias="type")
    resize_url: StrictStr | None = None
    workno: StrictStr | None = None
    extension: StrictStr | None = None
    url: StrictStr


class EpubSample(_Model):
    volume_type: StrictStr
    volume: I64 | None = None


class WorkOption(_Model):
    id: StrictStr
    options_id: StrictStr
    value: StrictStr
    name: StrictStr
    name_en: StrictStr
    display_sentence: StrictStr | None = None
    display_sentence_en: StrictStr | None = None
    category_id: StrictStr
    category: StrictStr


class CustomGenre(_Model):
    genre_key: StrictStr
    lang: StrictStr
    name: StrictStr
    layout: Any
    status: StrictStr
    is_active: I64
    start_date: StrictStr
    end_date: StrictStr


class TranslationBonus(_Model):
    child_count: I32
    price: I32
    price_in_tax: I32
    price_tax: I32
    recipient_available_count: I32
    recipient_max: I32
    status: StrictStr


class TranslationInfo(_Model):
    is_translation_agree: StrictBool
    is_volunteer: StrictBool
    is_original: StrictBool
    is_parent: StrictBool
    is_child: StrictBool
    original_workno: StrictStr | None = None
    parent_workno: StrictStr | None = None
    child_worknos: list[StrictStr]
    lang: StrictStr | None = None
    translation_bonus_langs: Annotated[
        dict[str, TranslationBonus] | list[TranslationBonus], _LEFT_FIRST
    ]
    is_translation_bonus_child: StrictBool


class ReserveWork(_Model):
    workno: StrictStr
    status: StrictStr
    start_date: StrictStr
    end_date: StrictStr | None = None
    bonus_workno: StrictStr | None = None
    bonus_end_date: StrictStr | None = None
    tag: StrictStr | None = None
    display_order: StrictStr
    note: StrictStr | None = None
    del_flg: StrictStr
    update_date: StrictStr
    insert_date: StrictStr | None = None


class BookType(_Model):
    id: StrictStr
    options_id: StrictStr
    value: StrictStr
    name: StrictStr
    name_en: StrictStr
    display_sentence: StrictStr | None = None
    display_sentence_en: StrictStr | None = None
    category_id: StrictStr
    category: StrictStr


class GenreApi(_Model):
    name: StrictStr
    id: I64
    search_val: StrictStr
    name_base: StrictStr


class WorkBrowseSetting(_Model):
    play_encode_type: StrictStr | None = None


class Author(_Model):
    author_id: StrictStr
    sort_id: StrictStr
    author_role_id: StrictStr
    author_name_kana: StrictStr
    other: StrictStr | None = None
    url: StrictStr
    author_name: StrictStr
    author_role_name: StrictStr
    author_role_omission_name: StrictStr
    upper_books_work_author_author_id: StrictStr | None = Field(
        default=None, alias="upper(books_work_author.author_id)"
    )


class Creator(_Model):
    id: StrictStr
    name: StrictStr
    classification: StrictStr
    sub_classification: StrictStr | None = None


class Creators(_Model):
    created_by: list[Creator] | None = None
    voice_by: list[Creator] | None = None
    illust_by: list[Creator] | None = None
    scenario_by: list[Creator] | None = None


_FilesOrNone = Annotated["list[File] | None", WrapValidator(_default_on_error)]
_EpubOrNone = Annotated["EpubSample | None", WrapValidator(_default_on_error)]
_WorkOptionsOrNone = Annotated[
    "dict[str, WorkOption] | None", WrapValidator(_default_on_error)
]
_CreatorsOrNone = Annotated["Creators | None", WrapValidator(_default_on_error)]
_OneOrManyFiles = Annotated["list[File]", BeforeValidator(_one_or_many)]
_PackChildren = Annotated[list[StrictStr] | dict[str, WorkPackChild], _LEFT_FIRST]
_LimitedFreeTerms = Annotated[list[LimitedFree] | LimitedFree, _LEFT_FIRST]
_Editions = Annotated[dict[str, LanguageEdition] | list[LanguageEdition], _LEFT_FIRST]


class ProductApiContent(_Model):
    """Details of a product from the product JSON API."""

    age_category: AgeCategoryField
    age_category_string: StrictStr
    anime: StrictStr | None = None
    auto_play: StrictStr | None = None
    bgm: StrictStr | None = None
    bgm_mode: StrictStr | None = None
    books_id: StrictStr | None = None
    brand_id: StrictStr | None = None
    circle_id: StrictStr | None = None
    coupling: list[Coupling]
    cpu: StrictStr | None = None
    default_point: I64
    directed_by: StrictStr | None = None
    directx: StrictStr | None = None
    discount: Discount | None = None
    dist_flag: I64
    dl_format: I64
    etc: StrictStr | None = None
    file_date: StrictStr | None = None
    file_size: StrictStr | None = None
    file_type: FileTypeField
    file_type_string: StrictStr | None = None
    file_type_special: StrictStr | None = None
    gallery_mode: StrictStr | None = None
    hdd: StrictStr | None = None
    h_scene_mode: StrictStr | None = None
    intro: StrictStr | None = None
    intro_s: StrictStr | None = None
    label_id: StrictStr | None = None
    label_name: StrictStr | None = None
    machine: StrictStr | None = None
    machine_string_list: Annotated[
        dict[str, StrictStr | None] | list[StrictStr | None], _LEFT_FIRST
    ]
    memory: StrictStr | None = None
    message_skip: StrictStr | None = None
    mini_resolution: StrictStr | None = None
    modify_flg: I64 | None = None
    music_by: StrictStr | None = None
    on_sale: I64
    options: StrictStr
    original_illust: StrictStr | None = None
    other: StrictStr | None = None
    others_by: StrictStr | None = None
    pages: StrictStr | None = None
    page_number: StrictStr | None = None
    product_point: I64 | None = None
    product_point_end_date: I64 | None = None
    point: I64
    price: I64
    price_without_tax: I64
    price_en: F64
    price_eur: F64
    production_workno: StrictStr | None = None
    publisher_workno: StrictStr | None = None
    rating: Any
    regist_date: StrictStr | None = None
    regular_price: I64 | None = None
    scenario_by: StrictStr | None = None
    screen_mode: StrictStr | None = None
    series_id: StrictStr | None = None
    series_name: StrictStr | None = None
    sex_category: I64
    sofrin_app_no: StrictStr | None = None
    vocal_track: StrictStr | None = None
    voice: StrictStr | None = None
    voice_by: StrictStr | None = None
    vram: StrictStr | None = None
    workno: StrictStr
    work_name: StrictStr
    work_name_kana: StrictStr | None = None
    work_type: WorkTypeField
    work_type_string: StrictStr
    work_type_special: StrictStr | None = None
    work_attributes: StrictStr
    product_id: StrictStr
    base_product_id: StrictStr
    maker_id: StrictStr
    maker_name: StrictStr
    maker_name_en: StrictStr | None = None
    alt_name: StrictStr
    product_name: StrictStr
    site_id: StrictStr
    site_id_touch: StrictStr
    is_ana: StrictBool
    work_category: WorkCategoryField
    platform: list[StrictStr]
    is_pc_work: StrictBool
    is_smartphone_work: StrictBool
    is_android_only_work: StrictBool
    is_dlplaybox_only_work: StrictBool
    is_almight_work: StrictBool
    is_dlsiteplay_work: StrictBool
    is_dlsiteplay_only_work: StrictBool
    work_parts: list[StrictStr]
    introductions: StrictStr | None = None
    sales_price: I64 | None = None
    image_main: File
    image_thum: File
    image_thum_mini: File
    image_thum_touch: _OneOrManyFiles
    image_thum_mini_touch: list[Image]
    image_mini: Image
    image_samples: list[File] | None = None
    image_thumb: StrictStr
    image_thumb_touch: StrictStr
    contents: list[Content]
    """Files contained."""
    contents_touch: list[Content] | None = None
    """Files contained, for touch devices."""
    is_split_content: StrictBool
    content_count: I64
    content_count_touch: I64
    contents_file_size: I64
    contents_file_size_touch: I64
    trials: _FilesOrNone = None
    trials_touch: _FilesOrNone = None
    movies: Annotated[StrictBool | list[File], _LEFT_FIRST]
    epub_sample: _EpubOrNone = None
    sample_type: StrictStr
    is_viewable_sample: StrictBool
    campaign_id: I64 | None = None
    official_price: I64
    official_price_without_tax: I64
    official_price_usd: F64
    official_price_eur: F64
    discount_rate: I64 | None = None
    is_discount_work: StrictBool
    discount_access_key: StrictStr | None = None
    discount_layout: StrictStr | None = None
    discount_trade_price_type: StrictStr | None = None
    campaign_start_date: StrictStr | None = None
    campaign_end_date: StrictStr | None = None
    is_show_campaign_end_date: StrictBool
    chobits: StrictBool
    work_options: _WorkOptionsOrNone = None
    """Keyed by option id, e.g. ``C84``."""
    gift: list[StrictStr]
    work_rentals: list[StrictStr]
    is_rental_work: StrictBool
    translation_info: TranslationInfo
    display_order: I64 | None = None
    is_oauth_work: StrictBool | None = None
    is_show_rate: StrictBool
    rate_average_star: I64
    rate_count_detail: dict[str, I64]
    rank_total: I64 | None = None
    rank_total_date: StrictStr | None = None
    rank_year: I64 | None = None
    rank_year_date: I64 | None = None
    rank_month: I64 | None = None
    rank_month_date: StrictStr | None = None
    rank_week: I64 | None = None
    rank_week_date: StrictStr | None = None
    rank_day: I64 | None = None
    rank_day_date: StrictStr | None = None
    is_pack_child: StrictBool
    is_pack_parent: StrictBool
    work_pack_children: _PackChildren
    pack_type: StrictStr | None = None
    is_voice_pack: StrictBool
    voice_pack_parent: list[StrictStr]
    voice_pack_child: list[StrictStr]
    free: StrictBool
    free_only: StrictBool
    free_end_date: Annotated[StrictStr | StrictBool | None, _LEFT_FIRST] = None
    has_free_download: StrictBool
    creators: _CreatorsOrNone = Field(default=None, alias="creaters")
    title_id: StrictStr | None = None
    title_name: StrictStr | None = None
    title_volumn: I64 | None = None
    title_work_labeling: StrictStr | None = None
    title_work_display_order: I64 | None = None
    title_work_count: I64 | None = None
    is_title_completed: StrictBool
    title_latest_workno: StrictStr | None = None
    title_price_low: StrictStr | None = None
    title_price_high: StrictStr | None = None
    is_title_pointup: StrictStr | None = None
    title_point_rate: StrictStr | None = None
    is_title_discount: StrictStr | None = None
    is_title_reserve: StrictStr | None = None
    reserve_work: ReserveWork | None = None
    is_reserve_work: StrictBool
    is_reservable: StrictBool
    is_downloadable_reserve_work: StrictBool
    bonus_workno: Annotated[StrictBool | StrictStr, _LEFT_FIRST]
    bonus_work: StrictStr | None = None
    is_bonus_work: StrictBool
    is_downloadable_bonus_work: StrictBool
    parent_reserve_workno: StrictBool
    book_type: BookType | None = None
    is_bl: StrictBool
    is_tl: StrictBool
    is_drama_work: StrictBool
    is_display_notice: StrictBool
    touch_style1: list[StrictStr]
    is_bulkbuy: StrictBool
    bulkbuy_key: StrictStr | None = None
    bulkbuy_title: StrictStr | None = None
    bulkbuy_per_items: I64
    bulkbuy_start: StrictStr | None = None
    bulkbuy_end: StrictStr | None = None
    bulkbuy_price: I64
    bulkbuy_price_tax: I64
    bulkbuy_price_without_tax: I64
    bulkbuy_discount_rate: I64
    bulkbuy_point_rate: I64
    bulkbuy_point: I64
    genres: list[GenreApi]
    custom_genres: list[CustomGenre]
    editions: _Editions
    language_editions: _Editions
    display_options: list[StrictStr]
    is_limit_work: StrictBool
    is_limit_sales: StrictBool
    work_browse_setting: Annotated[
        dict[str, WorkBrowseSetting] | list[WorkBrowseSetting], _LEFT_FIRST
    ]
    is_limit_in_stock: StrictBool
    limit_start_date: StrictStr | None = None
    limit_end_date: StrictStr | None = None
    limit_dl_count: I64
    limit_display_type: StrictStr | None = None
    limit_note: StrictStr | None = None
    is_timesale_work: StrictBool
    timesale_dl_count: I64
    timesale_limit_dl_count: I32 | None = None
    timesale_stock: I64
    timesale_start_date: StrictStr | None = None
    timesale_end_date: StrictStr | None = None
    timesale_price: I64
    update_date: StrictStr
    locale_price: dict[str, F64]
    locale_official_price: dict[str, F64]
    locale_price_str: dict[str, StrictStr]
    locale_official_price_str: dict[str, StrictStr]
    given_coupons_by_buying: list[StrictStr]
    author: list[Author] | None = None
    authors: list[Author] | None = None
    product_dir: StrictStr
    srcset: StrictStr | None = None
    alt_name_masked: StrictStr
    work_pack_parent: _PackChildren
    limited_free_terms: _LimitedFreeTerms
    limited_free_work: _LimitedFreeTerms
    intro_masked: Any = None
    limit_sale_id: Any = None
    specified_volume_sets: list[SpecifiedVolumeSet]
    series_name_masked: StrictStr | None = None
    is_ios_only_work: StrictBool
    specified_volume_set_max_discount_rate: Any = None
    has_specified_volume_set: StrictBool
    work_name_masked: StrictStr
    introductions_masked: Any = None
    intro_s_masked: StrictStr | None = None
    work_type_special_masked: StrictStr | None = None
    title_name_masked: StrictStr | None = None
    currency_price: dict[str, F64]
    currency_official_price: dict[str, F64]
    is_android_or_ios_only_work: StrictBool
    genres_replaced: list[GenreApi]
    limit_sold_dl_count: I32


ProductApiContent.model_rebuild()


def parse_product_api_content(data: Any) -> ProductApiContent:
    """Build a :class:`ProductApiContent` from one decoded product entry."""
    try:
        return ProductApiContent.model_validate(data)
    except ValidationError as exc:
        raise JsonError(str(exc)) from exc