"""Search options for the DLsite product search."""

from __future__ import annotations

from dataclasses import dataclass

from .paths import array_segment, flag_segment, option_segment, segment
from .product_types import AgeCategory, FileType, WorkCategory, WorkType, WorkTypeCategory
from .query_types import AnaFlg, Language, OptionAndOr, Order, ReleaseTerm, SexCategory


@dataclass
class SearchProductQuery:
    """Options of a product search; every option except the language is optional."""

    language: Language = Language.JP
    keyword_creator: str | None = None
    sex_category: list[SexCategory] | None = None
    keyword: str | None = None
    regist_date_end: str | None = None
    price_low: int | None = None
    price_high: int | None = None
    ana_flg: AnaFlg | None = None
    age_category: list[AgeCategory] | None = None
    work_category: list[WorkCategory] | None = None
    order: Order | None = None
    work_type: list[WorkType] | None = None
    work_type_category: list[WorkTypeCategory] | None = None
    genre: list[int] | None = None
    options_and_or: OptionAndOr | None = None
    options: list[str] | None = None
    options_not: list[str] | None = None
    file_type: list[FileType] | None = None
    rate_average: int | None = None
    per_page: int | None = None
    """30, 50 or 100."""
    page: int | None = None
    campagin: bool | None = None
    soon: bool | None = None
    """Whether the sales end date is within 24 hours."""
    is_pointup: bool | None = None
    is_free: bool | None = None
    release_term: ReleaseTerm | None = None

    def to_path(self) -> str:
        """Build the request path for this search."""
        return "".join(
            [
                "/fsr/ajax/=",
                segment("language", self.language),
                option_segment("keyword_creator", self.keyword_creator),
                array_segment("sex_category", self.sex_category),
                option_segment("keyword", self.keyword),
                option_segment("regist_date_end", self.regist_date_end),
                option_segment("price_low", self.price_low),
                option_segment("price_high", self.price_high),
                option_segment("ana_flg", self.ana_flg),
                array_segment("age_category", self.age_category),
                array_segment("work_category", self.work_category),
                option_segment("order", self.order),
                array_segment("work_type", self.work_type),
                array_segment("work_type_category", self.work_type_category),
                array_segment("genre", self.genre),
                option_segment("options_and_or", self.options_and_or),
                array_segment("options", self.options),
                array_segment("options_not", self.options_not),
                array_segment("file_type", self.file_type),
                option_segment("rate_average", self.rate_average),
                option_segment("per_page", self.per_page),
                option_segment("page", self.page),
                flag_segment("campagin", self.campagin),
                flag_segment("soon", self.soon),
                flag_segment("is_pointup", self.is_pointup),
                flag_segment("is_free", self.is_free),
                option_segment("release_term", self.release_term),
            ]
        )