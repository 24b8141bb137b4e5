"""Parsing of the product page HTML."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from urllib.parse import urlsplit

from bs4 import BeautifulSoup, Tag

from .errors import ParseError, require
from .product_types import AgeCategory, Genre

_RELEASE_DATE = re.compile(r"\d*年\d*月\d*日")
_AGE_RATINGS = {
    "全年齢": AgeCategory.GENERAL,
    "R18": AgeCategory.ADULT,
    "R-15": AgeCategory.R15,
}


@dataclass
class ProductPeople:
    """People who contributed to a product."""

    author: list[str] | None = None
    scenario: list[str] | None = None
    illustrator: list[str] | None = None
    voice_actor: list[str] | None = None


@dataclass
class ProductHtml:
    """Product data read from the product page."""

    released_at: date
    age_rating: AgeCategory | None
    circle_id: str
    circle_name: str
    images: list[str]
    people: ProductPeople
    genre: list[Genre]
    series: str | None
    file_format: list[str]
    file_size: str | None
    product_format: list[str]
    description_html: str | None
    event: list[str]
    pages: str | None
    update_information: str | None
    scenario: list[str]
    illustration: list[str]
    misc: list[str]
    langs: list[str]
    music: list[str]
    sys_req: str | None
    coupling: list[str]
    lang_refs: list[tuple[str, str]]


def _soup(html: str | BeautifulSoup) -> BeautifulSoup:
    if isinstance(html, BeautifulSoup):
        return html
    return BeautifulSoup(html, "html.parser")


def _first_text(element: Tag) -> str | None:
    return next(iter(element.strings), None)


def _inner_html(element: Tag) -> str:
    return "".join(str(child) for child in element.contents)


def _child_elements(element: Tag) -> list[Tag]:
    return [child for child in element.children if isinstance(child, Tag)]


def _work_outline_table(soup: BeautifulSoup) -> dict[str, Tag]:
    table: dict[str, Tag] = {}
    for row in soup.select("#work_outline tr"):
        header = row.select_one("th")
        cell = row.select_one("td")
        if header is None or cell is None:
            continue
        key = _first_text(header)
        if key is not None:
            table[key.strip()] = cell
    return table


def _genre_items(cell: Tag | None) -> list[str]:
    if cell is None:
        return []
    box = cell.select_one(".work_genre")
    if box is None:
        return []
    return [child.get_text().strip() for child in _child_elements(box)]


def _link_texts(cell: Tag | None) -> list[str]:
    if cell is None:
        return []
    return [link.get_text().strip() for link in cell.select("a")]


def _stripped_text(cell: Tag | None) -> str | None:
    return None if cell is None else cell.get_text().strip()


def _image_url(source: str) -> str | None:
    url = f"https:{source}"
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    return url if parts.netloc else None


def _images(soup: BeautifulSoup) -> list[str]:
    urls = []
    for element in soup.select(".product-slider-data > div"):
        source = element.get("data-src")
        if source is None:
            continue
        url = _image_url(str(source))
        if url is not None:
            urls.append(url)
    return urls


def _file_size(cell: Tag | None) -> str | None:
    if cell is None:
        return None
    box = cell.select_one("div")
    if box is None:
        return None
    text = box.get_text().strip()
    prefix = "総計\u00a0"
    return text[len(prefix):] if text.startswith(prefix) else None


def _file_format(cell: Tag | None) -> list[str]:
    if cell is None:
        return []
    box = cell.select_one(".work_genre")
    if box is None:
        return []
    formats = []
    for child in _child_elements(box):
        text = child.get_text().strip()
        if text.startswith("/"):
            text = text[1:]
        formats.append(text.strip())
    return formats


def _age_rating(cell: Tag | None) -> AgeCategory | None:
    if cell is None:
        return None
    span = require(cell.select_one("span"), "No age rating found")
    label = _inner_html(span)
    try:
        return _AGE_RATINGS[label]
    except KeyError:
        raise ParseError(f"failed to convert {label} to enum") from None


def _released_at(cell: Tag | None) -> date:
    cell = require(cell, "No released_at found")
    text = require(_first_text(cell), "No released_at found")
    match = require(_RELEASE_DATE.search(text), "Failed to parse released_at")
    try:
        return datetime.strptime(match.group(0), "%Y年%m月%d日").date()
    except ValueError:
        raise ParseError("Failed to parse released_at") from None


def _genre_id(href: str) -> str | None:
    genre_id = None
    take_next = False
    for part in href.split("/"):
        if take_next:
            genre_id = part
            take_next = False
        if part == "genre":
            take_next = True
    return genre_id


def _genres(cell: Tag | None) -> list[Genre]:
    if cell is None:
        return []
    genres = []
    for link in cell.select("a"):
        name = _first_text(link)
        href = link.get("href")
        if name is None or href is None:
            continue
        genre_id = _genre_id(str(href))
        if genre_id is not None:
            genres.append(Genre(name=str(name), id=genre_id))
    return genres


def _lang_refs(soup: BeautifulSoup) -> list[tuple[str, str]]:
    refs = []
    for link in soup.select(".work_edition .type_trans > a"):
        href = link.get("href")
        if href is not None:
            refs.append((link.get_text().strip(), str(href)))
    return refs


def parse_product_html(html: str | BeautifulSoup) -> ProductHtml:
    """Parse a product page."""
    soup = _soup(html)

    circle = require(soup.select_one("#work_maker .maker_name a"), "No circle found")
    circle_name = str(require(_first_text(circle), "No circle name found"))
    href = str(require(circle.get("href"), "No circle id found"))
    circle_id = href.split("/")[-1].split(".")[0]

    images = _images(soup)

    table = _work_outline_table(soup)
    table.pop("作者", None)
    table.pop("声優", None)

    file_size = _file_size(table.pop("ファイル容量", None))
    product_format = _genre_items(table.pop("作品形式", None))
    description = soup.select_one("[itemprop='description']")
    description_html = None if description is None else _inner_html(description)
    event = _link_texts(table.pop("イベント", None))
    pages_cell = table.pop("ページ数", None)
    pages = None if pages_cell is None else pages_cell.get_text()
    update_information = _stripped_text(table.pop("更新情報", None))
    scenario = _link_texts(table.pop("シナリオ", None))
    illustration = _link_texts(table.pop("イラスト", None))
    misc = _genre_items(table.pop("その他", None))
    langs = _genre_items(table.pop("対応言語", None))
    lang_refs = _lang_refs(soup)
    music = _link_texts(table.pop("音楽", None))
    sys_req = _stripped_text(table.pop("動作環境", None))
    coupling = _link_texts(table.pop("カップリング", None))
    file_format = _file_format(table.pop("ファイル形式", None))
    age_rating = _age_rating(table.pop("年齢指定", None))
    series = _stripped_text(table.pop("シリーズ名", None))
    released_at = _released_at(table.pop("販売日", None))
    genre = _genres(table.pop("ジャンル", None))

    if table:
        raise ParseError(f"failed to parse tags {len(table)}")

    return ProductHtml(
        released_at=released_at,
        age_rating=age_rating,
        circle_id=circle_id,
        circle_name=circle_name,
        images=images,
        people=parse_product_people(soup),
        genre=genre,
        series=series,
        file_format=file_format,
        file_size=file_size,
        product_format=product_format,
        description_html=description_html,
        event=event,
        pages=pages,
        update_information=update_information,
        scenario=scenario,
        illustration=illustration,
        misc=misc,
        langs=langs,
        music=music,
        sys_req=sys_req,
        coupling=coupling,
        lang_refs=lang_refs,
    )


def parse_product_people(html: str | BeautifulSoup) -> ProductPeople:
    """Read the people credited in the outline table of a product page."""
    table = _work_outline_table(_soup(html))

    def people(key: str) -> list[str] | None:
        cell = table.get(key)
        if cell is None:
            return None
        names = [str(name) for name in map(_first_text, cell.select("a")) if name is not None]
        return names or None

    return ProductPeople(
        author=people("作者"),
        scenario=people("シナリオ"),
        illustrator=people("イラスト"),
        voice_actor=people("声優"),
    )