import pytest

from dlsite.errors import JsonError
from dlsite.product_api_models import (
    Content,
    Discount,
    File,
    GenreApi,
    LimitedFree,
    parse_product_api_content,
)
from dlsite.product_types import AgeCategory, FileType, WorkCategory, WorkType


ASMR = {"name": "ASMR", "id": 497, "search_val": "497", "name_base": "ASMR"}


def _file(url="//img.example.com/main.jpg"):
    return {"url": url}


def _content():
    return {
        "workno": "RJ01017217",
        "type": "mp3",
        "file_name": "track01.mp3",
        "file_size": "1024",
        "update_date": "2023-01-21 00:00:00",
        "id": "1",
        "upper(work_files.type)": "MP3",
        "extension": "mp3",
    }


def _translation_info():
    return {
        "is_translation_agree": False,
        "is_volunteer": False,
        "is_original": True,
        "is_parent": False,
        "is_child": False,
        "original_workno": None,
        "parent_workno": None,
        "child_worknos": [],
        "lang": None,
        "translation_bonus_langs": [],
        "is_translation_bonus_child": False,
    }


def _limited_free():
    return {
        "end_date": "2023-02-01",
        "id": 7,
        "original_workno": None,
        "workno": "RJ01017217",
        "start_date": "2023-01-21",
    }


def _product(**overrides):
    data = {
        "age_category": 3,
        "age_category_string": "adult",
        "circle_id": "RG24350",
        "coupling": [],
        "default_point": 0,
        "dist_flag": 0,
        "dl_format": 0,
        "file_type": "WAV",
        "machine_string_list": [],
        "on_sale": 1,
        "options": "",
        "point": 0,
        "price": 1980,
        "price_without_tax": 1800,
        "price_en": 13.5,
        "price_eur": 12,
        "rating": None,
        "sex_category": 1,
        "workno": "RJ01017217",
        "work_name": "道草屋-なつな3",
        "work_type": "SOU",
        "work_type_string": "ボイス・ASMR",
        "work_attributes": "",
        "product_id": "RJ01017217",
        "base_product_id": "RJ01017217",
        "maker_id": "RG24350",
        "maker_name": "桃色CODE",
        "alt_name": "道草屋-なつな3",
        "product_name": "道草屋-なつな3",
        "site_id": "maniax",
        "site_id_touch": "maniaxtouch",
        "is_ana": False,
        "work_category": "doujin",
        "platform": ["pc"],
        "is_pc_work": True,
        "is_smartphone_work": False,
        "is_android_only_work": False,
        "is_dlplaybox_only_work": False,
        "is_almight_work": False,
        "is_dlsiteplay_work": True,
        "is_dlsiteplay_only_work": False,
        "work_parts": [],
        "image_main": _file(),
        "image_thum": _file(),
        "image_thum_mini": _file(),
        "image_thum_touch": [_file()],
        "image_thum_mini_touch": [],
        "image_mini": _file(),
        "image_thumb": "",
        "image_thumb_touch": "",
        "contents": [_content()],
        "is_split_content": False,
        "content_count": 1,
        "content_count_touch": 0,
        "contents_file_size": 1024,
        "contents_file_size_touch": 0,
        "trials": [],
        "movies": False,
        "sample_type": "images",
        "is_viewable_sample": False,
        "official_price": 1980,
        "official_price_without_tax": 1800,
        "official_price_usd": 13.5,
        "official_price_eur": 12.5,
        "is_discount_work": False,
        "is_show_campaign_end_date": False,
        "chobits": False,
        "gift": [],
        "work_rentals": [],
        "is_rental_work": False,
        "translation_info": _translation_info(),
        "is_show_rate": True,
        "rate_average_star": 45,
        "rate_count_detail": {"5": 10},
        "is_pack_child": False,
        "is_pack_parent": False,
        "work_pack_children": [],
        "is_voice_pack": False,
        "voice_pack_parent": [],
        "voice_pack_child": [],
        "free": False,
        "free_only": False,
        "has_free_download": False,
        "creaters": {
            "voice_by": [
                {"id": "1", "name": "丹羽うさぎ", "classification": "voice_by"},
                {"id": "2", "name": "藤堂れんげ", "classification": "voice_by"},
            ],
            "created_by": [{"id": "3", "name": "桃鳥", "classification": "created_by"}],
        },
        "is_title_completed": False,
        "is_reserve_work": False,
        "is_reservable": False,
        "is_downloadable_reserve_work": False,
        "bonus_workno": False,
        "is_bonus_work": False,
        "is_downloadable_bonus_work": False,
        "parent_reserve_workno": False,
        "is_bl": False,
        "is_tl": False,
        "is_drama_work": False,
        "is_display_notice": False,
        "touch_style1": [],
        "is_bulkbuy": False,
        "bulkbuy_per_items": 0,
        "bulkbuy_price": 0,
        "bulkbuy_price_tax": 0,
        "bulkbuy_price_without_tax": 0,
        "bulkbuy_discount_rate": 0,
        "bulkbuy_point_rate": 0,
        "bulkbuy_point": 0,
        "genres": [ASMR],
        "custom_genres": [],
        "editions": [],
        "language_editions": [],
        "display_options": [],
        "is_limit_work": False,
        "is_limit_sales": False,
        "work_browse_setting": [],
        "is_limit_in_stock": False,
        "limit_dl_count": 0,
        "is_timesale_work": False,
        "timesale_dl_count": 0,
        "timesale_stock": 0,
        "timesale_price": 0,
        "update_date": "2023-01-21 00:00:00",
        "locale_price": {"ja_JP": 1980},
        "locale_official_price": {},
        "locale_price_str": {},
        "locale_official_price_str": {},
        "given_coupons_by_buying": [],
        "product_dir": "RJ01018000",
        "alt_name_masked": "道草屋-なつな3",
        "work_pack_parent": [],
        "limited_free_terms": [],
        "limited_free_work": [],
        "specified_volume_sets": [],
        "is_ios_only_work": False,
        "has_specified_volume_set": False,
        "work_name_masked": "道草屋-なつな3",
        "currency_price": {},
        "currency_official_price": {},
        "is_android_or_ios_only_work": False,
        "genres_replaced": [],
        "limit_sold_dl_count": 0,
    }
    data.update(overrides)
    return data


def test_parses_full_product():
    product = parse_product_api_content(_product())
    assert product.workno == "RJ01017217"
    assert product.maker_name == "桃色CODE"
    assert product.circle_id == "RG24350"
    assert product.work_type == WorkType.SOU
    assert product.age_category == AgeCategory.ADULT
    assert product.file_type == FileType.WAV
    assert product.work_category == WorkCategory.DOUJIN
    assert product.locale_price == {"ja_JP": 1980.0}
    assert product.price_eur == 12.0


def test_genres_contain_asmr():
    product = parse_product_api_content(_product())
    assert GenreApi(name="ASMR", id=497, search_val="497", name_base="ASMR") in product.genres


def test_creators_read_from_misspelled_key():
    product = parse_product_api_content(_product())
    assert [c.name for c in product.creators.voice_by] == ["丹羽うさぎ", "藤堂れんげ"]
    assert product.creators.created_by[0].name == "桃鳥"
    assert product.creators.illust_by is None


def test_invalid_creators_fall_back_to_none():
    product = parse_product_api_content(_product(creaters=[]))
    assert product.creators is None


def test_invalid_trials_fall_back_to_none():
    product = parse_product_api_content(_product(trials=False, epub_sample="x"))
    assert product.trials is None
    assert product.epub_sample is None


def test_trials_list_is_kept():
    product = parse_product_api_content(_product(trials=[_file("//a.example.com/t.jpg")]))
    assert product.trials == [File(url="//a.example.com/t.jpg")]


def test_single_thumbnail_becomes_list():
    product = parse_product_api_content(_product(image_thum_touch=_file("//b.example.com/x.jpg")))
    assert len(product.image_thum_touch) == 1
    assert product.image_thum_touch[0].url == "//b.example.com/x.jpg"


def test_unknown_enum_values_are_kept():
    product = parse_product_api_content(_product(work_type="ZZZ", file_type="QQQ", work_category="odd"))
    assert product.work_type.is_unknown()
    assert str(product.work_type) == "ZZZ"
    assert product.file_type.is_unknown()
    assert str(product.work_category) == "odd"


@pytest.mark.parametrize("age", [0, 4, True, "3"])
def test_invalid_age_category(age):
    with pytest.raises(JsonError):
        parse_product_api_content(_product(age_category=age))


def test_general_age_category():
    assert parse_product_api_content(_product(age_category=1)).age_category == AgeCategory.GENERAL


def test_missing_required_field():
    data = _product()
    del data["workno"]
    with pytest.raises(JsonError):
        parse_product_api_content(data)


def test_rating_is_required_even_if_null():
    data = _product()
    del data["rating"]
    with pytest.raises(JsonError):
        parse_product_api_content(data)


def test_missing_optional_field_is_none():
    data = _product()
    del data["circle_id"]
    assert parse_product_api_content(data).circle_id is None


def test_strict_types():
    with pytest.raises(JsonError):
        parse_product_api_content(_product(is_ana="false"))
    with pytest.raises(JsonError):
        parse_product_api_content(_product(price="1980"))


def test_i32_range_enforced():
    with pytest.raises(JsonError):
        parse_product_api_content(_product(limit_sold_dl_count=2**31))


def test_not_an_object():
    with pytest.raises(JsonError):
        parse_product_api_content([])


def test_bonus_workno_either():
    assert parse_product_api_content(_product(bonus_workno=False)).bonus_workno is False
    assert parse_product_api_content(_product(bonus_workno="RJ01000001")).bonus_workno == "RJ01000001"


def test_movies_either():
    assert parse_product_api_content(_product(movies=False)).movies is False
    product = parse_product_api_content(_product(movies=[_file("//m.example.com/v.mp4")]))
    assert product.movies == [File(url="//m.example.com/v.mp4")]


def test_free_end_date_string_or_bool():
    assert parse_product_api_content(_product(free_end_date="2023-02-01")).free_end_date == "2023-02-01"
    assert parse_product_api_content(_product(free_end_date=False)).free_end_date is False


def test_limited_free_single_or_list():
    single = parse_product_api_content(_product(limited_free_terms=_limited_free()))
    assert single.limited_free_terms == LimitedFree.model_validate(_limited_free())
    many = parse_product_api_content(_product(limited_free_work=[_limited_free()]))
    assert many.limited_free_work == [LimitedFree.model_validate(_limited_free())]


def test_editions_map_or_list():
    edition = {
        "display_order": 1,
        "edition_id": 2,
        "edition_type": "language",
        "label": "日本語",
        "lang": "JPN",
        "workno": "RJ01017217",
    }
    product = parse_product_api_content(_product(editions={"JPN": edition}, language_editions=[edition]))
    assert product.editions["JPN"].lang == "JPN"
    assert product.language_editions[0].workno == "RJ01017217"


def test_work_pack_children_map():
    child = {
        "inservice": 1,
        "product_id": "RJ01000002",
        "product_name": "child",
        "work_name": "child",
        "workno": "RJ01000002",
    }
    product = parse_product_api_content(_product(work_pack_children={"RJ01000002": child}))
    assert product.work_pack_children["RJ01000002"].inservice == 1


def test_content_aliases():
    product = parse_product_api_content(_product())
    content = product.contents[0]
    assert content.upper_work_files_type == "MP3"
    assert content.type_ == "mp3"
    assert content == Content.model_validate(_content())


def test_discount_options_single():
    discount = {
        "campaign_id": 1,
        "campaign_price": 990,
        "del_flg": "0",
        "discount_rate": 50,
        "end_date": 1700000000,
        "id": "10",
        "insert_date": "2023-01-01",
        "options": {
            "frame_sort": {"discount": "1", "pickup": "2", "pickup_free": "3", "related": "4"}
        },
        "restore_price": 1980,
        "show_end_date_days": "7",
        "start_date": 1690000000,
        "status": "1",
        "title": "sale",
        "update_date": "2023-01-02",
        "workno": "RJ01017217",
    }
    product = parse_product_api_content(_product(discount=discount))
    assert product.discount == Discount.model_validate(discount)
    assert product.discount.options.frame_sort.related == "4"
    assert product.discount.note is None


def test_translation_bonus_map():
    bonus = {
        "child_count": 1,
        "price": 100,
        "price_in_tax": 110,
        "price_tax": 10,
        "recipient_available_count": 5,
        "recipient_max": 10,
        "status": "open",
    }
    info = _translation_info()
    info["translation_bonus_langs"] = {"ENG": bonus}
    product = parse_product_api_content(_product(translation_info=info))
    assert product.translation_info.translation_bonus_langs["ENG"].price_in_tax == 110
    assert product.translation_info.is_original is True