import pytest

from pointapi.utils.formatting import to_compact_string, to_hex_string


@pytest.mark.parametrize(
    "point,expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1K"),
        (1500, "1.5K"),
        (12345, "12.3K"),
        (2100000, "2.1M"),
        (999990, "1M"),
        (-1500, "-1.5K"),
    ],
)
def test_compact_string_en(point, expected):
    assert to_compact_string(point) == expected


@pytest.mark.parametrize(
    "point,locale,expected",
    [
        (9999, "zh_CN", "9999"),
        (15000, "zh_CN", "1.5万"),
        (250000000, "zh_CN", "2.5亿"),
        (15000, "ko_KR", "1.5만"),
        (1500, "xx_XX", "1.5K"),
    ],
)
def test_compact_string_locales(point, locale, expected):
    assert to_compact_string(point, locale) == expected


def test_hex_string():
    assert to_hex_string(2048) == "800"
    assert to_hex_string(1425) == "591"
