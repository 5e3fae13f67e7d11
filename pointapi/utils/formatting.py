from typing import Dict, Tuple

# 로케일별 (단위 크기, 접미사) - 영어권은 천 단위, 한중은 만 단위
_COMPACT_UNITS: Dict[str, Tuple[int, Tuple[str, ...]]] = {
    "en_US": (1000, ("", "K", "M", "B", "T")),
    "zh_CN": (10000, ("", "万", "亿", "万亿")),
    "ko_KR": (10000, ("", "만", "억", "조")),
}


def to_hex_string(point: int) -> str:
    """
    잔액을 16진수 문자열로 표기

    Examples:
        >>> to_hex_string(2048)
        '800'
    """
    return format(point, "x")


def to_compact_string(point: int, locale: str = "en_US") -> str:
    """
    잔액을 로케일별 축약 표기로 변환

    Args:
        point: 잔액
        locale: 로케일 키 (알 수 없으면 en_US)

    Returns:
        str: 축약 문자열 (소수점 한 자리, 불필요한 0 제거)

    Examples:
        >>> to_compact_string(999)
        '999'

        >>> to_compact_string(1500)
        '1.5K'

        >>> to_compact_string(2100000)
        '2.1M'

        >>> to_compact_string(15000, "zh_CN")
        '1.5万'
    """
    base, suffixes = _COMPACT_UNITS.get(locale, _COMPACT_UNITS["en_US"])
    sign = "-" if point < 0 else ""
    magnitude = abs(point)

    if magnitude < base:
        return f"{sign}{magnitude}"

    value = float(magnitude)
    unit = 0
    while value >= base and unit < len(suffixes) - 1:
        value /= base
        unit += 1

    rounded = round(value, 1)
    # 반올림으로 단위가 넘어가는 경우 (예: 999.96K → 1M)
    if rounded >= base and unit < len(suffixes) - 1:
        rounded = round(rounded / base, 1)
        unit += 1

    text = f"{rounded:.1f}".rstrip("0").rstrip(".")
    return f"{sign}{text}{suffixes[unit]}"