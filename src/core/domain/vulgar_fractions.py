"""
Vulgar Fractions — Таблица Unicode-символов простых дробей

Фиксированное двунаправленное соответствие между 18 символами
(½, ⅓, ⅔, ¼, ¾, ⅕ ... ⅒) и дробями, которые они обозначают.

- Прямой поиск (символ → дробь): O(1), определён только для 18 символов
- Обратный поиск (дробь → символ): линейный просмотр, только точное совпадение

Таблица строится один раз при импорте и далее только читается,
поэтому безопасна для одновременного чтения из любых потоков.
"""

from types import MappingProxyType
from typing import Final, Mapping, Optional

from src.core.domain.rational import Rational


# =============================================================================
# ТАБЛИЦА СИМВОЛОВ
# =============================================================================

VULGAR_FRACTIONS: Final[Mapping[str, Rational]] = MappingProxyType(
    {
        "\u00bd": Rational(1, 2),  # ½
        "\u2153": Rational(1, 3),  # ⅓
        "\u2154": Rational(2, 3),  # ⅔
        "\u00bc": Rational(1, 4),  # ¼
        "\u00be": Rational(3, 4),  # ¾
        "\u2155": Rational(1, 5),  # ⅕
        "\u2156": Rational(2, 5),  # ⅖
        "\u2157": Rational(3, 5),  # ⅗
        "\u2158": Rational(4, 5),  # ⅘
        "\u2159": Rational(1, 6),  # ⅙
        "\u215a": Rational(5, 6),  # ⅚
        "\u2150": Rational(1, 7),  # ⅐
        "\u215b": Rational(1, 8),  # ⅛
        "\u215c": Rational(3, 8),  # ⅜
        "\u215d": Rational(5, 8),  # ⅝
        "\u215e": Rational(7, 8),  # ⅞
        "\u2151": Rational(1, 9),  # ⅑
        "\u2152": Rational(1, 10),  # ⅒
    }
)


# =============================================================================
# ПОИСК
# =============================================================================


def is_vulgar_fraction(char: str) -> bool:
    """True если char — один из 18 символов таблицы."""
    return char in VULGAR_FRACTIONS


def glyph_to_rational(glyph: str) -> Optional[Rational]:
    """
    Прямой поиск: символ → дробь.

    Args:
        glyph: Один Unicode-символ

    Returns:
        Дробь или None, если символа нет в таблице

    Examples:
        >>> glyph_to_rational("½")
        Rational(1, 2)
        >>> glyph_to_rational("a") is None
        True
    """
    return VULGAR_FRACTIONS.get(glyph)


def rational_to_glyph(value: Rational) -> Optional[str]:
    """
    Обратный поиск: дробь → символ.

    Сравнивает канонические формы, поэтому Rational(2, 4) находит "½".
    Для значений вне таблицы (включая целые и 0) возвращает None.

    Examples:
        >>> rational_to_glyph(Rational(7, 8))
        '⅞'
        >>> rational_to_glyph(Rational(2, 7)) is None
        True
    """
    for glyph, fraction in VULGAR_FRACTIONS.items():
        if fraction == value:
            return glyph
    return None
