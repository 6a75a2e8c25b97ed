"""Quantity Formatter — Rational → текст.

Выбирает наиболее естественную из эквивалентных записей:
- целое: "3", "-42", "0"
- Unicode-дробь: "½", "3½", "-3½"
- цифровая дробь: "2/11", "10 2/11", "-10 2/11"

Запись всегда разбирается обратно парсером в то же каноническое
значение: parse_rational(format_rational(r)) == r.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.rational import Rational
from src.core.domain.vulgar_fractions import rational_to_glyph


@dataclass(frozen=True)
class FormatterConfig:
    """
    Конфигурация форматирования.

    Attributes:
        prefer_vulgar_glyphs: Записывать дробную часть Unicode-символом,
                              если он есть в таблице. Иначе всегда "n/d".
    """

    prefer_vulgar_glyphs: bool = True


class QuantityFormatter:
    """Форматирование канонической дроби в текст."""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()

    def format(self, value: Rational) -> str:
        """
        Rational → текст.

        Алгоритм:
        1. "-" для отрицательных
        2. Целая часть |n| // d, если не 0
        3. Остаток |n| % d:
           - символ из таблицы сразу после целой части ("3½")
           - иначе " n/d" (пробел только после целой части)
           - ничего, если остаток 0

        Args:
            value: Каноническая дробь

        Returns:
            Текстовая запись ("0" для нуля)
        """
        negative = value.numerator < 0
        whole, remainder = divmod(abs(value.numerator), value.denominator)

        parts = []
        if negative:
            parts.append("-")
        if whole != 0:
            parts.append(str(whole))

        if remainder != 0:
            fraction = Rational(remainder, value.denominator)
            glyph = rational_to_glyph(fraction) if self.config.prefer_vulgar_glyphs else None

            if glyph is not None:
                parts.append(glyph)
            else:
                if whole != 0:
                    parts.append(" ")
                parts.append(f"{fraction.numerator}/{fraction.denominator}")
        elif whole == 0:
            parts.append("0")

        return "".join(parts)


_DEFAULT_FORMATTER = QuantityFormatter()


def format_rational(value: Rational) -> str:
    """
    Форматирование форматтером по умолчанию.

    Форматирование тотально для любых int, но parse_rational ограничивает
    каждую последовательность цифр значением ParserConfig.max_component
    (2**63 - 1). Текст дроби с компонентой больше предела обратно не
    разбирается (InvalidNumber); для таких значений нужен парсер с большим
    max_component.

    Examples:
        >>> format_rational(Rational(7, 2))
        '3½'
        >>> format_rational(Rational(-112, 11))
        '-10 2/11'
    """
    return _DEFAULT_FORMATTER.format(value)
