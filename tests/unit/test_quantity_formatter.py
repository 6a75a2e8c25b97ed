"""Тесты для форматирования количеств.

Coverage:
- Целые, Unicode-дроби, цифровые дроби, смешанные числа
- Отрицательные значения и ноль
- FormatterConfig(prefer_vulgar_glyphs=False)
- Обратный разбор: parse_rational(format_rational(r)) == r
"""

import pytest

from src.core.domain import VULGAR_FRACTIONS, ZERO, Rational
from src.notation import (
    FormatterConfig,
    QuantityFormatter,
    format_rational,
    parse_rational,
)


class TestFormat:
    """Форматирование по умолчанию."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Rational(1, 2), "½"),
            (Rational(7, 2), "3½"),
            (Rational(-7, 2), "-3½"),
            (Rational(112, 11), "10 2/11"),
            (Rational(-112, 11), "-10 2/11"),
            (Rational(42, 5), "8⅖"),
            (Rational(-1, 8), "-⅛"),
            (Rational(2, 11), "2/11"),
            (Rational(-2, 11), "-2/11"),
        ],
    )
    def test_fractions(self, value: Rational, expected: str) -> None:
        assert format_rational(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Rational(0), "0"),
            (Rational(1), "1"),
            (Rational(-42), "-42"),
            (Rational(10, 2), "5"),
        ],
    )
    def test_integers(self, value: Rational, expected: str) -> None:
        assert format_rational(value) == expected

    def test_never_emits_plus(self) -> None:
        assert not format_rational(Rational(5, 3)).startswith("+")


class TestFormatterConfig:
    """Цифровая запись без Unicode-символов."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Rational(1, 2), "1/2"),
            (Rational(7, 2), "3 1/2"),
            (Rational(-7, 2), "-3 1/2"),
            (Rational(4), "4"),
            (ZERO, "0"),
        ],
    )
    def test_digits_only(self, value: Rational, expected: str) -> None:
        formatter = QuantityFormatter(FormatterConfig(prefer_vulgar_glyphs=False))
        assert formatter.format(value) == expected

    def test_default_config(self) -> None:
        assert QuantityFormatter().config == FormatterConfig()
        assert QuantityFormatter().config.prefer_vulgar_glyphs is True


class TestRoundTrip:
    """parse_rational(format_rational(r)) == r"""

    @pytest.mark.parametrize(
        "value",
        [
            ZERO,
            Rational(-3, 7),
            Rational(22, 7),
            Rational(85, 2),
            Rational(-20, 3),
            Rational(-112, 11),
            Rational(2**40 + 1, 3),
        ],
    )
    def test_round_trip(self, value: Rational) -> None:
        assert parse_rational(format_rational(value)) == value

    @pytest.mark.parametrize("value", list(VULGAR_FRACTIONS.values()))
    def test_round_trip_glyph_values(self, value: Rational) -> None:
        text = format_rational(value)

        assert len(text) == 1
        assert parse_rational(text) == value

    @pytest.mark.parametrize("value", list(VULGAR_FRACTIONS.values()))
    def test_round_trip_mixed_glyph_values(self, value: Rational) -> None:
        mixed = -(value + 12)
        assert parse_rational(format_rational(mixed)) == mixed

    @pytest.mark.parametrize("value", [Rational(7, 2), Rational(-13, 4), Rational(9, 11)])
    def test_round_trip_digits_only(self, value: Rational) -> None:
        formatter = QuantityFormatter(FormatterConfig(prefer_vulgar_glyphs=False))
        assert parse_rational(formatter.format(value)) == value
