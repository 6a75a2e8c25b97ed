"""
Rational — Точные рациональные количества

Количества ингредиентов хранятся как точные дроби: float не может
представить "1/3 cup" без потерь.

ИНВАРИАНТЫ (выполняются для каждого созданного значения):
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. Ноль представлен единственным образом: 0/1
4. Знак дроби хранится только в numerator

Значение неизменяемо. Любая арифметическая операция возвращает новое
нормализованное значение.
"""

from __future__ import annotations

import functools
import math
from typing import Final, Union

from src.core.errors import DivisionByZero


def _is_int(value: object) -> bool:
    """bool формально int, но как компонент дроби не допускается."""
    return isinstance(value, int) and not isinstance(value, bool)


@functools.total_ordering
class Rational:
    """
    Каноническая дробь numerator/denominator.

    Конструктор нормализует пару:
        g = gcd(n, d)
        sign = sign(n * d)
        numerator = sign * |n / g|
        denominator = |d / g|

    Raises:
        DivisionByZero: Если denominator == 0
        TypeError: Если компоненты не являются целыми числами

    Examples:
        >>> Rational(2, 4)
        Rational(1, 2)
        >>> Rational(5, -2)
        Rational(-5, 2)
        >>> Rational(0, -7)
        Rational(0, 1)
    """

    __slots__ = ("numerator", "denominator")

    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        n, d = numerator, denominator
        if not _is_int(n) or not _is_int(d):
            raise TypeError(
                f"Rational components must be integers, got "
                f"{type(n).__name__}/{type(d).__name__}"
            )
        if d == 0:
            raise DivisionByZero(f"denominator must not be zero: {n}/0")

        g = math.gcd(n, d)
        sign = -1 if (n < 0) != (d < 0) and n != 0 else 1

        object.__setattr__(self, "numerator", sign * (abs(n) // g))
        object.__setattr__(self, "denominator", abs(d) // g)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Rational is immutable: cannot assign {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Rational is immutable: cannot delete {name!r}")

    def __reduce__(self):
        return (Rational, (self.numerator, self.denominator))

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    @classmethod
    def from_int(cls, value: int) -> Rational:
        """n → n/1"""
        return cls(value, 1)

    @classmethod
    def parse(cls, text: str) -> Rational:
        """
        Разбор текстового количества ("1", "-3/4", "2½", "1 1/3").

        Raises:
            QuantityParseError: Если текст не соответствует грамматике
            DivisionByZero: Если знаменатель в тексте равен нулю
        """
        from src.notation.state_machine import parse_rational

        return parse_rational(text)

    def is_integer(self) -> bool:
        return self.denominator == 1

    def __int__(self) -> int:
        # Усечение к нулю, как у int(float)
        whole = abs(self.numerator) // self.denominator
        return -whole if self.numerator < 0 else whole

    def __str__(self) -> str:
        from src.notation.formatter import format_rational

        return format_rational(self)

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        # Нормализация уникальна: достаточно сравнить канонические пары
        if isinstance(other, Rational):
            return (
                self.numerator == other.numerator
                and self.denominator == other.denominator
            )
        if _is_int(other):
            return self.denominator == 1 and self.numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        # Согласовано с __eq__ для целых: hash(Rational(3)) == hash(3)
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: RationalLike) -> bool:
        other_r = _coerce(other)
        if other_r is NotImplemented:
            return NotImplemented
        return (
            self.numerator * other_r.denominator
            < other_r.numerator * self.denominator
        )

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self, other: RationalLike) -> Rational:
        other_r = _coerce(other)
        if other_r is NotImplemented:
            return NotImplemented
        a, b = self.numerator, self.denominator
        c, d = other_r.numerator, other_r.denominator
        return Rational(a * d + c * b, b * d)

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> Rational:
        other_r = _coerce(other)
        if other_r is NotImplemented:
            return NotImplemented
        a, b = self.numerator, self.denominator
        c, d = other_r.numerator, other_r.denominator
        return Rational(a * d - c * b, b * d)

    def __rsub__(self, other: RationalLike) -> Rational:
        other_r = _coerce(other)
        if other_r is NotImplemented:
            return NotImplemented
        return other_r - self

    def __mul__(self, other: RationalLike) -> Rational:
        other_r = _coerce(other)
        if other_r is NotImplemented:
            return NotImplemented
        return Rational(
            self.numerator * other_r.numerator,
            self.denominator * other_r.denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> Rational:
        """
        a/b ÷ c/d = ad/bc

        Raises:
            DivisionByZero: Если делитель равен нулю
        """
        other_r = _coerce(other)
        if other_r is NotImplemented:
            return NotImplemented
        if other_r.numerator == 0:
            raise DivisionByZero(f"division of {self!r} by zero")
        return Rational(
            self.numerator * other_r.denominator,
            self.denominator * other_r.numerator,
        )

    def __rtruediv__(self, other: RationalLike) -> Rational:
        other_r = _coerce(other)
        if other_r is NotImplemented:
            return NotImplemented
        return other_r / self

    def __neg__(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return Rational(abs(self.numerator), self.denominator)


RationalLike = Union[Rational, int]


def _coerce(value: object):
    """Rational или int → Rational, иначе NotImplemented."""
    if isinstance(value, Rational):
        return value
    if _is_int(value):
        return Rational(value, 1)
    return NotImplemented


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Rational] = Rational(0, 1)
ONE: Final[Rational] = Rational(1, 1)
