"""Quantity Parser — конечный автомат разбора текстовых количеств.

Один проход слева направо без возвратов. Каждый символ однозначно
выбирает следующее состояние или немедленно завершает разбор ошибкой.

Допустимые записи:
- целое число: "1", "+2", "-42"
- простая дробь: "1/2", "-125/126"
- Unicode-дробь: "½", "-⅔"
- смешанное число: "42½", "42 ½", "42 1/2", "-6 2/3"

Таблица переходов (пусто = InvalidCharacter):

    state | digit | vulgar | sign | '/' | ' '
    ------+-------+--------+------+-----+-----
    Q0    | Q2    | Q5     | Q1   |     |
    Q1    | Q2    | Q5     |      |     |
    Q2    | Q2    | Q5     |      | Q3  | Q6
    Q3    | Q4    |        |      |     |
    Q4    | Q4    |        |      |     |
    Q5    |       |        |      |     |
    Q6    | Q7    | Q5     |      |     |
    Q7    | Q7    |        |      | Q3  |

Финальные состояния: Q2, Q4, Q5.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Final, Optional, Tuple

import structlog

from src.core.domain.rational import Rational
from src.core.domain.vulgar_fractions import glyph_to_rational
from src.core.errors import (
    InvalidCharacter,
    InvalidNumber,
    NumberExpected,
    QuantityParseError,
    UnexpectedEndOfLine,
)

logger = structlog.get_logger(__name__)


# Верхняя граница одной последовательности цифр (signed 64-bit)
MAX_COMPONENT_INT64: Final[int] = 2**63 - 1


class ParseState(str, Enum):
    """Состояние автомата разбора."""

    Q0 = "Q0"  # start
    Q1 = "Q1"  # sign
    Q2 = "Q2"  # whole digits / numerator of a bare fraction
    Q3 = "Q3"  # fraction bar
    Q4 = "Q4"  # denominator digits
    Q5 = "Q5"  # vulgar fraction glyph
    Q6 = "Q6"  # whole part + one space
    Q7 = "Q7"  # numerator digits of a mixed fraction


FINAL_STATES: Final[frozenset] = frozenset({ParseState.Q2, ParseState.Q4, ParseState.Q5})

# Ввод закончился, но ожидались цифры
NUMBER_EXPECTED_STATES: Final[frozenset] = frozenset(
    {ParseState.Q1, ParseState.Q3, ParseState.Q6, ParseState.Q7}
)


class CharClass(str, Enum):
    """Класс входного символа."""

    DIGIT = "digit"
    SIGN = "sign"
    SLASH = "slash"
    SPACE = "space"
    VULGAR = "vulgar"
    OTHER = "other"


def classify(char: str) -> CharClass:
    """
    Класс символа для таблицы переходов.

    Цифрами считаются только ASCII 0-9; пробелом только U+0020.
    """
    if "0" <= char <= "9":
        return CharClass.DIGIT
    if char in ("+", "-"):
        return CharClass.SIGN
    if char == "/":
        return CharClass.SLASH
    if char == " ":
        return CharClass.SPACE
    if glyph_to_rational(char) is not None:
        return CharClass.VULGAR
    return CharClass.OTHER


@dataclass(frozen=True)
class MixedFraction:
    """
    Накопленный результат разбора: sign * (whole + numerator/denominator).

    Для целого числа numerator = 0, denominator = 1.
    """

    sign: int = 1
    whole: int = 0
    numerator: int = 0
    denominator: int = 1

    def to_rational(self) -> Rational:
        """
        sign * (whole * denominator + numerator) / denominator

        Raises:
            DivisionByZero: Если denominator == 0 (например, "1/0")
        """
        return Rational(
            self.sign * (self.whole * self.denominator + self.numerator),
            self.denominator,
        )


@dataclass(frozen=True)
class ParserConfig:
    """
    Конфигурация парсера.

    Attributes:
        max_component: Максимальное значение одной последовательности цифр
                      (целой части, числителя или знаменателя)
    """

    max_component: int = MAX_COMPONENT_INT64


class QuantityParser:
    """
    Детерминированный конечный автомат text → Rational.

    Состояние автомата — пара (ParseState, MixedFraction). Единственная
    функция переходов transition() вызывается в цикле по символам.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Args:
            config: конфигурация парсера (по умолчанию ParserConfig())
        """
        self.config = config or ParserConfig()

    def parse(self, text: str) -> Rational:
        """
        Разбор текста в каноническую дробь.

        Args:
            text: Текст количества

        Returns:
            Rational

        Raises:
            UnexpectedEndOfLine: Пустой ввод
            NumberExpected: Ввод закончился в Q1, Q3, Q6 или Q7
            InvalidCharacter: Символ без перехода из текущего состояния
            InvalidNumber: Последовательность цифр больше max_component
            DivisionByZero: Нулевой знаменатель ("1/0")
        """
        state = ParseState.Q0
        payload = MixedFraction()

        try:
            for position, char in enumerate(text):
                state, payload = self.transition(state, payload, char, position, text)
            return self._finish(state, payload, text)
        except QuantityParseError as e:
            logger.debug(
                "quantity_parse_rejected",
                text=text,
                state=state.value,
                error=type(e).__name__,
            )
            raise

    def transition(
        self,
        state: ParseState,
        payload: MixedFraction,
        char: str,
        position: int = 0,
        text: Optional[str] = None,
    ) -> Tuple[ParseState, MixedFraction]:
        """
        Функция переходов δ(state, char).

        Args:
            state: текущее состояние
            payload: накопленный результат
            char: очередной символ
            position: позиция символа (для сообщения об ошибке)
            text: исходный текст (для сообщения об ошибке)

        Returns:
            (новое состояние, новый накопленный результат)

        Raises:
            InvalidCharacter: Если перехода нет
            InvalidNumber: Если последовательность цифр переполнена
        """
        char_class = classify(char)

        if char_class == CharClass.DIGIT:
            digit = ord(char) - ord("0")

            # Первая цифра последовательности начинает её с нуля
            if state in (ParseState.Q0, ParseState.Q1, ParseState.Q2):
                start = payload.whole if state == ParseState.Q2 else 0
                whole = self._append_digit(start, digit, "whole", text)
                return ParseState.Q2, replace(payload, whole=whole)
            if state in (ParseState.Q3, ParseState.Q4):
                start = payload.denominator if state == ParseState.Q4 else 0
                denominator = self._append_digit(start, digit, "denominator", text)
                return ParseState.Q4, replace(payload, denominator=denominator)
            if state in (ParseState.Q6, ParseState.Q7):
                start = payload.numerator if state == ParseState.Q7 else 0
                numerator = self._append_digit(start, digit, "numerator", text)
                return ParseState.Q7, replace(payload, numerator=numerator)

        elif char_class == CharClass.VULGAR:
            if state in (ParseState.Q0, ParseState.Q1, ParseState.Q2, ParseState.Q6):
                glyph = glyph_to_rational(char)
                return ParseState.Q5, replace(
                    payload,
                    numerator=glyph.numerator,
                    denominator=glyph.denominator,
                )

        elif char_class == CharClass.SIGN:
            if state == ParseState.Q0:
                return ParseState.Q1, replace(payload, sign=-1 if char == "-" else 1)

        elif char_class == CharClass.SLASH:
            if state == ParseState.Q2:
                # Цифры до '/' были числителем простой дроби
                return ParseState.Q3, replace(
                    payload, whole=0, numerator=payload.whole, denominator=0
                )
            if state == ParseState.Q7:
                return ParseState.Q3, replace(payload, denominator=0)

        elif char_class == CharClass.SPACE:
            if state == ParseState.Q2:
                return ParseState.Q6, payload

        raise InvalidCharacter(char, position, text)

    def _append_digit(
        self, value: int, digit: int, component: str, text: Optional[str]
    ) -> int:
        result = value * 10 + digit
        if result > self.config.max_component:
            raise InvalidNumber(component, self.config.max_component, text)
        return result

    def _finish(self, state: ParseState, payload: MixedFraction, text: str) -> Rational:
        """Результат по финальному состоянию или ошибка конца ввода."""
        if state in FINAL_STATES:
            return payload.to_rational()
        if state in NUMBER_EXPECTED_STATES:
            raise NumberExpected(text)
        # Q0: не прочитано ни одного символа
        raise UnexpectedEndOfLine(text)


# Парсер с конфигурацией по умолчанию
_DEFAULT_PARSER = QuantityParser()


def parse_rational(text: str) -> Rational:
    """
    Разбор текстового количества парсером по умолчанию.

    Examples:
        >>> parse_rational("42 1/2")
        Rational(85, 2)
        >>> parse_rational("-6⅔")
        Rational(-20, 3)
    """
    return _DEFAULT_PARSER.parse(text)
