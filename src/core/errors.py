"""
Errors — Иерархия исключений для рациональных количеств

Все ошибки возвращаются вызывающему коду как обычные исключения.
Ни одна операция не завершает процесс.

Иерархия:
- RationalError (ValueError)
  - DivisionByZero (также ZeroDivisionError)
  - QuantityParseError
    - UnexpectedEndOfLine
    - NumberExpected
    - InvalidNumber
    - InvalidCharacter
- ContractViolation (ValueError)
"""

from typing import List, Optional


class RationalError(ValueError):
    """Базовый класс для всех ошибок рациональных чисел."""

    pass


class DivisionByZero(RationalError, ZeroDivisionError):
    """
    Нулевой знаменатель при конструировании или делении.

    Наследует ZeroDivisionError, чтобы обычный арифметический код
    мог перехватить ошибку без знания о типе Rational.
    """

    def __init__(self, message: str = "denominator must not be zero"):
        super().__init__(message)


# =============================================================================
# ОШИБКИ ПАРСЕРА
# =============================================================================


class QuantityParseError(RationalError):
    """
    Базовый класс ошибок разбора текста количества.

    Attributes:
        text: Исходный текст, который не удалось разобрать
    """

    def __init__(self, message: str, text: Optional[str] = None):
        if text is not None:
            message = f"{message} in {text!r}"
        super().__init__(message)
        self.text = text


class UnexpectedEndOfLine(QuantityParseError):
    """Пустой ввод: не прочитано ни одного символа."""

    def __init__(self, text: Optional[str] = None):
        super().__init__("unexpected end of line", text)


class NumberExpected(QuantityParseError):
    """Ввод закончился там, где ожидалась последовательность цифр."""

    def __init__(self, text: Optional[str] = None):
        super().__init__("number expected", text)


class InvalidNumber(QuantityParseError):
    """
    Последовательность цифр выходит за допустимый диапазон.

    Attributes:
        component: Какая часть числа переполнена (whole/numerator/denominator)
    """

    def __init__(self, component: str, limit: int, text: Optional[str] = None):
        super().__init__(f"invalid number: {component} exceeds {limit}", text)
        self.component = component
        self.limit = limit


class InvalidCharacter(QuantityParseError):
    """
    Символ, для которого нет перехода из текущего состояния.

    Attributes:
        char: Недопустимый символ
        position: Позиция символа в тексте (с 0)
    """

    def __init__(self, char: str, position: int, text: Optional[str] = None):
        super().__init__(f"invalid character {char!r} at position {position}", text)
        self.char = char
        self.position = position


# =============================================================================
# КОНТРАКТЫ
# =============================================================================


class ContractViolation(ValueError):
    """
    JSON документ не соответствует схеме контракта.

    Attributes:
        schema_name: Имя нарушенной схемы
        violations: Сообщения "путь: ошибка" в порядке путей
    """

    def __init__(self, schema_name: str, violations: List[str]):
        super().__init__(f"{schema_name} contract violated: " + "; ".join(violations))
        self.schema_name = schema_name
        self.violations = violations
