"""
Recipe — Модели рецепта и ингредиента

Immutable Pydantic модели. Количество ингредиента — точная дробь Rational,
которая в JSON передаётся как текст ("1⅔", "2 3/7", "4").
Совместимы с JSON Schema (contracts/schema/ingredient.json, recipe.json).
"""

from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, Field, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.core.contracts import validate_ingredient, validate_recipe
from src.core.domain.rational import Rational
from src.notation.formatter import format_rational
from src.notation.state_machine import parse_rational


# =============================================================================
# QUANTITY FIELD
# =============================================================================


def _validate_quantity(value: Any) -> Rational:
    """
    Приведение входного значения к Rational.

    - Rational: без изменений
    - int: n/1
    - str: разбор парсером количеств

    Raises:
        ValueError: Для float, bool и прочих типов; QuantityParseError
                    и DivisionByZero тоже являются ValueError
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, bool):
        raise ValueError("quantity must be text or an integer, got bool")
    if isinstance(value, int):
        return Rational.from_int(value)
    if isinstance(value, str):
        return parse_rational(value)
    raise ValueError(f"quantity must be text or an integer, got {type(value).__name__}")


class _QuantityAnnotation:
    """
    Pydantic-схема для Rational: текст на входе и выходе JSON.

    В python-режиме (model_dump()) значение остаётся Rational, так что
    model_validate(model_dump()) принимает его без разбора.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_quantity,
            serialization=core_schema.plain_serializer_function_ser_schema(
                format_rational,
                return_schema=core_schema.str_schema(),
                when_used="json",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema())


Quantity = Annotated[Rational, _QuantityAnnotation]


# =============================================================================
# MODELS
# =============================================================================


class Ingredient(BaseModel):
    """Ингредиент: название, точное количество, единица измерения."""

    name: str = Field(..., min_length=1, description="Название ингредиента")
    quantity: Quantity = Field(..., description="Количество (точная дробь)")
    unit: str = Field(..., description="Единица измерения ('g', 'cup', 'pc')")

    model_config = {"frozen": True}

    def scaled(self, factor: Rational) -> "Ingredient":
        """Копия с количеством, умноженным на factor."""
        return self.model_copy(update={"quantity": self.quantity * factor})

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Ingredient":
        """
        Построение из JSON документа с проверкой контракта ingredient.json.

        Raises:
            ContractViolation: Если документ не соответствует схеме
            ValidationError: Если количество проходит схему, но не парсер ("1/0")
        """
        validate_ingredient(document)
        return cls.model_validate(document)

    def to_document(self) -> Dict[str, Any]:
        """JSON документ ингредиента, проверенный контрактом."""
        document = self.model_dump(mode="json")
        validate_ingredient(document)
        return document


class Recipe(BaseModel):
    """
    Рецепт: название, описание приготовления, порции, ингредиенты.

    Immutable модель (frozen=True).
    """

    title: str = Field(..., min_length=1, description="Название рецепта")
    preparation: str = Field("", description="Описание приготовления")
    servings: int = Field(..., ge=0, le=255, description="Количество порций")
    ingredients: List[Ingredient] = Field(
        default_factory=list, description="Список ингредиентов"
    )

    model_config = {"frozen": True}

    def scaled(self, servings: int) -> "Recipe":
        """
        Пересчёт рецепта на другое количество порций.

        Каждое количество умножается точно на servings / self.servings.

        Args:
            servings: Новое количество порций

        Returns:
            Новый Recipe

        Raises:
            DivisionByZero: Если у исходного рецепта 0 порций
            ValidationError: Если servings вне диапазона 0..255
        """
        factor = Rational.from_int(servings) / self.servings
        return Recipe(
            title=self.title,
            preparation=self.preparation,
            servings=servings,
            ingredients=[i.scaled(factor) for i in self.ingredients],
        )

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Recipe":
        """
        Построение рецепта из JSON документа.

        Сначала документ проверяется контрактом recipe.json (все нарушения
        сразу, с путями), затем строится модель.

        Raises:
            ContractViolation: Если документ не соответствует схеме
            ValidationError: Если количество проходит схему, но не парсер ("1/0")
        """
        validate_recipe(document)
        return cls.model_validate(document)

    def to_document(self) -> Dict[str, Any]:
        """
        JSON документ рецепта (количества текстом), проверенный контрактом.

        Raises:
            ContractViolation: Если сериализация разошлась со схемой
        """
        document = self.model_dump(mode="json")
        validate_recipe(document)
        return document
