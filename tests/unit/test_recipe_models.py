"""
Tests for Recipe Pydantic Models

Комплексное тестирование Pydantic V2 моделей:
- Ingredient (количество как текст в JSON)
- Recipe (порции, список ингредиентов)

Покрывает:
- Создание и валидация моделей
- JSON сериализация/десериализация
- Ошибки разбора количества → ValidationError
- Immutability (frozen=True)
- Точный пересчёт порций
- JSON Schema compliance
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import Rational
from src.core.errors import ContractViolation, DivisionByZero
from src.recipes import Ingredient, Recipe


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def lasagne_json() -> str:
    """Рецепт в JSON: количество записано текстом."""
    return json.dumps(
        {
            "title": "Lasagne",
            "preparation": "Du weist schon wie",
            "servings": 4,
            "ingredients": [
                {"name": "Pasta", "quantity": "1⅔", "unit": "pc"},
                {"name": "Tomatoes", "quantity": "2 3/7", "unit": "kg"},
                {"name": "Salt", "quantity": 2, "unit": "tsp"},
            ],
        },
        ensure_ascii=False,
    )


@pytest.fixture
def lasagne() -> Recipe:
    return Recipe(
        title="Lasagne",
        preparation="Du weist schon wie",
        servings=4,
        ingredients=[
            Ingredient(name="Pasta", quantity=Rational(5, 3), unit="pc"),
            Ingredient(name="Tomatoes", quantity=Rational(17, 7), unit="kg"),
            Ingredient(name="Salt", quantity=Rational(2), unit="tsp"),
        ],
    )


# =============================================================================
# INGREDIENT
# =============================================================================


class TestIngredient:
    """Тесты для модели Ingredient"""

    @pytest.mark.parametrize(
        "quantity, expected",
        [
            ("½", Rational(1, 2)),
            ("42 1/2", Rational(85, 2)),
            ("-6⅔", Rational(-20, 3)),
            (3, Rational(3)),
            (Rational(2, 4), Rational(1, 2)),
        ],
    )
    def test_quantity_input(self, quantity, expected: Rational) -> None:
        ingredient = Ingredient(name="Flour", quantity=quantity, unit="cup")
        assert ingredient.quantity == expected
        assert isinstance(ingredient.quantity, Rational)

    @pytest.mark.parametrize("quantity", ["", "1/a", "1//", "+", "1  1/2", "1/0"])
    def test_invalid_quantity_text(self, quantity: str) -> None:
        with pytest.raises(ValidationError):
            Ingredient(name="Flour", quantity=quantity, unit="cup")

    @pytest.mark.parametrize("quantity", [0.5, True, None, [1, 2]])
    def test_invalid_quantity_type(self, quantity) -> None:
        with pytest.raises(ValidationError):
            Ingredient(name="Flour", quantity=quantity, unit="cup")

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            Ingredient(name="", quantity="1", unit="cup")

    def test_json_serializes_quantity_as_text(self) -> None:
        ingredient = Ingredient(name="Milk", quantity=Rational(7, 2), unit="cup")

        assert ingredient.model_dump(mode="json") == {
            "name": "Milk",
            "quantity": "3½",
            "unit": "cup",
        }

    def test_python_dump_keeps_rational(self) -> None:
        ingredient = Ingredient(name="Milk", quantity=Rational(7, 2), unit="cup")
        assert ingredient.model_dump()["quantity"] == Rational(7, 2)
        assert Ingredient.model_validate(ingredient.model_dump()) == ingredient

    def test_document_round_trip(self) -> None:
        ingredient = Ingredient(name="Milk", quantity=Rational(-7, 2), unit="cup")
        document = ingredient.to_document()

        assert document["quantity"] == "-3½"
        assert Ingredient.from_document(document) == ingredient

    def test_from_document_checks_contract(self) -> None:
        with pytest.raises(ContractViolation):
            Ingredient.from_document({"name": "Milk", "quantity": 0.5, "unit": "cup"})

    def test_immutable(self) -> None:
        ingredient = Ingredient(name="Milk", quantity="1", unit="l")
        with pytest.raises(ValidationError):
            ingredient.quantity = Rational(2)  # type: ignore[misc]

    def test_json_schema_quantity_is_string(self) -> None:
        schema = Ingredient.model_json_schema()
        assert schema["properties"]["quantity"]["type"] == "string"


# =============================================================================
# RECIPE
# =============================================================================


class TestRecipe:
    """Тесты для модели Recipe"""

    def test_deserialize(self, lasagne_json: str, lasagne: Recipe) -> None:
        assert Recipe.model_validate_json(lasagne_json) == lasagne

    def test_serialize(self, lasagne: Recipe) -> None:
        data = json.loads(lasagne.model_dump_json())

        assert [i["quantity"] for i in data["ingredients"]] == ["1⅔", "2 3/7", "2"]

    def test_json_round_trip(self, lasagne: Recipe) -> None:
        assert Recipe.model_validate_json(lasagne.model_dump_json()) == lasagne

    def test_python_round_trip(self, lasagne: Recipe) -> None:
        dumped = lasagne.model_dump()

        assert dumped["ingredients"][0]["quantity"] == Rational(5, 3)
        assert isinstance(dumped["ingredients"][0]["quantity"], Rational)
        assert Recipe.model_validate(dumped) == lasagne

    def test_python_copy(self, lasagne: Recipe) -> None:
        assert lasagne.model_copy(deep=True) == lasagne

    def test_defaults(self) -> None:
        recipe = Recipe(title="Water", servings=1)
        assert recipe.preparation == ""
        assert recipe.ingredients == []

    @pytest.mark.parametrize("servings", [-1, 256])
    def test_servings_bounds(self, servings: int) -> None:
        with pytest.raises(ValidationError):
            Recipe(title="Soup", servings=servings)

    def test_invalid_nested_quantity(self, lasagne_json: str) -> None:
        broken = lasagne_json.replace("2 3/7", "2 3//7")
        with pytest.raises(ValidationError):
            Recipe.model_validate_json(broken)


class TestScaling:
    """Точный пересчёт порций"""

    def test_scale_up(self, lasagne: Recipe) -> None:
        scaled = lasagne.scaled(6)

        assert scaled.servings == 6
        assert [i.quantity for i in scaled.ingredients] == [
            Rational(5, 2),
            Rational(51, 14),
            Rational(3),
        ]

    def test_scale_down_is_exact(self, lasagne: Recipe) -> None:
        """Обратный пересчёт возвращает исходные количества без потерь"""
        assert lasagne.scaled(3).scaled(4) == lasagne

    def test_original_unchanged(self, lasagne: Recipe) -> None:
        lasagne.scaled(8)
        assert lasagne.servings == 4
        assert lasagne.ingredients[0].quantity == Rational(5, 3)

    def test_scale_from_zero_servings(self) -> None:
        recipe = Recipe(
            title="Nothing",
            servings=0,
            ingredients=[Ingredient(name="Air", quantity="1", unit="l")],
        )
        with pytest.raises(DivisionByZero):
            recipe.scaled(2)

    def test_scale_to_zero_servings(self, lasagne: Recipe) -> None:
        scaled = lasagne.scaled(0)
        assert all(i.quantity == 0 for i in scaled.ingredients)

    def test_scale_out_of_range(self, lasagne: Recipe) -> None:
        with pytest.raises(ValidationError):
            lasagne.scaled(256)


class TestDocuments:
    """JSON документы рецепта: контракт на входе и выходе"""

    def test_to_document(self, lasagne: Recipe) -> None:
        document = lasagne.to_document()

        assert document["servings"] == 4
        assert [i["quantity"] for i in document["ingredients"]] == ["1⅔", "2 3/7", "2"]

    def test_from_document(self, lasagne_json: str, lasagne: Recipe) -> None:
        document = json.loads(lasagne_json)
        assert Recipe.from_document(document) == lasagne

    def test_document_round_trip_after_scaling(self, lasagne: Recipe) -> None:
        scaled = lasagne.scaled(7)
        assert Recipe.from_document(scaled.to_document()) == scaled

    def test_contract_violation_reports_all_paths(self, lasagne_json: str) -> None:
        document = json.loads(lasagne_json)
        document["servings"] = 300
        document["ingredients"][1]["quantity"] = "2 3//7"

        with pytest.raises(ContractViolation) as exc_info:
            Recipe.from_document(document)

        paths = [v.split(": ", 1)[0] for v in exc_info.value.violations]
        assert paths == ["ingredients/1/quantity", "servings"]

    def test_zero_denominator_passes_contract_fails_model(self, lasagne_json: str) -> None:
        document = json.loads(lasagne_json)
        document["ingredients"][0]["quantity"] = "1/0"

        with pytest.raises(ValidationError):
            Recipe.from_document(document)
