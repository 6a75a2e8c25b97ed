"""
Recipes — модели рецептов, использующие точные количества.

Количество ингредиента в JSON передаётся текстом и разбирается
парсером из src.notation.
"""

from .models import Ingredient, Quantity, Recipe

__all__ = [
    "Ingredient",
    "Quantity",
    "Recipe",
]
