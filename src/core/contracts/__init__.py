"""
Contract Validation Module

Модуль для проверки JSON документов рецептов против JSON Schema контрактов.
"""

from .validators import (
    SCHEMA_DIR,
    check_document,
    iter_violations,
    load_validator,
    validate_ingredient,
    validate_recipe,
)

__all__ = [
    "SCHEMA_DIR",
    "load_validator",
    "iter_violations",
    "check_document",
    "validate_ingredient",
    "validate_recipe",
]
