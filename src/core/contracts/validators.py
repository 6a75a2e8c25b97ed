"""
Recipe Contracts — JSON Schema проверка документов рецептов

Документ — то, что Recipe.to_document() отдаёт и Recipe.from_document()
принимает: dict из JSON, в котором количество записано текстом или целым.
Перед построением модели документ проверяется против contracts/schema/*.json.

Схемы:
- ingredient.json — ингредиент с текстовым количеством
- recipe.json — рецепт со списком ингредиентов ($defs/ingredient)

Pattern количества в схемах повторяет грамматику парсера, но не знает
про нулевой знаменатель и ограничение max_component: "1/0" проходит
контракт и отклоняется уже при построении модели.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import structlog
from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError

from src.core.errors import ContractViolation

logger = structlog.get_logger(__name__)

# contracts/schema/ в корне проекта
SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


@lru_cache(maxsize=None)
def load_validator(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Draft202012Validator:
    """
    Загрузка схемы и построение validator (кэшируется по имени и каталогу).

    Args:
        schema_name: Имя схемы без расширения ('ingredient', 'recipe')
        schema_dir: Каталог со схемами

    Returns:
        Draft 2020-12 validator

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    # Meta-validation самой схемы
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return Draft202012Validator(schema)


def iter_violations(
    schema_name: str, document: Any, schema_dir: Path = SCHEMA_DIR
) -> Iterator[str]:
    """
    Нарушения контракта в виде "путь: сообщение", упорядоченные по пути.

    Корень документа обозначается как "$".
    """
    validator = load_validator(schema_name, schema_dir)
    errors = sorted(
        validator.iter_errors(document),
        key=lambda e: [str(part) for part in e.absolute_path],
    )
    for error in errors:
        path = "/".join(str(part) for part in error.absolute_path) or "$"
        yield f"{path}: {error.message}"


def check_document(
    schema_name: str, document: Any, schema_dir: Path = SCHEMA_DIR
) -> None:
    """
    Проверка документа против схемы.

    Raises:
        ContractViolation: Со списком всех нарушений
    """
    violations = list(iter_violations(schema_name, document, schema_dir))
    if violations:
        logger.debug("contract_violation", schema=schema_name, violations=violations)
        raise ContractViolation(schema_name, violations)


def validate_ingredient(document: Dict[str, Any]) -> None:
    check_document("ingredient", document)


def validate_recipe(document: Dict[str, Any]) -> None:
    check_document("recipe", document)
