"""
JSON Schema Contract Validators

Валидация снапшотов OwnedMatrix против JSON Schema контракта.

Схемы лежат рядом с модулем (src/core/contracts/schema/) и ставятся
вместе с пакетом как package data:
- owned_matrix.json (снапшот OwnedMatrix)

Схема проверяет структуру и типы; согласованность size и количества
ячеек проверяет Pydantic модель MatrixSnapshot.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Каталог схем внутри пакета
SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов из каталога пакета.

    Каждая схема проходит meta-validation один раз и кэшируется.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# OWNED MATRIX VALIDATOR
# =============================================================================


class OwnedMatrixValidator:
    """
    Валидатор снапшота owned_matrix.

    Examples:
        >>> OwnedMatrixValidator().is_valid({"size": 1, "cells": [4]})
        True
        >>> OwnedMatrixValidator().is_valid({"size": -1, "cells": []})
        False
    """

    SCHEMA_NAME = "owned_matrix"

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or SchemaLoader()).load_schema(self.SCHEMA_NAME)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)


def validate_owned_matrix(data: Dict[str, Any]) -> None:
    """
    Валидация снапшота owned_matrix.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OwnedMatrixValidator().validate(data)
