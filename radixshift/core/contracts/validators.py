"""
Contracts — JSON Schema контракты пакетной конверсии

Два контракта на границе BatchConverter.convert_payload:
- conversion_request (вход: основания, метод, строки)
- conversion_batch (выход: результаты, ошибки строк, предупреждения)

Схемы лежат в schema/ (package data). Каждая схема проходит meta-validation
один раз; Draft202012Validator строится один раз на схему и переиспользуется.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

CONVERSION_REQUEST = "conversion_request"
CONVERSION_BATCH = "conversion_batch"

DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


class SchemaLoader:
    """
    Загрузчик схем и кэш валидаторов.

    Raises:
        RuntimeError: Если каталог схем не существует
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")

        self._validators: Dict[str, Draft202012Validator] = {}

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """
        Валидатор схемы (строится при первом обращении).

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если схема не проходит meta-validation
        """
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self._read_schema(schema_name))
            self._validators[schema_name] = validator
        return validator

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        return self.validator_for(schema_name).schema

    def validate(self, schema_name: str, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение контракта
        """
        self.validator_for(schema_name).validate(data)

    def _read_schema(self, schema_name: str) -> Dict[str, Any]:
        schema_path = self.schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        return schema


# Загрузчик пакетных схем (общий для всех BatchConverter по умолчанию)
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def default_schema_loader() -> SchemaLoader:
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER
