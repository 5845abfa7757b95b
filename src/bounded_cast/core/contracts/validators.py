"""
JSON Schema Contract Validators

Валидация дескрипторов доменов, пришедших извне (конфигурация, runtime-конвейеры),
согласно формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (schema/ рядом с модулем):
- dynamic_domain.json: границы и типы dynamic domain
- static_domain.json: параметры определения статического тега
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'dynamic_domain')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл содержит невалидную JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)"""
        return self.validator.iter_errors(data)


class DynamicDomainValidator(ContractValidator):
    """Валидатор для dynamic_domain контракта"""

    def __init__(self):
        super().__init__("dynamic_domain")


class StaticDomainValidator(ContractValidator):
    """Валидатор для static_domain контракта"""

    def __init__(self):
        super().__init__("static_domain")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_dynamic_domain(data: Dict[str, Any]) -> None:
    """
    Валидация дескриптора dynamic domain.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DynamicDomainValidator().validate(data)


def validate_static_domain(data: Dict[str, Any]) -> None:
    """
    Валидация определения статического тега.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    StaticDomainValidator().validate(data)
