"""
Transaction / Balance contracts

Слой привязки входных данных: внешние JSON представления Transaction и
Balance проверяются по JSON Schema (Draft 2020-12) до создания моделей.
Всё, что проходит контракт, должно загружаться в модель без ошибок.

Схемы лежат в schema/ рядом с модулем:
- transaction.json: reference, amount > 0, currency, drcr, balance_id
- balance.json: id, currency, ledger_id
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


SCHEMA_DIR: Path = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузка и meta-validation схем с кэшированием по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения ('transaction', 'balance').

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

            self._schemas[schema_name] = schema
        return self._schemas[schema_name]


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка payload против одной схемы."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(_SCHEMA_LOADER.load_schema(schema_name))

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если payload нарушает контракт
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)


class TransactionContractValidator(ContractValidator):
    """Контракт входящей транзакции."""

    def __init__(self):
        super().__init__("transaction")


class BalanceContractValidator(ContractValidator):
    """Контракт баланса."""

    def __init__(self):
        super().__init__("balance")


_TRANSACTION_CONTRACT = TransactionContractValidator()
_BALANCE_CONTRACT = BalanceContractValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_transaction_contract(data: Dict[str, Any]) -> None:
    """
    Проверка внешнего представления транзакции.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _TRANSACTION_CONTRACT.validate(data)


def validate_balance_contract(data: Dict[str, Any]) -> None:
    """
    Проверка внешнего представления баланса.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _BALANCE_CONTRACT.validate(data)
