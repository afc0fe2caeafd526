"""
Contract Validation Module

Модуль для валидации JSON контрактов внешних форм Transaction и Balance.
"""

from .validators import (
    BalanceContractValidator,
    ContractValidator,
    SchemaLoader,
    TransactionContractValidator,
    validate_balance_contract,
    validate_transaction_contract,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TransactionContractValidator",
    "BalanceContractValidator",
    # Functions
    "validate_transaction_contract",
    "validate_balance_contract",
]
