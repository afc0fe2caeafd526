"""
Domain models and value objects.

Contains ledger entities like Balance, Transaction, Ledger, Identity.
"""

from src.core.domain.balance import DEFAULT_CURRENCY_MULTIPLIER, Balance
from src.core.domain.filters import BalanceFilter, LedgerFilter, TransactionFilter
from src.core.domain.ledger import Account, Identity, IdentityType, Individual, Ledger, Organization
from src.core.domain.policy import Policy, PolicyAction, PolicyOperator
from src.core.domain.transaction import (
    BalanceSnapshot,
    Direction,
    Transaction,
    TransactionStatus,
)

__all__ = [
    # Balance model
    "Balance",
    "DEFAULT_CURRENCY_MULTIPLIER",
    # Transaction model
    "Transaction",
    "TransactionStatus",
    "Direction",
    "BalanceSnapshot",
    # Records
    "Ledger",
    "Identity",
    "IdentityType",
    "Individual",
    "Organization",
    "Account",
    "Policy",
    "PolicyAction",
    "PolicyOperator",
    # Filters
    "TransactionFilter",
    "BalanceFilter",
    "LedgerFilter",
]
