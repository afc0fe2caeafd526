"""Валидатор транзакции.

Проверяет структурные предусловия до того, как транзакция затронет баланс:
- amount > 0
- drcr ∈ {'Credit', 'Debit'} (точное совпадение, с учётом регистра)

Остальные поля (currency, balance_id, reference) проверяются раньше,
на уровне контрактов (src.core.contracts).
"""

from src.core.domain.transaction import Direction, Transaction
from src.posting.errors import InvalidAmount, InvalidDirection, PostingError


def validate_transaction(transaction: Transaction) -> PostingError | None:
    """
    Проверка транзакции перед проводкой. Ничего не изменяет.

    Args:
        transaction: транзакция для проверки

    Returns:
        None если транзакция валидна, иначе экземпляр ошибки
    """
    if transaction.amount <= 0:
        return InvalidAmount(transaction.amount)

    if Direction.parse(transaction.drcr) is None:
        return InvalidDirection(transaction.drcr)

    return None
