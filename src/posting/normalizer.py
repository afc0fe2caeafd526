"""Нормализатор суммы.

amount_normalized = amount * multiplier, где multiplier: множитель
валюты баланса (0 трактуется как 1).
"""

from src.core.domain.balance import Balance
from src.core.domain.transaction import Transaction


def normalize_amount(
    balance: Balance,
    transaction: Transaction,
    persist_default: bool = True,
) -> tuple[Balance, Transaction]:
    """
    Применение множителя валюты к сумме транзакции.

    Исходная сумма сохраняется в raw_amount (только при первой проводке),
    amount получает нормализованное значение.

    Args:
        balance: целевой баланс
        transaction: транзакция, прошедшая валидацию
        persist_default: записать множитель 1 в баланс, если он был 0

    Returns:
        новые экземпляры (balance, transaction)
    """
    multiplier = balance.effective_multiplier()
    # Повторная проводка сохраняет исходную сумму вызывающей стороны
    raw_amount = transaction.raw_amount if transaction.raw_amount is not None else transaction.amount

    if persist_default and balance.currency_multiplier != multiplier:
        balance = balance.model_copy(update={"currency_multiplier": multiplier})

    transaction = transaction.model_copy(
        update={
            "raw_amount": raw_amount,
            "amount": transaction.amount * multiplier,
        }
    )
    return balance, transaction
