"""Проводка транзакции на баланс.

Единственная публичная точка входа для проводки. Последовательность:
1. Валидация (при ошибке возврат без изменений)
2. Нормализация суммы множителем валюты
3. Снапшот "before"
4. Начисление суммы в credit_balance (Credit) или debit_balance (Debit)
5. Пересчёт balance = credit_balance - debit_balance
6. Снапшот "after"

Функция чистая: входные Balance/Transaction не изменяются, результат
содержит новые экземпляры. Сериализация проводок по одному балансу:
задача обёртки (src.posting.locking).
"""

import logging
from dataclasses import dataclass

from src.core.domain.balance import Balance
from src.core.domain.transaction import (
    BalanceSnapshot,
    Direction,
    Transaction,
    TransactionStatus,
)
from src.posting.errors import PostingError
from src.posting.normalizer import normalize_amount
from src.posting.validator import validate_transaction

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class PostingResult:
    """Результат проводки."""

    posted: bool
    balance: Balance
    transaction: Transaction
    error: PostingError | None

    # Детали
    details: str

    def raise_for_error(self) -> None:
        """Поднять ошибку проводки, если она есть"""
        if self.error is not None:
            raise self.error


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PosterConfig:
    """Конфигурация проводки."""

    # Записывать множитель 1 в баланс с currency_multiplier == 0
    persist_multiplier_default: bool = True


# =============================================================================
# POSTING
# =============================================================================


def post_transaction(
    balance: Balance,
    transaction: Transaction,
    config: PosterConfig | None = None,
) -> PostingResult:
    """
    Проводка одной транзакции на один баланс.

    Args:
        balance: целевой баланс
        transaction: транзакция (amount/drcr/balance_id заданы вызывающей стороной)
        config: конфигурация (опционально, используется default)

    Returns:
        PostingResult с новыми Balance/Transaction, либо с ошибкой
        и исходными объектами без изменений
    """
    config = config or PosterConfig()

    # 1. Валидация
    error = validate_transaction(transaction)
    if error is not None:
        logger.warning(
            "posting rejected: balance=%s transaction=%s code=%s",
            balance.balance_id,
            transaction.transaction_id,
            error.code,
        )
        return PostingResult(
            posted=False,
            balance=balance,
            transaction=transaction,
            error=error,
            details=f"{error.code}: {error}",
        )

    # 2. Нормализация
    normalized_balance, normalized = normalize_amount(
        balance, transaction, persist_default=config.persist_multiplier_default
    )

    # 3-6. Before → начисление → пересчёт → after
    before = BalanceSnapshot.of(normalized_balance)
    posted_balance = _recompute(_accumulate(normalized_balance, normalized))
    after = BalanceSnapshot.of(posted_balance)

    posted = normalized.with_snapshots(before, after)

    if transaction.skip_balance_update:
        logger.debug(
            "preview posting: balance=%s transaction=%s amount=%d",
            balance.balance_id,
            transaction.transaction_id,
            posted.amount,
        )
        return PostingResult(
            posted=True,
            balance=balance,
            transaction=posted,
            error=None,
            details=f"preview: balance {before.balance} -> {after.balance} (not applied)",
        )

    posted = posted.model_copy(update={"status": TransactionStatus.APPLIED.value})
    logger.debug(
        "posted: balance=%s transaction=%s %s %d, balance %d -> %d",
        balance.balance_id,
        transaction.transaction_id,
        posted.drcr,
        posted.amount,
        before.balance,
        after.balance,
    )
    return PostingResult(
        posted=True,
        balance=posted_balance,
        transaction=posted,
        error=None,
        details=f"{posted.drcr} {posted.amount}: balance {before.balance} -> {after.balance}",
    )


def _accumulate(balance: Balance, transaction: Transaction) -> Balance:
    """Начисление суммы в credit или debit (направление уже проверено)"""
    if transaction.direction is Direction.CREDIT:
        return balance.model_copy(
            update={"credit_balance": balance.credit_balance + transaction.amount}
        )
    return balance.model_copy(
        update={"debit_balance": balance.debit_balance + transaction.amount}
    )


def _recompute(balance: Balance) -> Balance:
    """Пересчёт чистого баланса"""
    return balance.model_copy(
        update={"balance": balance.credit_balance - balance.debit_balance}
    )


# =============================================================================
# POSTER
# =============================================================================


class BalancePoster:
    """Проводка с фиксированной конфигурацией."""

    def __init__(self, config: PosterConfig | None = None):
        """
        Args:
            config: конфигурация проводки (опционально, используется default)
        """
        self.config = config or PosterConfig()

    def post(self, balance: Balance, transaction: Transaction) -> PostingResult:
        """Проводка транзакции на баланс (см. post_transaction)."""
        return post_transaction(balance, transaction, self.config)
