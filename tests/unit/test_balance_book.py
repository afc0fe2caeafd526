"""Тесты для BalanceBook: блокировка на уровне баланса

Покрытие:
- Открытие/чтение балансов
- Проводка через книгу (успех и отказ)
- Конкурентные проводки по одному балансу сериализуются
- Проводки по разным балансам независимы
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.core.domain import Balance, Transaction
from src.posting import BalanceBook, InvalidAmount, UnknownBalanceError


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def book() -> BalanceBook:
    """Книга с двумя открытыми балансами."""
    book = BalanceBook()
    book.open(Balance(balance_id="bln_a", currency="USD", ledger_id="ldg_1"))
    book.open(Balance(balance_id="bln_b", currency="EUR", ledger_id="ldg_1", currency_multiplier=100))
    return book


def credit(balance_id: str, amount: int = 1) -> Transaction:
    return Transaction(reference="ref", amount=amount, currency="USD", drcr="Credit", balance_id=balance_id)


# =============================================================================
# BASICS
# =============================================================================


class TestBalanceBook:
    """Базовые операции книги"""

    def test_open_and_get(self, book: BalanceBook) -> None:
        assert len(book) == 2
        assert "bln_a" in book
        assert book.get("bln_a").currency == "USD"

    def test_open_duplicate(self, book: BalanceBook) -> None:
        with pytest.raises(ValueError):
            book.open(Balance(balance_id="bln_a", currency="USD", ledger_id="ldg_1"))

    def test_get_unknown(self, book: BalanceBook) -> None:
        with pytest.raises(UnknownBalanceError) as exc_info:
            book.get("bln_missing")
        assert exc_info.value.balance_id == "bln_missing"
        assert isinstance(exc_info.value, KeyError)

    def test_post_unknown(self, book: BalanceBook) -> None:
        with pytest.raises(UnknownBalanceError):
            book.post(credit("bln_missing"))

    def test_post_stores_new_balance(self, book: BalanceBook) -> None:
        result = book.post(credit("bln_b", 5))
        assert result.posted
        assert book.get("bln_b").credit_balance == 500
        assert book.get("bln_b").balance == 500
        assert result.transaction.amount == 500

    def test_rejected_post_keeps_balance(self, book: BalanceBook) -> None:
        before = book.get("bln_a")
        result = book.post(credit("bln_a", 0))
        assert isinstance(result.error, InvalidAmount)
        assert book.get("bln_a") is before

    def test_preview_keeps_balance(self, book: BalanceBook) -> None:
        tx = credit("bln_a", 7).model_copy(update={"skip_balance_update": True})
        result = book.post(tx)
        assert result.transaction.balance_after == 7
        assert book.get("bln_a").balance == 0


# =============================================================================
# CONCURRENCY
# =============================================================================


class TestConcurrentPosting:
    """Конкурентные проводки"""

    def test_same_balance_serialized(self, book: BalanceBook) -> None:
        """Каждая проводка видит непересекающийся снапшот"""
        n = 200
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(book.post, [credit("bln_a") for _ in range(n)]))

        assert all(r.posted for r in results)
        assert book.get("bln_a").credit_balance == n
        assert book.get("bln_a").balance == n

        befores = sorted(r.transaction.balance_before for r in results)
        assert befores == list(range(n))
        for r in results:
            assert r.transaction.balance_after == r.transaction.balance_before + 1

    def test_different_balances_independent(self, book: BalanceBook) -> None:
        txs = [credit("bln_a", 2) for _ in range(50)] + [credit("bln_b", 1) for _ in range(50)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(book.post, txs))

        assert book.get("bln_a").balance == 100
        assert book.get("bln_b").balance == 5000
