"""BalanceBook — потокобезопасное хранение текущих балансов.

Тонкая обёртка над чистой проводкой: для каждого баланса свой Lock,
удерживаемый на всей последовательности чтение → проводка → запись.
Проводки по одному балансу сериализуются, по разным идут параллельно.
"""

import logging
import threading

from src.core.domain.balance import Balance
from src.core.domain.transaction import Transaction
from src.posting.poster import BalancePoster, PostingResult

logger = logging.getLogger(__name__)


class UnknownBalanceError(KeyError):
    """Баланс с таким идентификатором не открыт в книге."""

    def __init__(self, balance_id: str):
        self.balance_id = balance_id
        super().__init__(balance_id)

    def __str__(self) -> str:
        return f"unknown balance: {self.balance_id!r}"


class BalanceBook:
    """In-memory книга балансов с блокировкой на уровне баланса."""

    def __init__(self, poster: BalancePoster | None = None):
        """
        Args:
            poster: проводка (опционально, используется default)
        """
        self.poster = poster or BalancePoster()

        self._balances: dict[str, Balance] = {}
        self._locks: dict[str, threading.Lock] = {}
        # Защищает сами словари при открытии балансов
        self._registry_lock = threading.Lock()

    def open(self, balance: Balance) -> None:
        """
        Регистрация баланса в книге.

        Raises:
            ValueError: Если баланс с таким ID уже открыт
        """
        with self._registry_lock:
            if balance.balance_id in self._balances:
                raise ValueError(f"balance already open: {balance.balance_id!r}")
            self._balances[balance.balance_id] = balance
            self._locks[balance.balance_id] = threading.Lock()
        logger.info("balance opened: %s (%s)", balance.balance_id, balance.currency)

    def get(self, balance_id: str) -> Balance:
        """
        Текущее значение баланса.

        Raises:
            UnknownBalanceError: Если баланс не открыт
        """
        try:
            return self._balances[balance_id]
        except KeyError:
            raise UnknownBalanceError(balance_id) from None

    def post(self, transaction: Transaction) -> PostingResult:
        """
        Проводка транзакции на баланс transaction.balance_id.

        Новое значение баланса сохраняется только при успешной проводке.

        Raises:
            UnknownBalanceError: Если целевой баланс не открыт
        """
        lock = self._lock_for(transaction.balance_id)
        with lock:
            result = self.poster.post(self._balances[transaction.balance_id], transaction)
            if result.posted:
                self._balances[transaction.balance_id] = result.balance
        return result

    def _lock_for(self, balance_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(balance_id)
        if lock is None:
            raise UnknownBalanceError(balance_id)
        return lock

    def __contains__(self, balance_id: object) -> bool:
        return balance_id in self._balances

    def __len__(self) -> int:
        return len(self._balances)
