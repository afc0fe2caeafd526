"""Ошибки проводки.

Оба вида ошибок терминальны для текущей попытки и обнаруживаются
до любого изменения баланса/транзакции. Ядро их не ретраит.
"""


class PostingError(ValueError):
    """Базовая ошибка проводки."""

    code: str = "posting_error"


class InvalidAmount(PostingError):
    """Сумма транзакции не строго положительна."""

    code = "invalid_amount"

    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(f"transaction amount must be positive: {amount}")


class InvalidDirection(PostingError):
    """drcr не равен в точности 'Credit' или 'Debit'."""

    code = "invalid_direction"

    def __init__(self, drcr: object):
        self.drcr = drcr
        super().__init__(f"transaction drcr must be 'Credit' or 'Debit': {drcr!r}")
