"""
Filters — Дескрипторы запросов к хранилищу

Описания диапазонов и временных окон для внешнего слоя хранения.
Ядро проводок фильтрацию не выполняет.
"""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class _WindowFilter(BaseModel):
    """Базовый фильтр с временным окном [from, to]."""

    id: int | None = Field(None, description="Внутренний ID записи")
    from_: datetime | None = Field(None, alias="from", description="Начало окна")
    to: datetime | None = Field(None, description="Конец окна")

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def validate_window(self):
        """Окно не может быть перевёрнутым"""
        if self.from_ is not None and self.to is not None and self.from_ > self.to:
            raise ValueError(f"filter window inverted: from {self.from_} > to {self.to}")
        return self


class TransactionFilter(_WindowFilter):
    """Фильтр транзакций"""

    tag: str | None = None
    drcr: str | None = None
    amount_range: int | None = None
    credit_balance_before_range: int | None = None
    debit_balance_before_range: int | None = None
    credit_balance_after_range: int | None = None
    debit_balance_after_range: int | None = None
    balance_before_range: int | None = Field(None, alias="balance_before")
    balance_after_range: int | None = Field(None, alias="balance_after")


class BalanceFilter(_WindowFilter):
    """Фильтр балансов"""

    balance_range: str | None = None
    credit_balance_range: str | None = None
    debit_balance_range: str | None = None
    currency: str | None = None
    ledger_id: str | None = None


class LedgerFilter(_WindowFilter):
    """Фильтр леджеров"""
