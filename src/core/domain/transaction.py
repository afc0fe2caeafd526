"""
Transaction — Модель транзакции (проводки)

Immutable Pydantic модель одного денежного движения против ровно одного
Balance. Поля снапшотов (before/after) заполняются один раз при
успешной проводке и дальше не пересчитываются.

drcr хранится как сырая строка: проверка направления выполняется
валидатором проводки (src.posting.validator), а не при создании модели.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from .balance import Balance


# =============================================================================
# ENUMS
# =============================================================================


class Direction(str, Enum):
    """Направление проводки (DRCR)"""

    CREDIT = "Credit"  # увеличивает credit_balance
    DEBIT = "Debit"  # увеличивает debit_balance

    @classmethod
    def parse(cls, value: object) -> "Direction | None":
        """
        Точное (регистрозависимое) сопоставление строки с направлением.

        Returns:
            Direction, либо None если совпадения нет
        """
        for member in cls:
            if member.value == value:
                return member
        return None


class TransactionStatus(str, Enum):
    """Статус транзакции"""

    QUEUED = "QUEUED"
    APPLIED = "APPLIED"
    SCHEDULED = "SCHEDULED"
    REJECTED = "REJECTED"


# =============================================================================
# SNAPSHOT
# =============================================================================


class BalanceSnapshot(BaseModel):
    """Состояние баланса в конкретный момент (до или после проводки)."""

    credit_balance: int
    debit_balance: int
    balance: int

    model_config = {"frozen": True}

    @classmethod
    def of(cls, balance: Balance) -> "BalanceSnapshot":
        return cls(
            credit_balance=balance.credit_balance,
            debit_balance=balance.debit_balance,
            balance=balance.balance,
        )


# =============================================================================
# TRANSACTION MODEL
# =============================================================================


def _new_transaction_id() -> str:
    return f"txn_{uuid4()}"


class Transaction(BaseModel):
    """
    Модель транзакции.

    Immutable модель (frozen=True). Проводка возвращает новый экземпляр
    с нормализованной суммой и заполненными снапшотами.
    """

    # Идентификация
    internal_id: int | None = Field(None, exclude=True, description="Внутренний числовой ID")
    transaction_id: str = Field(
        default_factory=_new_transaction_id, alias="id", description="Внешний идентификатор"
    )
    tag: str = Field("", description="Произвольный тег")
    reference: str = Field("", description="Референс вызывающей стороны")

    # Сумма
    amount: int = Field(..., description="Сумма (после проводки нормализованная)")
    raw_amount: int | None = Field(None, description="Исходная сумма до применения множителя")
    currency: str = Field("", description="Код валюты")
    drcr: str = Field(..., description="Направление: 'Credit' или 'Debit'")
    status: str = Field(TransactionStatus.QUEUED.value, description="Статус транзакции")

    # Цель
    ledger_id: str = Field("", description="Идентификатор леджера")
    balance_id: str = Field("", description="Идентификатор целевого баланса")

    # Снапшоты
    credit_balance_before: int = 0
    debit_balance_before: int = 0
    credit_balance_after: int = 0
    debit_balance_after: int = 0
    balance_before: int = 0
    balance_after: int = 0

    # Время
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Время создания (UTC)"
    )
    scheduled_for: datetime | None = Field(None, description="Запланированное время проводки")

    # Preview: проводка без изменения баланса
    skip_balance_update: bool = Field(False, exclude=True)

    meta_data: dict[str, Any] | None = Field(None, description="Произвольные метаданные")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("drcr", "status", mode="before")
    @classmethod
    def unwrap_enum(cls, v: Any) -> Any:
        """Direction/TransactionStatus принимаются наравне со строками"""
        if isinstance(v, Enum):
            return v.value
        return v

    @property
    def direction(self) -> Direction | None:
        """Распознанное направление, либо None для невалидного drcr"""
        return Direction.parse(self.drcr)

    def is_posted(self) -> bool:
        """
        Проверка, что транзакция уже проведена.

        Returns:
            True если raw_amount записан нормализатором
        """
        return self.raw_amount is not None

    def before_snapshot(self) -> BalanceSnapshot:
        return BalanceSnapshot(
            credit_balance=self.credit_balance_before,
            debit_balance=self.debit_balance_before,
            balance=self.balance_before,
        )

    def after_snapshot(self) -> BalanceSnapshot:
        return BalanceSnapshot(
            credit_balance=self.credit_balance_after,
            debit_balance=self.debit_balance_after,
            balance=self.balance_after,
        )

    def with_snapshots(self, before: BalanceSnapshot, after: BalanceSnapshot) -> "Transaction":
        """
        Копия транзакции с записанными снапшотами.

        Args:
            before: состояние баланса непосредственно до проводки
            after: состояние баланса сразу после проводки

        Returns:
            Новый Transaction
        """
        return self.model_copy(
            update={
                "credit_balance_before": before.credit_balance,
                "debit_balance_before": before.debit_balance,
                "balance_before": before.balance,
                "credit_balance_after": after.credit_balance,
                "debit_balance_after": after.debit_balance,
                "balance_after": after.balance,
            }
        )

    def to_json(self) -> bytes:
        """
        Сериализация под внешними именами полей.

        Чистая функция: никаких проверок и бизнес-правил.
        internal_id и skip_balance_update не экспортируются;
        scheduled_for и meta_data опускаются, если не заданы.
        """
        exclude = {name for name in ("scheduled_for", "meta_data") if getattr(self, name) is None}
        return self.model_dump_json(by_alias=True, exclude=exclude).encode("utf-8")
