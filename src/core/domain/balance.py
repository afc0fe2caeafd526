"""
Balance — Модель баланса

Immutable Pydantic модель, представляющая текущую позицию одного
счёта в одной валюте.

Инвариант: balance == credit_balance - debit_balance для любого
наблюдаемого значения Balance. Изменения выполняются только через
проводку (src.posting), которая возвращает новый экземпляр.
"""

from datetime import datetime, timezone
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from .ledger import Identity, Ledger


# =============================================================================
# CONSTANTS
# =============================================================================

# Множитель по умолчанию (currency_multiplier == 0 трактуется как 1)
DEFAULT_CURRENCY_MULTIPLIER: Final[int] = 1


def _integral(value: Any) -> Any:
    """500.0 → 500: JSON допускает целые числа в виде float"""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# =============================================================================
# BALANCE MODEL
# =============================================================================


class Balance(BaseModel):
    """
    Модель баланса.

    Immutable модель (frozen=True). Ledger и Identity хранятся как
    идентификаторы; полные записи (ledger / identity) служат опциональным
    обогащением только для отображения.
    """

    # Идентификация
    internal_id: int | None = Field(None, exclude=True, description="Внутренний числовой ID")
    balance_id: str = Field(..., alias="id", min_length=1, description="Внешний идентификатор баланса")

    # Суммы (в минимальных единицах валюты)
    balance: int = Field(0, description="Чистый баланс (credit - debit)")
    credit_balance: int = Field(0, ge=0, description="Накопленный кредит")
    debit_balance: int = Field(0, ge=0, description="Накопленный дебет")

    # Валюта
    currency: str = Field(..., min_length=1, description="Код валюты (например, 'USD')")
    currency_multiplier: int = Field(
        DEFAULT_CURRENCY_MULTIPLIER, ge=0, description="Целочисленный множитель (0 = не задан)"
    )

    # Владельцы
    ledger_id: str = Field(..., min_length=1, description="Идентификатор леджера")
    identity_id: str = Field("", description="Идентификатор владельца")
    identity: Identity | None = Field(None, description="Обогащение: владелец (read-only)")
    ledger: Ledger | None = Field(None, description="Обогащение: леджер (read-only)")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Время создания (UTC)"
    )
    meta_data: dict[str, Any] | None = Field(None, description="Произвольные метаданные")

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def derive_net_balance(cls, data: Any) -> Any:
        """Если balance не передан, вычисляем его из credit/debit"""
        if isinstance(data, dict) and data.get("balance") is None:
            credit = _integral(data.get("credit_balance", 0))
            debit = _integral(data.get("debit_balance", 0))
            if isinstance(credit, int) and isinstance(debit, int):
                data = {**data, "balance": credit - debit}
        return data

    @model_validator(mode="after")
    def validate_net_balance(self) -> "Balance":
        """Проверка инварианта balance == credit - debit"""
        expected = self.credit_balance - self.debit_balance
        if self.balance != expected:
            raise ValueError(
                f"balance {self.balance} != credit_balance {self.credit_balance} "
                f"- debit_balance {self.debit_balance}"
            )
        return self

    def effective_multiplier(self) -> int:
        """
        Множитель, применяемый к сумме транзакции.

        Returns:
            currency_multiplier, либо 1 если множитель не задан (0)
        """
        return self.currency_multiplier or DEFAULT_CURRENCY_MULTIPLIER

    def with_enrichment(
        self,
        ledger: Ledger | None = None,
        identity: Identity | None = None,
    ) -> "Balance":
        """
        Копия баланса с прикреплёнными записями Ledger/Identity.

        Args:
            ledger: запись леджера (должна совпадать с ledger_id)
            identity: запись владельца (должна совпадать с identity_id)

        Returns:
            Новый Balance с обогащением

        Raises:
            ValueError: Если идентификаторы не совпадают
        """
        update: dict[str, Any] = {}
        if ledger is not None:
            if ledger.ledger_id != self.ledger_id:
                raise ValueError(
                    f"ledger {ledger.ledger_id!r} does not own balance "
                    f"(ledger_id={self.ledger_id!r})"
                )
            update["ledger"] = ledger
        if identity is not None:
            if identity.identity_id != self.identity_id:
                raise ValueError(
                    f"identity {identity.identity_id!r} does not own balance "
                    f"(identity_id={self.identity_id!r})"
                )
            update["identity"] = identity
        return self.model_copy(update=update)

    def to_json(self) -> bytes:
        """
        Сериализация под внешними именами полей.

        identity/ledger опускаются, если не прикреплены.
        """
        exclude = {name for name in ("identity", "ledger") if getattr(self, name) is None}
        return self.model_dump_json(by_alias=True, exclude=exclude).encode("utf-8")
