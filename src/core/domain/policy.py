"""
Policy — Запись правила проводок

Правило вида "если <field> <operator> <value> то <action>", например:
    amount > 1000 → allow
    credit_balance <= 4000 → deny

Механизм вычисления правил находится вне ядра; здесь только формат записи.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class PolicyAction(str, Enum):
    """Действие правила"""

    ALLOW = "allow"
    DENY = "deny"


class PolicyOperator(str, Enum):
    """Оператор сравнения"""

    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    EQ = "=="
    NEQ = "!="


# =============================================================================
# POLICY MODEL
# =============================================================================


class Policy(BaseModel):
    """Правило проводок (только данные)."""

    id: int | None = Field(None, description="Идентификатор правила")
    name: str = Field("", description="Название правила")
    operator: PolicyOperator = Field(..., description="Оператор сравнения")
    field: str = Field(..., description="Поле баланса/транзакции (свободная строка)")
    value: str = Field(..., description="Значение для сравнения (строкой)")
    action: PolicyAction = Field(..., description="allow / deny")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
