"""
Ledger / Identity — Справочные записи учёта

Immutable Pydantic модели для леджеров и владельцев балансов.
Записи не имеют поведения: они только описывают данные и используются
как read-only обогащение Balance для отображения.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS
# =============================================================================


class IdentityType(str, Enum):
    """Тип владельца баланса"""

    INDIVIDUAL = "individual"
    ORGANIZATION = "organization"


# =============================================================================
# LEDGER
# =============================================================================


class Ledger(BaseModel):
    """
    Леджер: группа балансов.

    Жизненный цикл леджера управляется вне ядра проводок.
    """

    internal_id: int | None = Field(None, exclude=True, description="Внутренний числовой ID")
    ledger_id: str = Field(..., alias="id", min_length=1, description="Внешний идентификатор леджера")
    name: str = Field(..., min_length=1, description="Название леджера")
    created_at: datetime = Field(default_factory=_utc_now, description="Время создания (UTC)")
    meta_data: dict[str, Any] | None = Field(None, description="Произвольные метаданные")

    model_config = {"frozen": True, "populate_by_name": True}


# =============================================================================
# IDENTITY
# =============================================================================


class Individual(BaseModel):
    """Физическое лицо"""

    first_name: str = ""
    last_name: str = ""
    other_names: str = ""
    gender: str = ""
    dob: datetime | None = None
    email_address: str = ""
    phone_number: str = ""
    nationality: str = ""

    model_config = {"frozen": True}


class Organization(BaseModel):
    """Организация"""

    name: str = ""
    category: str = ""

    model_config = {"frozen": True}


class Identity(BaseModel):
    """
    Владелец баланса (физическое лицо или организация).

    Balance хранит только identity_id; полная запись прикрепляется
    отдельно и только для отображения.
    """

    identity_id: str = Field(..., min_length=1, description="Идентификатор владельца")
    identity_type: IdentityType = Field(..., description="individual / organization")
    individual: Individual = Field(default_factory=Individual)
    organization: Organization = Field(default_factory=Organization)

    # Адрес
    street: str = ""
    country: str = ""
    state: str = ""
    post_code: str = ""
    city: str = ""

    created_at: datetime = Field(default_factory=_utc_now, description="Время создания (UTC)")
    meta_data: dict[str, Any] | None = Field(None, description="Произвольные метаданные")

    model_config = {"frozen": True}

    def display_name(self) -> str:
        """
        Имя для отображения.

        Returns:
            ФИО для individual, название для organization
        """
        if self.identity_type == IdentityType.ORGANIZATION:
            return self.organization.name
        parts = [self.individual.first_name, self.individual.last_name]
        return " ".join(p for p in parts if p)


class Account(BaseModel):
    """Банковский счёт, привязанный к владельцу"""

    account_id: str = Field(..., min_length=1)
    name: str = ""
    number: str = ""
    bank_name: str = ""
    meta_data: dict[str, Any] | None = None

    model_config = {"frozen": True}
