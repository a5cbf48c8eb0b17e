"""Rental domain entities."""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from celidone.core.date_helpers import parse_date
from celidone.domain.services.currency_formatter import parse_currency
from celidone.domain.validation.results import ErrorCode


class RentalStatus(str, Enum):
    """Rental status as stored by the backend."""

    ATIVO = "ATIVO"  # Initial status on creation
    DEVOLVIDO = "DEVOLVIDO"  # Returned (terminal)
    ATRASADO = "ATRASADO"  # Read-time projection of an overdue ATIVO rental
    CANCELADO = "CANCELADO"  # Cancelled (terminal)

    @property
    def is_terminal(self) -> bool:
        return self in (RentalStatus.DEVOLVIDO, RentalStatus.CANCELADO)


class RentalAction(str, Enum):
    """External actions that change a rental's status."""

    RETURN = "return"
    CANCEL = "cancel"


class TipoCobranca(str, Enum):
    """Billing period type."""

    DIARIA = "diaria"
    SEMANAL = "semanal"
    MENSAL = "mensal"
    EVENTO = "evento"


class FormaPagamento(str, Enum):
    """Payment method."""

    DINHEIRO = "dinheiro"
    CARTAO_CREDITO = "cartao_credito"
    CARTAO_DEBITO = "cartao_debito"
    PIX = "pix"
    TRANSFERENCIA = "transferencia"
    CHEQUE = "cheque"


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _to_amount(v: Any) -> Optional[Decimal]:
    v = _blank_to_none(v)
    if v is None:
        return None
    return parse_currency(v)


class RentalRequest(BaseModel):
    """Rental form submission.

    Fields checked for presence by the rule engine are Optional here so an
    incomplete form can still be represented and reported on.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    cliente_id: Optional[int] = Field(None, alias="clienteId", description="Customer ID")
    produto_id: Optional[int] = Field(None, alias="produtoId", description="Product ID")
    data_aluguel: Optional[date] = Field(None, alias="dataAluguel", description="Rental date")
    data_dev_prevista: Optional[date] = Field(
        None, alias="dataDevPrevista", description="Expected return date"
    )
    valor_aluguel: Optional[Decimal] = Field(None, alias="valorAluguel", description="Rental fee")
    valor_caucao: Optional[Decimal] = Field(None, alias="valorCaucao", description="Deposit")
    valor_desconto: Decimal = Field(default=Decimal("0"), alias="valorDesconto", description="Discount")
    periodo: Optional[int] = Field(None, description="Number of billing periods")
    tipo_cobranca: Optional[str] = Field(None, alias="tipoCobranca", description="Billing type")
    forma_pagamento: Optional[str] = Field(
        None, alias="formaPagamento", description="Payment method"
    )
    observacoes: Optional[str] = Field(None, description="Notes")

    @field_validator("cliente_id", "produto_id", "periodo", mode="before")
    @classmethod
    def parse_integer(cls, v: Any) -> Any:
        """Accept integer-looking strings ("7", " 12 ") from form fields."""
        v = _blank_to_none(v)
        if isinstance(v, str):
            return int(v.strip())
        return v

    @field_validator("data_aluguel", "data_dev_prevista", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Optional[date]:
        """Accept ISO or pt-BR dates."""
        return parse_date(v)

    @field_validator("valor_aluguel", "valor_caucao", mode="before")
    @classmethod
    def parse_amounts(cls, v: Any) -> Optional[Decimal]:
        """Parse formatted BRL strings ("R$ 1.234,50")."""
        return _to_amount(v)

    @field_validator("valor_desconto", mode="before")
    @classmethod
    def parse_discount(cls, v: Any) -> Decimal:
        """Missing discount means no discount."""
        return _to_amount(v) or Decimal("0")

    @field_validator("tipo_cobranca", "forma_pagamento", mode="before")
    @classmethod
    def normalize_enum_text(cls, v: Any) -> Optional[str]:
        """Store enum members by their canonical value."""
        if isinstance(v, Enum):
            return v.value
        v = _blank_to_none(v)
        return v.strip() if isinstance(v, str) else v

    @field_validator("observacoes", mode="before")
    @classmethod
    def strip_notes(cls, v: Any) -> Optional[str]:
        """Blank notes are stored as None."""
        v = _blank_to_none(v)
        return v.strip() if isinstance(v, str) else v


class Rental(BaseModel):
    """Rental as persisted by the backend."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(..., description="Rental ID")
    cliente_id: int = Field(..., alias="clienteId")
    produto_id: int = Field(..., alias="produtoId")
    data_aluguel: date = Field(..., alias="dataAluguel")
    data_dev_prevista: date = Field(..., alias="dataDevPrevista")
    data_dev_efetiva: Optional[date] = Field(None, alias="dataDevEfetiva")
    valor_aluguel: Decimal = Field(..., alias="valorAluguel")
    valor_caucao: Decimal = Field(..., alias="valorCaucao")
    valor_desconto: Decimal = Field(default=Decimal("0"), alias="valorDesconto")
    valor_total: Decimal = Field(..., alias="valorTotal")
    periodo: int
    tipo_cobranca: TipoCobranca = Field(..., alias="tipoCobranca")
    forma_pagamento: FormaPagamento = Field(..., alias="formaPagamento")
    status: RentalStatus = RentalStatus.ATIVO
    observacoes: Optional[str] = None

    @field_validator("data_aluguel", "data_dev_prevista", "data_dev_efetiva", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Optional[date]:
        return parse_date(v)

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, v: Any) -> Any:
        """The backend has sent both "ATIVO" and "ativo"."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class TransitionResult(BaseModel):
    """Outcome of a rental status transition."""

    ok: bool
    status: RentalStatus
    error: Optional[str] = None
    code: Optional[ErrorCode] = None
    rental: Optional[Rental] = None
