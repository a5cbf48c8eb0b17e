"""Domain entities and DTOs."""

from celidone.domain.entities.documents import DocumentKind, DocumentNumber, TipoPessoa
from celidone.domain.entities.rental import (
    FormaPagamento,
    Rental,
    RentalAction,
    RentalRequest,
    RentalStatus,
    TipoCobranca,
    TransitionResult,
)
from celidone.domain.validation.results import (
    DocumentCheck,
    ErrorCode,
    FieldValidation,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "DocumentCheck",
    "DocumentKind",
    "DocumentNumber",
    "ErrorCode",
    "FieldValidation",
    "FormaPagamento",
    "Rental",
    "RentalAction",
    "RentalRequest",
    "RentalStatus",
    "TipoCobranca",
    "TipoPessoa",
    "TransitionResult",
    "ValidationIssue",
    "ValidationResult",
]
