"""Field validators."""

from celidone.domain.validation.documents import (
    validate_cnpj,
    validate_cpf,
    validate_document,
)
from celidone.domain.validation.formats import (
    validate_cep,
    validate_email,
    validate_name,
    validate_phone,
)

__all__ = [
    "validate_cep",
    "validate_cnpj",
    "validate_cpf",
    "validate_document",
    "validate_email",
    "validate_name",
    "validate_phone",
]
