"""Taxpayer document entities (CPF/CNPJ)."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from celidone.domain.services.mask_service import CNPJ_MASK, CPF_MASK, apply_mask
from celidone.domain.validation.documents import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    only_digits,
    validate_cnpj,
    validate_cpf,
)


class TipoPessoa(str, Enum):
    """Customer nature."""

    PESSOA_FISICA = "PESSOA_FISICA"
    PESSOA_JURIDICA = "PESSOA_JURIDICA"


class DocumentKind(str, Enum):
    """Document type."""

    CPF = "CPF"
    CNPJ = "CNPJ"


class DocumentNumber(BaseModel):
    """A validated CPF or CNPJ.

    Always built through parse(), which re-validates the whole number.
    """

    model_config = ConfigDict(frozen=True)

    digits: str = Field(..., description="Unformatted digits")
    kind: DocumentKind = Field(..., description="CPF or CNPJ")

    @classmethod
    def parse(cls, value: str) -> "DocumentNumber":
        """Parse a masked or unmasked CPF/CNPJ.

        Raises:
            ValueError: If the value is not a structurally valid document
        """
        digits = only_digits(value)

        if len(digits) == CPF_LENGTH:
            check = validate_cpf(digits)
            kind = DocumentKind.CPF
        elif len(digits) == CNPJ_LENGTH:
            check = validate_cnpj(digits)
            kind = DocumentKind.CNPJ
        else:
            raise ValueError("CPF deve ter 11 dígitos ou CNPJ deve ter 14 dígitos")

        if not check.valid:
            raise ValueError(check.message)

        return cls(digits=digits, kind=kind)

    @property
    def formatted(self) -> str:
        """Masked representation (000.000.000-00 or 00.000.000/0000-00)."""
        template = CPF_MASK if self.kind == DocumentKind.CPF else CNPJ_MASK
        return apply_mask(self.digits, template) or ""

    @property
    def tipo_pessoa(self) -> TipoPessoa:
        if self.kind == DocumentKind.CPF:
            return TipoPessoa.PESSOA_FISICA
        return TipoPessoa.PESSOA_JURIDICA

    def __str__(self) -> str:
        return self.formatted
