"""Whole-record validation for customer and product forms."""

import re
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

from celidone.core.logging import get_logger
from celidone.domain.entities.documents import TipoPessoa
from celidone.domain.services.currency_formatter import parse_currency
from celidone.domain.validation import messages
from celidone.domain.validation.documents import validate_cnpj, validate_cpf
from celidone.domain.validation.formats import (
    validate_cep,
    validate_email,
    validate_name,
    validate_phone,
)
from celidone.domain.validation.results import (
    ErrorCode,
    FieldValidation,
    ValidationIssue,
    ValidationResult,
)

logger = get_logger(__name__)


class ProdutoStatus(str, Enum):
    """Product stock status."""

    DISPONIVEL = "disponivel"
    INDISPONIVEL = "indisponivel"
    MANUTENCAO = "manutencao"
    ALUGADO = "alugado"


class ProdutoSexo(str, Enum):
    """Product target gender."""

    MASCULINO = "masculino"
    FEMININO = "feminino"
    UNISSEX = "unissex"


class TipoTraje(str, Enum):
    """Costume type."""

    TERNO = "terno"
    SMOKING = "smoking"
    FRAQUE = "fraque"
    TRAJE_GALA = "traje_de_gala"
    COSTUME = "costume"
    TRAJE_PRETO = "traje_preto"


PRODUTO_CODIGO_REGEX = re.compile(r"^PRD-[0-9]{4}$")
TAMANHO_REGEX = re.compile(
    r"^(PP|P|M|G|GG|XG|XXG|36|38|40|42|44|46|48|50|52|54|56|58|60)$", re.IGNORECASE
)


def _issue(field: str, check: FieldValidation) -> ValidationIssue:
    return ValidationIssue(
        field=field,
        code=check.code or ErrorCode.MALFORMED,
        message=check.message or "",
    )


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def validate_cliente(data: Optional[Mapping[str, Any]]) -> ValidationResult:
    """
    Validate a customer form.

    Name and e-mail are always required. The document checked depends on
    natureza: CPF for PESSOA_FISICA, CNPJ for PESSOA_JURIDICA. CEP and
    mobile phone are only validated when filled in.

    Args:
        data: Customer fields (nome, email, natureza, cpf, cnpj, cep, celular)

    Returns:
        ValidationResult with every problem found
    """
    if data is None:
        return ValidationResult.from_issues(
            [ValidationIssue(code=ErrorCode.REQUIRED, message=messages.CLIENTE_REQUIRED)]
        )

    issues: list[ValidationIssue] = []

    check = validate_name(data.get("nome"))
    if not check.is_valid:
        issues.append(_issue("nome", check))

    check = validate_email(data.get("email"))
    if not check.is_valid:
        issues.append(_issue("email", check))

    natureza = data.get("natureza")
    natureza = getattr(natureza, "value", natureza)
    if natureza == TipoPessoa.PESSOA_FISICA.value:
        check = validate_cpf(data.get("cpf")).as_field_validation()
        if not check.is_valid:
            issues.append(_issue("cpf", check))
    elif natureza == TipoPessoa.PESSOA_JURIDICA.value:
        check = validate_cnpj(data.get("cnpj")).as_field_validation()
        if not check.is_valid:
            issues.append(_issue("cnpj", check))

    if data.get("cep"):
        check = validate_cep(data.get("cep"))
        if not check.is_valid:
            issues.append(_issue("cep", check))

    if data.get("celular"):
        check = validate_phone(data.get("celular"), "celular")
        if not check.is_valid:
            issues.append(_issue("celular", check))

    result = ValidationResult.from_issues(issues)
    logger.debug("Customer validated", is_valid=result.is_valid, errors=len(issues))
    return result


def validate_produto(data: Optional[Mapping[str, Any]]) -> ValidationResult:
    """
    Validate a product form.

    Checks the PRD-0000 code, the required descriptive fields, a positive
    price and the closed sets for tamanho, status and sexo.
    """
    if data is None:
        return ValidationResult.from_issues(
            [ValidationIssue(code=ErrorCode.REQUIRED, message=messages.PRODUTO_REQUIRED)]
        )

    issues: list[ValidationIssue] = []

    codigo = data.get("codigo")
    if _is_blank(codigo):
        issues.append(
            ValidationIssue(
                field="codigo", code=ErrorCode.REQUIRED, message=messages.PRODUTO_CODIGO_REQUIRED
            )
        )
    elif not PRODUTO_CODIGO_REGEX.fullmatch(str(codigo)):
        issues.append(
            ValidationIssue(
                field="codigo", code=ErrorCode.MALFORMED, message=messages.PRODUTO_CODIGO_INVALID
            )
        )

    for field, message in messages.PRODUTO_FIELD_REQUIRED.items():
        if _is_blank(data.get(field)):
            issues.append(ValidationIssue(field=field, code=ErrorCode.REQUIRED, message=message))

    try:
        preco = parse_currency(data.get("preco"))
    except ValueError:
        preco = Decimal("0")
    if preco <= Decimal("0"):
        issues.append(
            ValidationIssue(
                field="preco", code=ErrorCode.BUSINESS_RULE, message=messages.PRODUTO_PRECO_POSITIVE
            )
        )

    tamanho = data.get("tamanho")
    if not _is_blank(tamanho) and not TAMANHO_REGEX.fullmatch(str(tamanho).strip()):
        issues.append(
            ValidationIssue(
                field="tamanho", code=ErrorCode.MALFORMED, message=messages.PRODUTO_TAMANHO_INVALID
            )
        )

    status = data.get("status")
    if not _is_blank(status) and status not in {s.value for s in ProdutoStatus}:
        issues.append(
            ValidationIssue(
                field="status", code=ErrorCode.MALFORMED, message=messages.PRODUTO_STATUS_INVALID
            )
        )

    sexo = data.get("sexo")
    if not _is_blank(sexo) and sexo not in {s.value for s in ProdutoSexo}:
        issues.append(
            ValidationIssue(
                field="sexo", code=ErrorCode.MALFORMED, message=messages.PRODUTO_SEXO_INVALID
            )
        )

    result = ValidationResult.from_issues(issues)
    logger.debug("Product validated", is_valid=result.is_valid, errors=len(issues))
    return result


def is_product_available(status: Any) -> bool:
    """Whether a product in this status can be rented."""
    status = getattr(status, "value", status)
    return status == ProdutoStatus.DISPONIVEL.value
