"""Rental request validation and derived values."""

from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from celidone.core.config import Settings, get_settings
from celidone.core.logging import get_logger
from celidone.domain.entities.rental import (
    FormaPagamento,
    Rental,
    RentalRequest,
    RentalStatus,
    TipoCobranca,
)
from celidone.domain.services.currency_formatter import format_currency
from celidone.domain.validation import messages
from celidone.domain.validation.results import ErrorCode, ValidationIssue, ValidationResult

logger = get_logger(__name__)

Number = Union[Decimal, int, float]

# Presence check order
REQUIRED_FIELDS = (
    "cliente_id",
    "produto_id",
    "data_aluguel",
    "data_dev_prevista",
    "valor_aluguel",
    "valor_caucao",
    "tipo_cobranca",
    "forma_pagamento",
    "periodo",
)

_TIPOS_COBRANCA = {t.value for t in TipoCobranca}
_FORMAS_PAGAMENTO = {f.value for f in FormaPagamento}


def compute_total(valor_aluguel: Number, periodo: Number, desconto: Number = 0) -> Decimal:
    """
    Calculate the rental total: valor_aluguel * periodo - desconto.

    The discount is not capped, so the result can be negative; callers that
    need a non-negative total must check it.

    Examples:
        >>> compute_total(Decimal("100"), 7, Decimal("10"))
        Decimal('690')
    """
    return (
        Decimal(str(valor_aluguel)) * Decimal(str(periodo)) - Decimal(str(desconto))
    )


class RentalRuleEngine:
    """Validates rental requests and derives the payload sent to the backend.

    The engine is stateless: limits come from the injected settings and every
    method is a pure function of its arguments.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize rule engine.

        Args:
            settings: Application settings (uses cached settings if None)
        """
        self.settings = settings or get_settings()

    def validate(
        self,
        request: Optional[Union[RentalRequest, Mapping[str, Any]]],
        product_available: bool,
    ) -> ValidationResult:
        """Validate a rental request.

        Checks run in order and accumulate: required fields, amount bounds,
        date ordering, then product availability. A missing request yields a
        single error.

        Args:
            request: Rental request (a mapping is parsed with validate_form)
            product_available: Whether the product is available right now

        Returns:
            ValidationResult listing every problem found
        """
        if request is None:
            return ValidationResult.from_issues(
                [ValidationIssue(code=ErrorCode.REQUIRED, message=messages.RENTAL_REQUIRED)]
            )

        if not isinstance(request, RentalRequest):
            return self.validate_form(request, product_available)

        issues: list[ValidationIssue] = []
        issues.extend(self._check_required(request))
        issues.extend(self._check_amounts(request))
        issues.extend(self._check_dates(request))

        if not product_available:
            issues.append(
                ValidationIssue(
                    field="produto_id",
                    code=ErrorCode.BUSINESS_RULE,
                    message=messages.PRODUTO_INDISPONIVEL,
                )
            )

        result = ValidationResult.from_issues(issues)
        logger.debug(
            "Rental request validated",
            is_valid=result.is_valid,
            errors=len(issues),
            cliente_id=request.cliente_id,
            produto_id=request.produto_id,
        )
        return result

    def validate_form(self, data: Optional[Mapping[str, Any]], product_available: bool) -> ValidationResult:
        """Validate raw form data (camelCase or snake_case keys).

        Values that cannot even be parsed (dates, integers) are reported as
        malformed instead of raising.
        """
        if data is None:
            return self.validate(None, product_available)

        try:
            request = RentalRequest.model_validate(dict(data))
        except ValidationError as e:
            return self._from_parse_errors(data, e, product_available)

        return self.validate(request, product_available)

    def compute_total(self, valor_aluguel: Number, periodo: Number, desconto: Number = 0) -> Decimal:
        """Calculate the rental total (see module-level compute_total)."""
        return compute_total(valor_aluguel, periodo, desconto)

    def build_payload(self, request: RentalRequest) -> dict[str, Any]:
        """Build the create/update payload for the backend API.

        Amounts are plain numbers, dates are ISO strings and enums use their
        canonical values. New rentals always start as ATIVO.

        Raises:
            ValueError: If the request has required fields missing or bad
                amounts; validate() must pass first
        """
        problems = self._check_required(request) + self._check_amounts(request)
        if problems:
            raise ValueError(
                "Cannot build payload from an invalid rental request: "
                + "; ".join(p.message for p in problems)
            )

        total = compute_total(request.valor_aluguel, request.periodo, request.valor_desconto)

        payload = {
            "clienteId": request.cliente_id,
            "produtoId": request.produto_id,
            "dataAluguel": request.data_aluguel.isoformat(),
            "dataDevPrevista": request.data_dev_prevista.isoformat(),
            "valorAluguel": float(request.valor_aluguel),
            "valorCaucao": float(request.valor_caucao),
            "valorDesconto": float(request.valor_desconto),
            "valorTotal": float(total),
            "tipoCobranca": request.tipo_cobranca,
            "formaPagamento": request.forma_pagamento,
            "periodo": request.periodo,
            "observacoes": request.observacoes,
            "status": RentalStatus.ATIVO.value,
        }

        logger.info(
            "Rental payload built",
            cliente_id=request.cliente_id,
            produto_id=request.produto_id,
            valor_total=float(total),
        )
        return payload

    def validate_return_date(self, rental: Rental, data_dev_efetiva: date) -> ValidationResult:
        """Check that an actual return date is not before the rental date.

        The state machine does not enforce this; callers opt in.
        """
        issues = []
        if data_dev_efetiva < rental.data_aluguel:
            issues.append(
                ValidationIssue(
                    field="data_dev_efetiva",
                    code=ErrorCode.BUSINESS_RULE,
                    message=messages.DATA_DEV_EFETIVA_ORDER,
                )
            )
        return ValidationResult.from_issues(issues)

    def _check_required(self, request: RentalRequest) -> list[ValidationIssue]:
        issues = []

        for field in REQUIRED_FIELDS:
            if getattr(request, field) is None:
                issues.append(
                    ValidationIssue(
                        field=field,
                        code=ErrorCode.REQUIRED,
                        message=messages.RENTAL_FIELD_REQUIRED[field],
                    )
                )

        if request.tipo_cobranca is not None and request.tipo_cobranca not in _TIPOS_COBRANCA:
            issues.append(
                ValidationIssue(
                    field="tipo_cobranca",
                    code=ErrorCode.MALFORMED,
                    message=messages.RENTAL_FIELD_INVALID["tipo_cobranca"],
                )
            )

        if request.forma_pagamento is not None and request.forma_pagamento not in _FORMAS_PAGAMENTO:
            issues.append(
                ValidationIssue(
                    field="forma_pagamento",
                    code=ErrorCode.MALFORMED,
                    message=messages.RENTAL_FIELD_INVALID["forma_pagamento"],
                )
            )

        return issues

    def _check_amounts(self, request: RentalRequest) -> list[ValidationIssue]:
        issues = []

        if request.valor_aluguel is not None:
            if request.valor_aluguel <= 0:
                issues.append(
                    ValidationIssue(
                        field="valor_aluguel",
                        code=ErrorCode.BUSINESS_RULE,
                        message=messages.VALOR_ALUGUEL_POSITIVE,
                    )
                )
            elif request.valor_aluguel > self.settings.valor_aluguel_max:
                issues.append(
                    ValidationIssue(
                        field="valor_aluguel",
                        code=ErrorCode.BUSINESS_RULE,
                        message=messages.VALOR_ALUGUEL_MAX.format(
                            max=format_currency(self.settings.valor_aluguel_max)
                        ),
                    )
                )

        if request.valor_caucao is not None:
            if request.valor_caucao < 0:
                issues.append(
                    ValidationIssue(
                        field="valor_caucao",
                        code=ErrorCode.BUSINESS_RULE,
                        message=messages.VALOR_CAUCAO_NON_NEGATIVE,
                    )
                )
            elif request.valor_caucao > self.settings.valor_caucao_max:
                issues.append(
                    ValidationIssue(
                        field="valor_caucao",
                        code=ErrorCode.BUSINESS_RULE,
                        message=messages.VALOR_CAUCAO_MAX.format(
                            max=format_currency(self.settings.valor_caucao_max)
                        ),
                    )
                )

        if request.periodo is not None and request.periodo <= 0:
            issues.append(
                ValidationIssue(
                    field="periodo",
                    code=ErrorCode.BUSINESS_RULE,
                    message=messages.PERIODO_POSITIVE,
                )
            )

        return issues

    def _check_dates(self, request: RentalRequest) -> list[ValidationIssue]:
        if request.data_aluguel is None or request.data_dev_prevista is None:
            return []

        if request.data_dev_prevista <= request.data_aluguel:
            return [
                ValidationIssue(
                    field="data_dev_prevista",
                    code=ErrorCode.BUSINESS_RULE,
                    message=messages.DATA_DEV_PREVISTA_ORDER,
                )
            ]

        return []

    def _from_parse_errors(
        self,
        data: Mapping[str, Any],
        error: ValidationError,
        product_available: bool,
    ) -> ValidationResult:
        """Report unparseable fields, then validate whatever did parse."""
        bad_fields = set()
        for err in error.errors():
            if err.get("loc"):
                bad_fields.add(_field_name(str(err["loc"][0])))

        issues = [
            ValidationIssue(
                field=field,
                code=ErrorCode.MALFORMED,
                message=messages.RENTAL_FIELD_INVALID.get(field, messages.REQUIRED),
            )
            for field in sorted(bad_fields)
        ]

        # Drop unparseable fields and validate the rest so presence, amount and
        # date errors are still reported together.
        clean = {
            key: value
            for key, value in data.items()
            if _field_name(key) not in bad_fields
        }
        request = RentalRequest.model_validate(clean)
        remaining = self.validate(request, product_available)

        # Fields already reported as malformed are not also reported as missing
        issues.extend(
            issue
            for issue in remaining.issues
            if not (issue.code == ErrorCode.REQUIRED and issue.field in bad_fields)
        )

        logger.debug("Rental form had unparseable fields", fields=sorted(bad_fields))
        return ValidationResult.from_issues(issues)


_ALIASES = {
    field.alias: name
    for name, field in RentalRequest.model_fields.items()
    if field.alias
}


def _field_name(key: str) -> str:
    """Map a camelCase alias to its snake_case field name."""
    return _ALIASES.get(key, key)
