"""CPF/CNPJ validators (modulo-11 check digits)."""

import re
from typing import Optional, Union

from celidone.domain.validation import messages
from celidone.domain.validation.results import DocumentCheck, ErrorCode

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_NON_DIGITS = re.compile(r"[^0-9]")
_CPF_BASE = re.compile(r"[0-9]{9}")
_CNPJ_BASE = re.compile(r"[0-9]{12}")


def only_digits(value: Optional[str]) -> str:
    """Remove every non-digit character."""
    return _NON_DIGITS.sub("", value or "")


def _all_same(digits: str) -> bool:
    return digits == digits[0] * len(digits)


def cpf_check_digits(base: str) -> str:
    """
    Compute the two CPF verifier digits for the first 9 digits.

    Examples:
        >>> cpf_check_digits("111444777")
        '35'
    """
    if not _CPF_BASE.fullmatch(base):
        raise ValueError("CPF base must have 9 digits")

    # First digit: weights 10..2
    soma = sum(int(base[i]) * (10 - i) for i in range(9))
    resto = (soma * 10) % 11
    d1 = 0 if resto in (10, 11) else resto

    # Second digit: weights 11..2 over the base plus d1
    partial = base + str(d1)
    soma = sum(int(partial[i]) * (11 - i) for i in range(10))
    resto = (soma * 10) % 11
    d2 = 0 if resto in (10, 11) else resto

    return f"{d1}{d2}"


def _cnpj_digit(digits: str) -> int:
    soma = 0
    peso = 2
    for char in reversed(digits):
        soma += int(char) * peso
        peso = 2 if peso == 9 else peso + 1
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def cnpj_check_digits(base: str) -> str:
    """
    Compute the two CNPJ verifier digits for the first 12 digits.

    Weights cycle 2..9 from the rightmost position leftwards.

    Examples:
        >>> cnpj_check_digits("112223330001")
        '81'
    """
    if not _CNPJ_BASE.fullmatch(base):
        raise ValueError("CNPJ base must have 12 digits")

    d1 = _cnpj_digit(base)
    d2 = _cnpj_digit(base + str(d1))
    return f"{d1}{d2}"


def is_valid_cpf(value: Optional[str]) -> bool:
    """Check CPF length, repeated digits and check digits."""
    cpf = only_digits(value)
    if len(cpf) != CPF_LENGTH or _all_same(cpf):
        return False
    return cpf[9:] == cpf_check_digits(cpf[:9])


def is_valid_cnpj(value: Optional[str]) -> bool:
    """Check CNPJ length, repeated digits and check digits."""
    cnpj = only_digits(value)
    if len(cnpj) != CNPJ_LENGTH or _all_same(cnpj):
        return False
    return cnpj[12:] == cnpj_check_digits(cnpj[:12])


def _required() -> DocumentCheck:
    return DocumentCheck(
        valid=False, reason="required", code=ErrorCode.REQUIRED, message=messages.REQUIRED
    )


def validate_cpf(value: Optional[str]) -> DocumentCheck:
    """Validate a CPF, masked or not."""
    if not value:
        return _required()

    cpf = only_digits(value)
    if len(cpf) != CPF_LENGTH or _all_same(cpf):
        return DocumentCheck(
            valid=False, reason="invalid", code=ErrorCode.MALFORMED, message=messages.INVALID_CPF
        )

    if cpf[9:] != cpf_check_digits(cpf[:9]):
        return DocumentCheck(
            valid=False, reason="invalid", code=ErrorCode.CHECKSUM, message=messages.INVALID_CPF
        )

    return DocumentCheck(valid=True)


def validate_cnpj(value: Optional[str]) -> DocumentCheck:
    """Validate a CNPJ, masked or not."""
    if not value:
        return _required()

    cnpj = only_digits(value)
    if len(cnpj) != CNPJ_LENGTH or _all_same(cnpj):
        return DocumentCheck(
            valid=False, reason="invalid", code=ErrorCode.MALFORMED, message=messages.INVALID_CNPJ
        )

    if cnpj[12:] != cnpj_check_digits(cnpj[:12]):
        return DocumentCheck(
            valid=False, reason="invalid", code=ErrorCode.CHECKSUM, message=messages.INVALID_CNPJ
        )

    return DocumentCheck(valid=True)


def validate_document(value: Optional[str], tipo_pessoa: Union[str, None] = None) -> DocumentCheck:
    """Validate a CPF or CNPJ.

    With tipo_pessoa (PESSOA_FISICA / PESSOA_JURIDICA) the matching validator
    is used; otherwise the document type follows the digit count.
    """
    if not value:
        return _required()

    kind = getattr(tipo_pessoa, "value", tipo_pessoa)
    if kind == "PESSOA_FISICA":
        return validate_cpf(value)
    if kind == "PESSOA_JURIDICA":
        return validate_cnpj(value)
    if kind is not None:
        raise ValueError(f"Invalid tipo_pessoa: {tipo_pessoa}")

    digits = only_digits(value)
    if len(digits) == CPF_LENGTH:
        return validate_cpf(digits)
    if len(digits) == CNPJ_LENGTH:
        return validate_cnpj(digits)

    return DocumentCheck(
        valid=False, reason="invalid", code=ErrorCode.MALFORMED, message=messages.INVALID_DOCUMENT
    )
