"""Format validators for CEP, e-mail, phone and person names."""

import re
from typing import Literal, Optional

from celidone.domain.validation import messages
from celidone.domain.validation.documents import only_digits
from celidone.domain.validation.results import ErrorCode, FieldValidation

PhoneKind = Literal["celular", "fixo"]

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
CEP_LENGTH = 8
CELULAR_REGEX = re.compile(r"^\([0-9]{2}\) [0-9]{5}-[0-9]{4}$")
FIXO_REGEX = re.compile(r"^\([0-9]{2}\) [0-9]{4}-[0-9]{4}$")
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
NAME_REGEX = re.compile(r"^[a-zA-ZÀ-ÿ\s]+$")


def _required() -> FieldValidation:
    return FieldValidation.fail(ErrorCode.REQUIRED, messages.REQUIRED)


def validate_email(value: Optional[str]) -> FieldValidation:
    """Validate an e-mail address (local@domain.tld, no whitespace)."""
    if not value:
        return _required()
    if not EMAIL_REGEX.fullmatch(value):
        return FieldValidation.fail(ErrorCode.MALFORMED, messages.INVALID_EMAIL)
    return FieldValidation.ok()


def validate_cep(value: Optional[str]) -> FieldValidation:
    """Validate a CEP: exactly 8 digits once formatting is removed."""
    if not value:
        return _required()
    if len(only_digits(value)) != CEP_LENGTH:
        return FieldValidation.fail(ErrorCode.MALFORMED, messages.INVALID_CEP)
    return FieldValidation.ok()


def validate_name(value: Optional[str]) -> FieldValidation:
    """Validate a person name: 2 to 100 letters or spaces after trimming."""
    if not value:
        return _required()

    name = value.strip()
    if len(name) < NAME_MIN_LENGTH:
        return FieldValidation.fail(ErrorCode.MALFORMED, messages.min_length(NAME_MIN_LENGTH))
    if len(name) > NAME_MAX_LENGTH:
        return FieldValidation.fail(ErrorCode.MALFORMED, messages.max_length(NAME_MAX_LENGTH))
    if not NAME_REGEX.fullmatch(name):
        return FieldValidation.fail(ErrorCode.MALFORMED, messages.INVALID_NAME)

    return FieldValidation.ok()


def validate_phone(value: Optional[str], kind: PhoneKind = "celular") -> FieldValidation:
    """Validate a masked phone number.

    Celular: "(DD) NNNNN-NNNN" (11 digits). Fixo: "(DD) NNNN-NNNN" (10 digits).
    """
    if not value:
        return _required()

    regex = CELULAR_REGEX if kind == "celular" else FIXO_REGEX
    if not regex.fullmatch(value):
        return FieldValidation.fail(ErrorCode.MALFORMED, messages.INVALID_PHONE)

    return FieldValidation.ok()
