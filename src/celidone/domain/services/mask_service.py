"""Positional input masks for documents, CEP and phones.

A mask template mixes literal characters with "#" placeholders, each of
which takes one digit. Masks are reversible: removing a mask from a masked
value gives back the digits that fit in the template.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

PLACEHOLDER = "#"

CPF_MASK = "###.###.###-##"
CNPJ_MASK = "##.###.###/####-##"
CEP_MASK = "#####-###"
CELULAR_MASK = "(##) #####-####"
FIXO_MASK = "(##) ####-####"

_NON_DIGITS = re.compile(r"[^0-9]")


class MaskType(str, Enum):
    """Mask kind inferred from a value's digit count."""

    CNPJ = "cnpj"
    CPF = "cpf"
    FIXO = "fixo"
    CEP = "cep"
    UNKNOWN = "unknown"


MASK_TEMPLATES: dict[MaskType, str] = {
    MaskType.CPF: CPF_MASK,
    MaskType.CNPJ: CNPJ_MASK,
    MaskType.CEP: CEP_MASK,
    MaskType.FIXO: FIXO_MASK,
}


def remove_mask(value: Optional[str]) -> Optional[str]:
    """Strip every non-digit character. Empty values are returned as-is."""
    if not value:
        return value
    return _NON_DIGITS.sub("", value)


def apply_mask(value: Optional[str], template: Optional[str]) -> Optional[str]:
    """
    Apply a mask template to the digits of value.

    Literals are emitted as they appear; each placeholder consumes the next
    digit. Output stops as soon as the template or the digits run out, so
    partial input gives a partial mask.

    Examples:
        >>> apply_mask("11144477735", CPF_MASK)
        '111.444.777-35'
        >>> apply_mask("1114", CPF_MASK)
        '111.4'
    """
    if not value or not template:
        return value

    digits = _NON_DIGITS.sub("", value)
    masked = []
    index = 0

    for char in template:
        if index >= len(digits):
            break
        if char == PLACEHOLDER:
            masked.append(digits[index])
            index += 1
        else:
            masked.append(char)

    return "".join(masked)


def placeholder_count(template: str) -> int:
    """Number of digits a template can hold."""
    return template.count(PLACEHOLDER)


def detect_mask_type(value: Optional[str]) -> MaskType:
    """
    Classify a value by its digit count.

    14 -> CNPJ, 11 -> CPF, 10 -> landline, 8 -> CEP. An 11-digit mobile phone
    is indistinguishable from a CPF and is reported as CPF.
    """
    digits = remove_mask(value) or ""

    if len(digits) == 14:
        return MaskType.CNPJ
    if len(digits) == 11:
        return MaskType.CPF
    if len(digits) == 10:
        return MaskType.FIXO
    if len(digits) == 8:
        return MaskType.CEP

    return MaskType.UNKNOWN


def apply_auto_mask(value: Optional[str]) -> Optional[str]:
    """Mask value with the template matching its detected type.

    Unknown values are returned unchanged.
    """
    template = MASK_TEMPLATES.get(detect_mask_type(value))
    if template is None:
        return value
    return apply_mask(value, template)


def apply_cpf_mask(value: Optional[str]) -> Optional[str]:
    return apply_mask(value, CPF_MASK)


def apply_cnpj_mask(value: Optional[str]) -> Optional[str]:
    return apply_mask(value, CNPJ_MASK)


def apply_cep_mask(value: Optional[str]) -> Optional[str]:
    return apply_mask(value, CEP_MASK)


def apply_celular_mask(value: Optional[str]) -> Optional[str]:
    return apply_mask(value, CELULAR_MASK)


def apply_fixo_mask(value: Optional[str]) -> Optional[str]:
    return apply_mask(value, FIXO_MASK)


class MaskedField(BaseModel):
    """Raw digits paired with the template used to display them."""

    model_config = ConfigDict(frozen=True)

    raw: str
    template: str

    @field_validator("raw", mode="before")
    @classmethod
    def keep_digits(cls, v: Optional[str]) -> str:
        """Only digits are stored."""
        return _NON_DIGITS.sub("", v or "")

    @property
    def placeholders(self) -> int:
        return placeholder_count(self.template)

    @property
    def masked(self) -> str:
        return apply_mask(self.raw, self.template) or ""

    @property
    def is_complete(self) -> bool:
        """Whether the digits fill every placeholder."""
        return len(self.raw) == self.placeholders

    @classmethod
    def from_display(cls, value: str, template: str) -> "MaskedField":
        """Build from a masked display string."""
        return cls(raw=remove_mask(value) or "", template=template)
