"""Validation result records."""

from enum import Enum
from typing import Iterable, Literal, Optional

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Error taxonomy shared by field and request validators."""

    REQUIRED = "required"  # Field missing or empty
    MALFORMED = "malformed"  # Wrong length, pattern or enum value
    CHECKSUM = "checksum"  # Plausible document failing the mod-11 digits
    BUSINESS_RULE = "business_rule"  # Date ordering, amounts, availability
    ILLEGAL_TRANSITION = "illegal_transition"  # State machine rule violated


class ValidationIssue(BaseModel):
    """A single validation problem."""

    field: Optional[str] = Field(None, description="Field name (snake_case)")
    code: ErrorCode = Field(..., description="Error category")
    message: str = Field(..., description="User facing message")


class ValidationResult(BaseModel):
    """Outcome of a request-level validation."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    issues: list[ValidationIssue] = Field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: Iterable[ValidationIssue]) -> "ValidationResult":
        """Build a result from collected issues, keeping their order."""
        issues = list(issues)
        return cls(
            is_valid=not issues,
            errors=[issue.message for issue in issues],
            issues=issues,
        )

    def has_code(self, code: ErrorCode) -> bool:
        """Check whether any issue carries the given code."""
        return any(issue.code == code for issue in self.issues)


class FieldValidation(BaseModel):
    """Outcome of a single field validation."""

    is_valid: bool
    message: Optional[str] = None
    code: Optional[ErrorCode] = None

    @classmethod
    def ok(cls) -> "FieldValidation":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, code: ErrorCode, message: str) -> "FieldValidation":
        return cls(is_valid=False, code=code, message=message)


class DocumentCheck(BaseModel):
    """Outcome of a CPF/CNPJ check."""

    valid: bool
    reason: Optional[Literal["required", "invalid"]] = None
    code: Optional[ErrorCode] = None
    message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.valid

    def as_field_validation(self) -> FieldValidation:
        """Convert to the field-level result shape."""
        if self.valid:
            return FieldValidation.ok()
        return FieldValidation(is_valid=False, code=self.code, message=self.message)
