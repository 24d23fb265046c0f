"""
Standardized Action Results

Every server-side action answers with the same shape:
    { errors?: { field: [messages] }, message?, user?, redirectUrl? }

Validation failures carry ``errors`` plus a summary ``message``; persistence
and auth failures carry only ``message``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


FieldErrors = Dict[str, List[str]]


@dataclass
class ValidationResult:
    success: bool
    data: Dict[str, Any] = field(default_factory=dict)
    errors: FieldErrors = field(default_factory=dict)
    message: Optional[str] = None

    @classmethod
    def ok(cls, data: Dict[str, Any]) -> "ValidationResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, errors: FieldErrors, message: str) -> "ValidationResult":
        return cls(success=False, errors=errors, message=message)


@dataclass
class ActionState:
    errors: FieldErrors = field(default_factory=dict)
    message: Optional[str] = None
    user: Optional[Dict[str, Any]] = None
    redirect_url: Optional[str] = None

    @classmethod
    def from_validation(cls, result: ValidationResult) -> "ActionState":
        return cls(errors=result.errors, message=result.message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def field_errors(self, field_name: str) -> List[str]:
        return self.errors.get(field_name, [])

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.errors:
            result["errors"] = self.errors
        result["message"] = self.message
        if self.user is not None:
            result["user"] = self.user
        if self.redirect_url:
            result["redirectUrl"] = self.redirect_url
        return result


def format_form_errors(form_errors) -> FieldErrors:
    """Flatten a Django ``ErrorDict`` into ``{field: [message, ...]}``."""
    field_errors: FieldErrors = {}
    for field_name, error_list in form_errors.items():
        field_errors[field_name] = [str(error) for error in error_list]
    return field_errors
