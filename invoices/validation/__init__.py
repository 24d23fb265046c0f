"""
Centralized Validation Module

Form schemas and the result shapes every action returns.
Server is authoritative; templates mirror constraints for UX.
"""

from .schemas import (
    InvoiceForm,
    CreateInvoiceForm,
    UpdateInvoiceForm,
    UserForm,
    validate,
)
from .errors import (
    ActionState,
    ValidationResult,
    format_form_errors,
)

__all__ = [
    "InvoiceForm",
    "CreateInvoiceForm",
    "UpdateInvoiceForm",
    "UserForm",
    "validate",
    "ActionState",
    "ValidationResult",
    "format_form_errors",
]
