"""
Domain-Specific Validation Schemas

Centralized validation rules per form type, written as Django forms so
every field reports all of its errors at once.

Schemas:
- InvoiceForm: the full invoice shape; CreateInvoiceForm and
  UpdateInvoiceForm drop the server-owned ``id`` and ``date``
- UserForm: signup credentials, ``id`` generated server-side
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Type

from django import forms
from django.core.exceptions import ValidationError

from ..models import Invoice
from .errors import ValidationResult, format_form_errors

AMOUNT_MESSAGE = "Please enter an amount greater than $0."
AMOUNT_INVALID_MESSAGE = "Amount must be a valid number."
AMOUNT_MAX_MESSAGE = "Please enter an amount no greater than $21,474,836.47."
CUSTOMER_MESSAGE = "Please select a customer."
STATUS_MESSAGE = "Please select an invoice status."
NAME_MESSAGE = "Please enter your name."
EMAIL_MESSAGE = "Invalid email format."
PASSWORD_MESSAGE = "Password must be at least 6 characters long."

MIN_PASSWORD_LENGTH = 6

# Stored as whole cents in a 32-bit integer column.
MIN_AMOUNT = Decimal("0.005")
MAX_AMOUNT = Decimal("21474836.47")


def validate_positive_amount(value: Decimal) -> None:
    # Anything under half a cent rounds to a zero stored amount.
    if value < MIN_AMOUNT:
        raise ValidationError(AMOUNT_MESSAGE, code="min_value")


def validate_amount_in_range(value: Decimal) -> None:
    if value > MAX_AMOUNT:
        raise ValidationError(AMOUNT_MAX_MESSAGE, code="max_value")


class AmountField(forms.Field):
    """Coerces form input to ``Decimal``; a missing or blank value becomes 0."""

    default_error_messages = {
        "invalid": AMOUNT_INVALID_MESSAGE,
    }
    default_validators = [validate_positive_amount, validate_amount_in_range]

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def to_python(self, value: Any) -> Decimal:
        if value is None:
            return Decimal("0")
        text = str(value).strip()
        if not text:
            return Decimal("0")
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise ValidationError(self.error_messages["invalid"], code="invalid")
        if not amount.is_finite():
            raise ValidationError(self.error_messages["invalid"], code="invalid")
        return amount


class InvoiceForm(forms.Form):
    id = forms.CharField()
    customerId = forms.CharField(error_messages={"required": CUSTOMER_MESSAGE})
    amount = AmountField()
    status = forms.ChoiceField(
        choices=Invoice.Status.choices,
        error_messages={
            "required": STATUS_MESSAGE,
            "invalid_choice": STATUS_MESSAGE,
        },
    )
    date = forms.CharField()


class CreateInvoiceForm(InvoiceForm):
    id = None
    date = None


class UpdateInvoiceForm(InvoiceForm):
    id = None
    date = None


class UserForm(forms.Form):
    id = forms.CharField()
    name = forms.CharField(max_length=255, error_messages={"required": NAME_MESSAGE})
    email = forms.EmailField(required=False, error_messages={"invalid": EMAIL_MESSAGE})
    password = forms.CharField(required=False, strip=False)

    def clean_email(self) -> str:
        email = self.cleaned_data.get("email", "")
        if not email:
            raise ValidationError(EMAIL_MESSAGE, code="invalid")
        return email

    def clean_password(self) -> str:
        password = self.cleaned_data.get("password", "")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(PASSWORD_MESSAGE, code="min_length")
        return password


def validate(schema: Type[forms.Form], data: Mapping[str, Any], message: str) -> ValidationResult:
    """Run ``schema`` over raw form values and return a tagged result."""
    form = schema(data=data)
    if not form.is_valid():
        return ValidationResult.failed(format_form_errors(form.errors), message)
    return ValidationResult.ok(dict(form.cleaned_data))
