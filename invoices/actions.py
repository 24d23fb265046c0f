"""
Server-side form actions.

Each action takes the raw submitted fields, validates them, writes through
the services layer and then invalidates the listing cache and navigates.
Collaborators (cache, navigator, auth gateway) are keyword arguments so
callers and tests can swap them.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from django.conf import settings
from django.db import Error as DatabaseError

from .auth_services import AuthError, AuthErrorType
from .cache import PathCache
from .models import generate_id
from .navigation import RedirectNavigator
from .ports import AuthGateway, Navigator, ViewCache
from .services import InvoiceService, UserService
from .validation import ActionState, CreateInvoiceForm, UpdateInvoiceForm, UserForm, validate

logger = logging.getLogger(__name__)

INVOICES_PATH = "/dashboard/invoices/"
DASHBOARD_PATH = "/dashboard/"

SIGNED_UP_MESSAGE = "User created and signed in successfully"
DELETED_MESSAGE = "Deleted Invoice."
DELETE_FAILED_MESSAGE = "Database Error: Failed to Delete Invoice."


def _invoice_fields(form_data: Mapping[str, Any]) -> dict:
    return {
        "customerId": form_data.get("customerId"),
        "amount": form_data.get("amount"),
        "status": form_data.get("status"),
    }


def create_invoice(
    prev_state: Optional[ActionState],
    form_data: Mapping[str, Any],
    *,
    view_cache: Optional[ViewCache] = None,
    navigator: Optional[Navigator] = None,
) -> ActionState:
    validated = validate(
        CreateInvoiceForm,
        _invoice_fields(form_data),
        "Missing Fields. Failed to Create Invoice.",
    )
    if not validated.success:
        return ActionState.from_validation(validated)

    data = validated.data

    try:
        amount_in_cents = InvoiceService.to_cents(data["amount"])
        InvoiceService.insert(data["customerId"], amount_in_cents, data["status"], InvoiceService.today())
    except DatabaseError as e:
        logger.exception(f"Error creating invoice: {e}")
        return ActionState(message="Database Error: Failed to Create Invoice.")

    (view_cache or PathCache()).invalidate(INVOICES_PATH)
    (navigator or RedirectNavigator()).redirect_to(INVOICES_PATH)


def update_invoice(
    invoice_id: str,
    prev_state: Optional[ActionState],
    form_data: Mapping[str, Any],
    *,
    view_cache: Optional[ViewCache] = None,
    navigator: Optional[Navigator] = None,
) -> ActionState:
    validated = validate(
        UpdateInvoiceForm,
        _invoice_fields(form_data),
        "Missing Fields. Failed to Update Invoice.",
    )
    if not validated.success:
        return ActionState.from_validation(validated)

    data = validated.data

    try:
        amount_in_cents = InvoiceService.to_cents(data["amount"])
        InvoiceService.update(invoice_id, data["customerId"], amount_in_cents, data["status"])
    except DatabaseError as e:
        logger.exception(f"Error updating invoice {invoice_id}: {e}")
        return ActionState(message="Database Error: Failed to Update Invoice.")

    (view_cache or PathCache()).invalidate(INVOICES_PATH)
    (navigator or RedirectNavigator()).redirect_to(INVOICES_PATH)


def delete_invoice(invoice_id: str, *, view_cache: Optional[ViewCache] = None) -> ActionState:
    try:
        InvoiceService.delete(invoice_id)
        (view_cache or PathCache()).invalidate(INVOICES_PATH)
        return ActionState(message=DELETED_MESSAGE)
    except DatabaseError as e:
        logger.exception(f"Error deleting invoice {invoice_id}: {e}")
        return ActionState(message=DELETE_FAILED_MESSAGE)


def sign_up(form_data: Mapping[str, Any], *, auth: AuthGateway) -> ActionState:
    """
    Create a user and sign them straight in.

    Navigation is left to the caller: on success the returned state carries
    ``redirect_url`` when the sign-in produced one.
    """
    user_id = generate_id()
    logger.info(f"Signup attempt for {form_data.get('email')!r}")

    validated = validate(
        UserForm,
        {
            "id": user_id,
            "name": form_data.get("name"),
            "email": form_data.get("email"),
            "password": form_data.get("password"),
        },
        "Invalid input. Failed to create user.",
    )
    if not validated.success:
        return ActionState.from_validation(validated)

    name = validated.data["name"]
    email = validated.data["email"]
    password = validated.data["password"]

    try:
        hashed_password = UserService.hash_password(password)
        user = UserService.insert_user(user_id, name, email, hashed_password)

        # Plaintext password: the gateway re-checks it against the new hash.
        result = auth.sign_in("credentials", {"email": email, "password": password}, redirect=False)

        if result is not None and result.error:
            raise AuthError(result.error)

        if result is not None and result.url:
            return ActionState(message=SIGNED_UP_MESSAGE, user=user, redirect_url=result.url)

        return ActionState(message=SIGNED_UP_MESSAGE, user=user)
    except Exception as e:
        logger.exception(f"Failed to create or sign in user: {e}")
        if getattr(settings, "SIGNUP_ERROR_DETAIL", True):
            return ActionState(message=f"Failed to create or sign in user: {e}")
        return ActionState(message="Failed to create or sign in user.")


def authenticate(prev_state: Optional[str], form_data: Mapping[str, Any], *, auth: AuthGateway) -> Optional[str]:
    try:
        auth.sign_in("credentials", form_data)
    except AuthError as error:
        if error.type == AuthErrorType.CREDENTIALS_SIGNIN:
            return "Invalid credentials."
        return "Something went wrong."
    return None
