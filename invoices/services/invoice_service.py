import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from django.db import connection
from django.utils import timezone

from ..models import generate_id

logger = logging.getLogger(__name__)


class InvoiceService:
    """Parameterized SQL against the ``invoices`` table."""

    INSERT_SQL = (
        "INSERT INTO invoices (id, customer_id, amount, status, date) "
        "VALUES (%s, %s, %s, %s, %s)"
    )
    UPDATE_SQL = (
        "UPDATE invoices SET customer_id = %s, amount = %s, status = %s "
        "WHERE id = %s"
    )
    DELETE_SQL = "DELETE FROM invoices WHERE id = %s"

    @staticmethod
    def to_cents(amount: Decimal) -> int:
        return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    @staticmethod
    def today() -> str:
        return timezone.now().date().isoformat()

    @classmethod
    def insert(cls, customer_id: str, amount_cents: int, status: str,
               issued_on: Optional[str] = None, invoice_id: Optional[str] = None) -> str:
        invoice_id = invoice_id or generate_id()
        issued_on = issued_on or cls.today()
        with connection.cursor() as cursor:
            cursor.execute(cls.INSERT_SQL, [invoice_id, customer_id, amount_cents, status, issued_on])
        logger.info(f"Inserted invoice {invoice_id} for customer {customer_id}")
        return invoice_id

    @classmethod
    def update(cls, invoice_id: str, customer_id: str, amount_cents: int, status: str) -> int:
        with connection.cursor() as cursor:
            cursor.execute(cls.UPDATE_SQL, [customer_id, amount_cents, status, invoice_id])
            updated = cursor.rowcount
        logger.info(f"Updated invoice {invoice_id} ({updated} row(s))")
        return updated

    @classmethod
    def delete(cls, invoice_id: str) -> int:
        with connection.cursor() as cursor:
            cursor.execute(cls.DELETE_SQL, [invoice_id])
            deleted = cursor.rowcount
        logger.info(f"Deleted invoice {invoice_id} ({deleted} row(s))")
        return deleted

    @staticmethod
    def search(query: Optional[str] = None):
        from django.db.models import Q
        from ..models import Invoice

        invoices = Invoice.objects.all()
        if query:
            invoices = invoices.filter(
                Q(customer_id__icontains=query) |
                Q(status__icontains=query) |
                Q(date__icontains=query)
            )
        return invoices.order_by("-date", "id")

    @staticmethod
    def as_row(invoice) -> dict:
        issued_on = invoice.date.isoformat() if isinstance(invoice.date, date) else str(invoice.date)
        return {
            "id": invoice.id,
            "customer_id": invoice.customer_id,
            "amount": invoice.amount,
            "amount_display": f"{invoice.amount_display:,.2f}",
            "status": invoice.status,
            "date": issued_on,
        }
