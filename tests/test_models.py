from datetime import date
from decimal import Decimal

import pytest
from django.db import IntegrityError, connection, transaction

from invoices.models import Invoice, User
from invoices.services import InvoiceService, UserService
from tests.factories import InvoiceFactory, UserFactory


@pytest.mark.django_db
class TestInvoiceModel:
    def test_create_invoice(self):
        invoice = InvoiceFactory()
        assert invoice.pk is not None
        assert len(invoice.id) == 36
        assert invoice.status == "pending"

    def test_invoice_str(self):
        invoice = InvoiceFactory(customer_id="acme")
        assert "acme" in str(invoice)

    def test_amount_display(self):
        assert InvoiceFactory(amount=1050).amount_display == Decimal("10.50")

    def test_is_paid(self):
        assert InvoiceFactory(status="paid").is_paid is True
        assert InvoiceFactory(status="pending").is_paid is False

    def test_newest_first(self):
        older = InvoiceFactory(date=date(2024, 1, 1))
        newer = InvoiceFactory(date=date(2024, 6, 1))
        assert list(Invoice.objects.all()) == [newer, older]

    def test_amount_must_be_positive(self):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                InvoiceFactory(amount=0)

    def test_table_columns(self):
        with connection.cursor() as cursor:
            columns = {
                column.name
                for column in connection.introspection.get_table_description(cursor, "invoices")
            }
        assert columns == {"id", "customer_id", "amount", "status", "date"}


@pytest.mark.django_db
class TestInvoiceService:
    def test_insert_round_trips_through_orm(self):
        invoice_id = InvoiceService.insert("c1", 1050, "pending", "2024-03-01")
        invoice = Invoice.objects.get(id=invoice_id)
        assert invoice.date == date(2024, 3, 1)
        assert invoice.amount == 1050

    def test_update_and_delete_report_rowcounts(self):
        invoice = InvoiceFactory()
        assert InvoiceService.update(invoice.id, "c2", 99, "paid") == 1
        assert InvoiceService.delete(invoice.id) == 1
        assert InvoiceService.delete(invoice.id) == 0

    def test_values_are_bound_not_interpolated(self):
        hostile = "c1'); DROP TABLE invoices; --"
        invoice_id = InvoiceService.insert(hostile, 100, "pending")
        assert Invoice.objects.get(id=invoice_id).customer_id == hostile

    def test_to_cents(self):
        assert InvoiceService.to_cents(Decimal("10.50")) == 1050
        assert InvoiceService.to_cents(Decimal("0.005")) == 1


@pytest.mark.django_db
class TestUserModel:
    def test_create_user_hashes_password(self):
        user = User.objects.create_user(email="ada@example.com", password="secret123", name="Ada")
        assert user.password != "secret123"
        assert user.check_password("secret123")

    def test_user_str(self):
        user = UserFactory(name="Ada", email="ada@example.com")
        assert str(user) == "Ada <ada@example.com>"

    def test_users_table_columns(self):
        with connection.cursor() as cursor:
            columns = {
                column.name
                for column in connection.introspection.get_table_description(cursor, "users")
            }
        assert columns == {"id", "name", "email", "password"}

    def test_insert_user_returns_row_without_hash(self):
        row = UserService.insert_user("u1", "Ada", "ada@example.com", UserService.hash_password("secret123"))
        assert row == {"id": "u1", "name": "Ada", "email": "ada@example.com"}
        assert User.objects.get(id="u1").check_password("secret123")
