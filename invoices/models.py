from __future__ import annotations

import uuid
from decimal import Decimal

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models


def generate_id() -> str:
    return str(uuid.uuid4())


class UserManager(BaseUserManager):
    use_in_migrations = True

    def create_user(self, email: str, password: str | None = None, name: str = "", **extra_fields) -> "User":
        if not email:
            raise ValueError("Users must have an email address")
        user = self.model(email=self.normalize_email(email), name=name, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user


class User(AbstractBaseUser):
    """
    Application user, stored in the ``users`` table.

    Rows are written by ``UserService`` with plain SQL at signup; the model
    exists so ``django.contrib.auth`` can load and log users in. Email is
    deliberately not unique, see ``EmailPasswordBackend``.
    """

    id = models.CharField(primary_key=True, max_length=36, default=generate_id, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, db_index=True)

    # users(id, name, email, password) carries no login timestamp
    last_login = None

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        db_table = "users"

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class Invoice(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        PAID = "paid", "Paid"

    id = models.CharField(primary_key=True, max_length=36, default=generate_id, editable=False)
    customer_id = models.CharField(max_length=255, db_index=True)
    amount = models.IntegerField(help_text="Amount in cents")
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    date = models.DateField()

    class Meta:
        db_table = "invoices"
        ordering = ["-date"]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gt=0), name="invoices_amount_positive"),
        ]

    def __str__(self) -> str:
        return f"Invoice {self.id} - {self.customer_id}"

    @property
    def amount_display(self) -> Decimal:
        return (Decimal(self.amount) / Decimal("100")).quantize(Decimal("0.01"))

    @property
    def is_paid(self) -> bool:
        return self.status == self.Status.PAID
