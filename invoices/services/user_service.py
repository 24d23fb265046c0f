"""
User Service - persistence for signup.

Responsibilities:
- Password hashing before storage
- Parameterized INSERT into the ``users`` table
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from django.contrib.auth.hashers import make_password
from django.db import connection

logger = logging.getLogger(__name__)


class UserService:
    """Service for creating users."""

    INSERT_SQL = "INSERT INTO users (id, name, email, password) VALUES (%s, %s, %s, %s)"
    SELECT_SQL = "SELECT id, name, email FROM users WHERE id = %s"

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a plaintext password for storage.

        Every call draws a fresh random salt, so two users with the same
        password never share a stored hash.
        """
        return make_password(password)

    @classmethod
    def insert_user(cls, user_id: str, name: str, email: str, password_hash: str) -> Dict[str, Any]:
        """
        Insert a user row and read it back.

        Args:
            user_id: Server-generated identifier
            name: Display name
            email: Validated email address
            password_hash: Output of ``hash_password``

        Returns:
            The stored row without its password hash
        """
        with connection.cursor() as cursor:
            cursor.execute(cls.INSERT_SQL, [user_id, name, email, password_hash])
            cursor.execute(cls.SELECT_SQL, [user_id])
            row = cursor.fetchone()

        logger.info(f"Created user {user_id}")
        return {"id": row[0], "name": row[1], "email": row[2]}
