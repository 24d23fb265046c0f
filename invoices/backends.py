"""
Credentials provider for ``django.contrib.auth``.

Looks users up by email in the ``users`` table and verifies the stored
hash. Emails are not unique, so every row carrying the email is tried in
turn and the first whose hash verifies wins.
"""
import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import BaseBackend
from django.contrib.auth.hashers import check_password, make_password
from django.core.exceptions import ValidationError
from django.core.validators import validate_email

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def credentials_are_well_formed(email, password) -> bool:
    if not isinstance(email, str) or not isinstance(password, str):
        return False
    if len(password) < MIN_PASSWORD_LENGTH:
        return False
    try:
        validate_email(email)
    except ValidationError:
        return False
    return True


class EmailPasswordBackend(BaseBackend):
    def authenticate(self, request, email=None, password=None, **kwargs):
        if email is None:
            email = kwargs.get("username")

        if not credentials_are_well_formed(email, password):
            logger.info("Rejected malformed credentials")
            return None

        UserModel = get_user_model()
        candidates = list(UserModel._default_manager.filter(email=email))
        if not candidates:
            # Hash once on a miss too; keeps timing close to a hit.
            make_password(password)
            return None

        for user in candidates:
            if check_password(password, user.password) and self.user_can_authenticate(user):
                return user
        return None

    def user_can_authenticate(self, user) -> bool:
        return getattr(user, "is_active", True)

    def get_user(self, user_id):
        UserModel = get_user_model()
        try:
            user = UserModel._default_manager.get(pk=user_id)
        except UserModel.DoesNotExist:
            return None
        return user if self.user_can_authenticate(user) else None
