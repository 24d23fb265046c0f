"""
Authentication Tests
Credentials backend, the sign-in/sign-out gateway and password hashing.
"""
from unittest.mock import Mock, patch

import pytest
from django.contrib.auth import SESSION_KEY, authenticate
from django.contrib.auth.hashers import check_password
from django.db import DatabaseError

from invoices.auth_services import AuthError, AuthErrorType, AuthService, SignInResult
from invoices.backends import EmailPasswordBackend, credentials_are_well_formed
from invoices.models import User
from invoices.navigation import NavigationRedirect
from invoices.services import UserService


class TestPasswordHashing:
    def test_hash_differs_from_plaintext_and_verifies(self):
        hashed = UserService.hash_password("secret123")
        assert hashed != "secret123"
        assert check_password("secret123", hashed)
        assert not check_password("secret124", hashed)

    def test_same_password_hashes_differently(self):
        assert UserService.hash_password("secret123") != UserService.hash_password("secret123")


class TestCredentialShape:
    @pytest.mark.parametrize("email,password,expected", [
        ("ada@example.com", "secret123", True),
        ("ada@example.com", "12345", False),
        ("not-an-email", "secret123", False),
        (None, "secret123", False),
        ("ada@example.com", None, False),
    ])
    def test_credentials_are_well_formed(self, email, password, expected):
        assert credentials_are_well_formed(email, password) is expected


@pytest.mark.django_db
class TestEmailPasswordBackend:
    def test_valid_credentials(self, user, password):
        assert EmailPasswordBackend().authenticate(None, email=user.email, password=password) == user

    def test_wrong_password(self, user):
        assert EmailPasswordBackend().authenticate(None, email=user.email, password="wrong-password") is None

    def test_unknown_email(self, db):
        assert EmailPasswordBackend().authenticate(None, email="nobody@example.com", password="secret123") is None

    def test_short_password_never_queries(self, user):
        with patch.object(User.objects, "filter") as mock_filter:
            assert EmailPasswordBackend().authenticate(None, email=user.email, password="123") is None
        mock_filter.assert_not_called()

    def test_shared_email_matches_the_right_row(self, db):
        User.objects.create_user(email="shared@example.com", password="first-pass", name="First")
        second = User.objects.create_user(email="shared@example.com", password="second-pass", name="Second")

        assert EmailPasswordBackend().authenticate(None, email="shared@example.com", password="second-pass") == second

    def test_through_django_authenticate(self, user, password):
        assert authenticate(None, email=user.email, password=password) == user

    def test_get_user(self, user):
        backend = EmailPasswordBackend()
        assert backend.get_user(user.pk) == user
        assert backend.get_user("missing") is None


@pytest.mark.django_db
class TestAuthService:
    def test_sign_in_without_redirect(self, session_request, user, password):
        result = AuthService(session_request).sign_in(
            "credentials", {"email": user.email, "password": password}, redirect=False
        )

        assert result == SignInResult(ok=True, url="/dashboard/")
        assert session_request.session[SESSION_KEY] == user.pk
        assert session_request.user == user

    def test_sign_in_with_redirect_navigates(self, session_request, user, password):
        with pytest.raises(NavigationRedirect) as exc_info:
            AuthService(session_request).sign_in("credentials", {"email": user.email, "password": password})

        assert exc_info.value.url == "/dashboard/"
        assert session_request.session[SESSION_KEY] == user.pk

    def test_sign_in_uses_injected_navigator(self, session_request, user, password):
        navigator = Mock()
        AuthService(session_request, navigator=navigator).sign_in(
            "credentials", {"email": user.email, "password": password}
        )
        navigator.redirect_to.assert_called_once_with("/dashboard/")

    def test_local_redirect_target_honoured(self, session_request, user, password):
        result = AuthService(session_request).sign_in(
            "credentials",
            {"email": user.email, "password": password, "redirectTo": "/dashboard/invoices/"},
            redirect=False,
        )
        assert result.url == "/dashboard/invoices/"

    def test_external_redirect_target_ignored(self, session_request, user, password):
        result = AuthService(session_request).sign_in(
            "credentials",
            {"email": user.email, "password": password, "redirectTo": "https://evil.example.com/"},
            redirect=False,
        )
        assert result.url == "/dashboard/"

    def test_bad_credentials_raise_with_redirect(self, session_request, user):
        with pytest.raises(AuthError) as exc_info:
            AuthService(session_request).sign_in("credentials", {"email": user.email, "password": "wrong-pass"})

        assert exc_info.value.type == AuthErrorType.CREDENTIALS_SIGNIN
        assert SESSION_KEY not in session_request.session

    def test_bad_credentials_reported_without_redirect(self, session_request, user):
        result = AuthService(session_request).sign_in(
            "credentials", {"email": user.email, "password": "wrong-pass"}, redirect=False
        )
        assert result.ok is False
        assert result.error == AuthErrorType.CREDENTIALS_SIGNIN
        assert result.status == 401

    def test_unknown_provider(self, session_request):
        with pytest.raises(AuthError) as exc_info:
            AuthService(session_request).sign_in("github", {})
        assert exc_info.value.type == AuthErrorType.CONFIGURATION

    def test_database_failure_is_callback_error(self, session_request):
        with patch("invoices.auth_services.authenticate", side_effect=DatabaseError("down")):
            with pytest.raises(AuthError) as exc_info:
                AuthService(session_request).sign_in(
                    "credentials", {"email": "ada@example.com", "password": "secret123"}
                )
        assert exc_info.value.type == AuthErrorType.CALLBACK_ROUTE_ERROR

    def test_sign_out(self, session_request, user, password):
        service = AuthService(session_request)
        service.sign_in("credentials", {"email": user.email, "password": password}, redirect=False)

        with pytest.raises(NavigationRedirect) as exc_info:
            service.sign_out()

        assert exc_info.value.url == "/"
        assert SESSION_KEY not in session_request.session
        assert not session_request.user.is_authenticated
