"""
Authentication Services
Credential sign-in and sign-out on top of django.contrib.auth, with a small
error taxonomy the actions map to user-facing strings.
"""
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from django.conf import settings
from django.contrib.auth import authenticate, login, logout
from django.db import DatabaseError
from django.utils.http import url_has_allowed_host_and_scheme

from .navigation import RedirectNavigator

logger = logging.getLogger(__name__)


class AuthErrorType:
    CREDENTIALS_SIGNIN = "CredentialsSignin"
    CALLBACK_ROUTE_ERROR = "CallbackRouteError"
    CONFIGURATION = "Configuration"


class AuthError(Exception):
    def __init__(self, type: str, message: Optional[str] = None):
        self.type = type
        super().__init__(message or type)


@dataclass
class SignInResult:
    ok: bool = False
    error: Optional[str] = None
    url: Optional[str] = None
    status: int = 200


class AuthService:
    CREDENTIALS_PROVIDER = "credentials"
    PROVIDERS = (CREDENTIALS_PROVIDER,)

    def __init__(self, request, navigator=None):
        self.request = request
        self.navigator = navigator or RedirectNavigator()

    def resolve_redirect(self, redirect_to: Optional[str]) -> str:
        if redirect_to and url_has_allowed_host_and_scheme(
            redirect_to,
            allowed_hosts={self.request.get_host()},
            require_https=self.request.is_secure(),
        ):
            return redirect_to
        return settings.LOGIN_REDIRECT_URL

    def sign_in(self, provider: str, credentials: Mapping[str, Any], redirect: bool = True) -> Optional[SignInResult]:
        """
        Check credentials and open a session.

        With ``redirect`` the call navigates on success (and never returns)
        and raises ``AuthError`` on bad credentials. Without it, the outcome
        comes back as a ``SignInResult``.
        """
        if provider not in self.PROVIDERS:
            raise AuthError(AuthErrorType.CONFIGURATION, f"Unsupported sign-in provider: {provider}")

        target = self.resolve_redirect(credentials.get("redirectTo"))

        try:
            user = authenticate(
                self.request,
                email=credentials.get("email"),
                password=credentials.get("password"),
            )
        except DatabaseError as e:
            logger.exception(f"Credential check failed: {e}")
            raise AuthError(AuthErrorType.CALLBACK_ROUTE_ERROR, str(e)) from e

        if user is None:
            logger.warning("Sign-in rejected: invalid credentials")
            if redirect:
                raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN)
            return SignInResult(error=AuthErrorType.CREDENTIALS_SIGNIN, status=401)

        login(self.request, user)
        logger.info(f"User {user.pk} signed in")

        if redirect:
            self.navigator.redirect_to(target)
        return SignInResult(ok=True, url=target)

    def sign_out(self):
        user_id = getattr(self.request.user, "pk", None)
        logout(self.request)
        if user_id:
            logger.info(f"User {user_id} signed out")
        self.navigator.redirect_to(settings.LOGOUT_REDIRECT_URL)
