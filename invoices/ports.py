from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, NoReturn, Optional, Protocol

if TYPE_CHECKING:
    from .auth_services import SignInResult


class ViewCache(Protocol):
    def invalidate(self, path: str) -> None:
        """Mark every cached variant of ``path`` stale."""
        ...


class Navigator(Protocol):
    def redirect_to(self, path: str) -> NoReturn: ...


class AuthGateway(Protocol):
    def sign_in(
        self,
        provider: str,
        credentials: Mapping[str, Any],
        redirect: bool = True,
    ) -> Optional["SignInResult"]: ...

    def sign_out(self) -> NoReturn: ...
