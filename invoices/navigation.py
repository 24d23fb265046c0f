"""Terminal navigation for actions.

``redirect_to`` never returns: it raises ``NavigationRedirect`` and the
error-handling middleware answers the request with a 302.
"""
import logging

logger = logging.getLogger(__name__)


class NavigationRedirect(Exception):
    def __init__(self, url: str):
        self.url = url
        super().__init__(url)


class RedirectNavigator:
    def redirect_to(self, path: str):
        logger.debug(f"Redirecting to {path}")
        raise NavigationRedirect(path)
