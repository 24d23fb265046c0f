"""Path-scoped caching for rendered view data."""

from django.conf import settings
from django.core.cache import cache
from functools import wraps
from typing import Any, Callable, Optional
import hashlib
import logging
import uuid

logger = logging.getLogger(__name__)


class PathCache:
    """
    Cache view data per URL path.

    Each path carries a version token; data keys embed it, so replacing the
    token in ``invalidate`` drops every variant (query string, page) of the
    path at once without enumerating keys.
    """

    VERSION_KEY = "viewcache:version:{path}"
    DATA_KEY = "viewcache:data:{digest}"

    def __init__(self, backend=None, timeout: Optional[int] = None):
        self.backend = backend or cache
        self.timeout = timeout if timeout is not None else getattr(settings, "VIEW_CACHE_TIMEOUT", 300)

    @staticmethod
    def normalize(path: str) -> str:
        return "/" + path.strip("/")

    def _version(self, path: str) -> str:
        key = self.VERSION_KEY.format(path=self.normalize(path))
        version = self.backend.get(key)
        if version is None:
            version = uuid.uuid4().hex
            self.backend.set(key, version, None)
        return version

    def make_key(self, path: str, variant: str = "") -> str:
        """Generate the data key for ``path`` at its current version."""
        key_data = f"{self.normalize(path)}:{self._version(path)}:{variant}"
        return self.DATA_KEY.format(digest=hashlib.md5(key_data.encode()).hexdigest())

    def get(self, path: str, variant: str = "") -> Any:
        return self.backend.get(self.make_key(path, variant))

    def set(self, path: str, value: Any, variant: str = "") -> None:
        self.backend.set(self.make_key(path, variant), value, self.timeout)

    def invalidate(self, path: str) -> None:
        normalized = self.normalize(path)
        self.backend.set(self.VERSION_KEY.format(path=normalized), uuid.uuid4().hex, None)
        logger.info(f"Invalidated cached views for {normalized}")


def cached_for_path(path: str, variant_from: Optional[Callable[..., str]] = None):
    """Decorator caching a function's result under ``path``."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            view_cache = PathCache()
            variant = variant_from(*args, **kwargs) if variant_from else ""

            result = view_cache.get(path, variant)
            if result is not None:
                return result

            result = func(*args, **kwargs)
            view_cache.set(path, result, variant)
            return result

        return wrapper
    return decorator
