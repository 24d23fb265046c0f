"""
Error Handling Middleware

Turns navigation signals raised by actions into redirects and logs every
other exception with its request id before Django's own 500 handling.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from django.http import Http404, HttpRequest, HttpResponse, HttpResponseRedirect
from django.core.exceptions import PermissionDenied

from ..navigation import NavigationRedirect

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware:
    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if not getattr(request, "request_id", None):
            request.request_id = str(uuid.uuid4())
        return self.get_response(request)

    def process_exception(self, request: HttpRequest, exc: Exception) -> Optional[HttpResponse]:
        if isinstance(exc, NavigationRedirect):
            return HttpResponseRedirect(exc.url)

        if isinstance(exc, (Http404, PermissionDenied)):
            return None

        request_id = getattr(request, "request_id", None) or str(uuid.uuid4())
        logger.exception(
            f"Unhandled exception [request_id={request_id}]: {exc}",
            extra={"request_id": request_id},
        )
        return None
