"""
Transient state middleware.

Expires single-read session values after the request that follows the
one that stored them, whether or not that request read them.
"""

from typing import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse

from core.infrastructure.transient_state import TransientSessionSlot


class TransientStateMiddleware:
    """
    Ages TransientSessionSlot values once per request.

    Must run inside SessionMiddleware so the session is saved after
    expired keys are removed.
    """

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Age values on the way in, expire leftovers on the way out."""
        session = getattr(request, "session", None)
        if session is None or settings.SESSION_COOKIE_NAME not in request.COOKIES:
            return self.get_response(request)

        slot = TransientSessionSlot(session)
        due = slot.age()
        response = self.get_response(request)
        if due:
            slot.expire(due)
        return response
