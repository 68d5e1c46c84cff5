"""
Single-read session slot.

Values put into the slot live for exactly one following request. Taking
a value removes it from the session in the same step, and
TransientStateMiddleware drops whatever the following request did not
take, so a value is never replayed on later navigations.
"""

import logging
from typing import Any, Dict, Iterable, List

from django.contrib.sessions.backends.base import SessionBase

logger = logging.getLogger(__name__)

# Keys put during the current request, aged by the next one
FRESH_KEYS = "_transient_fresh"


class TransientSessionSlot:
    """
    Key-value slot backed by a Django session.

    Only JSON-serializable values may be stored (session serializer).
    Reads must happen in synchronous code because loading a database
    session touches the ORM.
    """

    def __init__(self, session: SessionBase):
        """Bind the slot to the session of the current request."""
        self._session = session

    def put(self, key: str, value: Any) -> None:
        """
        Store a value for the next request.

        Args:
            key: Slot key
            value: JSON-serializable value
        """
        self._session[key] = value
        fresh = list(self._session.get(FRESH_KEYS, []))
        if key not in fresh:
            fresh.append(key)
        self._session[FRESH_KEYS] = fresh
        logger.debug("Transient value stored", extra={"slot_key": key})

    def take(self, *keys: str) -> Dict[str, Any]:
        """
        Read and clear the given keys.

        Args:
            keys: Slot keys to consume

        Returns:
            Mapping of every requested key to its value (None if absent)
        """
        values = {key: self._session.pop(key, None) for key in keys}
        fresh = [key for key in self._session.get(FRESH_KEYS, []) if key not in keys]
        if fresh:
            self._session[FRESH_KEYS] = fresh
        else:
            self._session.pop(FRESH_KEYS, None)
        return values

    def age(self) -> List[str]:
        """
        Start a request: keys put by the previous request become due.

        Returns:
            Keys that must be expired when this request ends
        """
        return list(self._session.pop(FRESH_KEYS, []))

    def expire(self, keys: Iterable[str]) -> None:
        """Drop due keys that were neither taken nor put again."""
        fresh = self._session.get(FRESH_KEYS, [])
        for key in keys:
            if key in fresh:
                continue
            if self._session.pop(key, None) is not None:
                logger.debug("Transient value expired untaken", extra={"slot_key": key})
