"""
Activation ids the viewer deleted during this session.

Every activation list built for the viewer filters these ids out, so a
list read that raced a delete in another request cannot show the row
again.
"""

import uuid
from typing import Set

from django.contrib.sessions.backends.base import SessionBase

RECENTLY_DELETED_KEY = "recently_deleted_activations"
MAX_REMEMBERED = 100


class RecentlyDeletedActivations:
    """Bounded set of deleted activation ids kept in the session."""

    def __init__(self, session: SessionBase):
        self._session = session

    def add(self, activation_id: uuid.UUID) -> None:
        remembered = list(self._session.get(RECENTLY_DELETED_KEY, []))
        value = str(activation_id)
        if value not in remembered:
            remembered.append(value)
        self._session[RECENTLY_DELETED_KEY] = remembered[-MAX_REMEMBERED:]

    def ids(self) -> Set[uuid.UUID]:
        return {uuid.UUID(value) for value in self._session.get(RECENTLY_DELETED_KEY, [])}
