"""
Live activation list shown under each license on the product page.

The component is bound to one license and one viewer. It holds the
current rows, refreshes them on demand (page render and polling) and
deletes rows on the owner's request. Rows it has deleted are suppressed
from every later refresh, so a read that raced the delete cannot bring
them back. Callers seed the set with ids deleted in earlier requests of
the same session.
"""
import uuid
from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Union

from django.conf import settings
from django.template.loader import render_to_string

from activations.application.commands.delete_activation import DeleteActivationCommand
from activations.application.handlers.delete_activation_handler import (
    DeleteActivationHandler,
)
from activations.application.handlers.list_activations_handler import (
    ListActivationsHandler,
)
from activations.application.queries.list_activations import ListActivationsQuery
from activations.domain.activation import Activation
from activations.ports.activation_repository import ActivationRepository
from core.domain.exceptions import (
    AccessDeniedError,
    LicenseAccessDeniedError,
    LicenseNotFoundError,
    NotFoundError,
)
from licenses.ports.license_repository import LicenseRepository

TEMPLATE_NAME = "activations/activation_list.html"


@dataclass(frozen=True)
class Deleted:
    """The activation was removed."""

    activation: Activation
    kind: str = "deleted"


@dataclass(frozen=True)
class Rejected:
    """The delete was refused; nothing was mutated."""

    reason: str
    code: str
    unauthorized: bool = False
    license_level: bool = False
    kind: str = "rejected"

    @property
    def status_code(self) -> int:
        return 403 if self.unauthorized else 404


DeleteOutcome = Union[Deleted, Rejected]


class ActivationListComponent:
    """Activation rows of one license as seen by its owner."""

    def __init__(
        self,
        license_id: uuid.UUID,
        viewer_id: Optional[int],
        license_repository: LicenseRepository,
        activation_repository: ActivationRepository,
        deleted_ids: Iterable[uuid.UUID] = (),
    ):
        self.license_id = license_id
        self.viewer_id = viewer_id
        self.activations: List[Activation] = []
        self.deleted_ids: Set[uuid.UUID] = set(deleted_ids)
        self._list_handler = ListActivationsHandler(license_repository, activation_repository)
        self._delete_handler = DeleteActivationHandler(license_repository, activation_repository)

    async def refresh(self) -> List[Activation]:
        """
        Re-fetch the ordered activations, dropping rows deleted here.

        Raises:
            LicenseNotFoundError: If the license does not exist
            LicenseAccessDeniedError: If the viewer does not own the license
        """
        activations = await self._list_handler.handle(
            ListActivationsQuery(viewer_id=self.viewer_id, license_id=self.license_id)
        )
        self.activations = [a for a in activations if a.id not in self.deleted_ids]
        return self.activations

    async def delete(self, activation_id: uuid.UUID) -> DeleteOutcome:
        """
        Delete one activation and re-fetch the list.

        Returns:
            Deleted on success, Rejected with the error code otherwise
        """
        try:
            activation = await self._delete_handler.handle(
                DeleteActivationCommand(
                    viewer_id=self.viewer_id,
                    license_id=self.license_id,
                    activation_id=activation_id,
                )
            )
        except (NotFoundError, AccessDeniedError) as e:
            rejected = Rejected(
                reason=e.message,
                code=e.code,
                unauthorized=isinstance(e, AccessDeniedError),
                license_level=isinstance(e, (LicenseNotFoundError, LicenseAccessDeniedError)),
            )
            # The license is readable, so show the rows as they stand.
            if not rejected.license_level:
                await self.refresh()
            return rejected

        self.deleted_ids.add(activation.id)
        self.activations = [a for a in self.activations if a.id != activation.id]
        await self.refresh()
        return Deleted(activation=activation)

    def get_context(self, rejected: Optional[Rejected] = None) -> dict:
        return {
            "license_id": self.license_id,
            "activations": self.activations,
            "poll_interval_ms": settings.ACTIVATIONS_POLL_INTERVAL_SECONDS * 1000,
            "rejected": rejected,
            "show_rows": not (rejected and rejected.license_level),
        }

    def render(self, request=None, rejected: Optional[Rejected] = None) -> str:
        """Render the list fragment. Must be called from sync code."""
        return render_to_string(TEMPLATE_NAME, self.get_context(rejected), request=request)
