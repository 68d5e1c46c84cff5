"""
Activation API views.

JSON counterpart of the activation list fragment, for the owner of a
license:
- List a license's activations
- Delete one activation
"""

import uuid
from typing import Optional

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activations.application.commands.delete_activation import DeleteActivationCommand
from activations.application.dto.activation_dto import (
    ActivationDTO,
    DeleteActivationResponseDTO,
)
from activations.application.handlers.delete_activation_handler import (
    DeleteActivationHandler,
)
from activations.application.handlers.list_activations_handler import (
    ListActivationsHandler,
)
from activations.application.queries.list_activations import ListActivationsQuery
from activations.infrastructure.repositories.django_activation_repository import (
    DjangoActivationRepository,
)
from api.v1.activations.serializers import (
    ActivationSerializer,
    DeleteActivationResponseSerializer,
    ErrorResponseSerializer,
)
from core.domain.exceptions import DomainException
from core.instrumentation import Status, StatusCode, get_tracer
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository

# Initialize repositories (in production, use DI container)
_license_repo = DjangoLicenseRepository()
_activation_repo = DjangoActivationRepository()

tracer = get_tracer(__name__)


class ActivationListView(APIView):
    """View for listing a license's activations."""

    @extend_schema(
        operation_id="list_activations",
        summary="List Activations",
        description=(
            "List the activations of a license owned by the signed-in user, "
            "oldest first."
        ),
        tags=["Activations"],
        responses={
            200: ActivationSerializer(many=True),
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def get(self, request: Request, license_id: uuid.UUID) -> Response:
        """List activations of a license."""
        return async_to_sync(self._handle_list)(request.user.id, license_id)

    async def _handle_list(self, viewer_id: Optional[int], license_id: uuid.UUID) -> Response:
        """Async handler for list activations."""
        with tracer.start_as_current_span("list_activations") as span:
            span.set_attribute("operation", "list_activations")
            span.set_attribute("license.id", str(license_id))

            handler = ListActivationsHandler(
                license_repository=_license_repo,
                activation_repository=_activation_repo,
            )
            try:
                activations = await handler.handle(
                    ListActivationsQuery(viewer_id=viewer_id, license_id=license_id)
                )
            except DomainException as e:
                span.set_attribute("error", e.code)
                span.set_status(Status(StatusCode.ERROR, e.message))
                raise

            serializer = ActivationSerializer(
                [ActivationDTO.from_entity(a) for a in activations], many=True
            )
            span.set_attribute("activations.count", len(activations))
            span.set_status(Status(StatusCode.OK))
            return Response(serializer.data, status=status.HTTP_200_OK)


class ActivationDetailView(APIView):
    """View for deleting one activation."""

    @extend_schema(
        operation_id="delete_activation",
        summary="Delete Activation",
        description=(
            "Permanently remove an activation from a license owned by the "
            "signed-in user. Deleting the same activation twice returns 404."
        ),
        tags=["Activations"],
        responses={
            200: DeleteActivationResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def delete(
        self, request: Request, license_id: uuid.UUID, activation_id: uuid.UUID
    ) -> Response:
        """Delete an activation."""
        return async_to_sync(self._handle_delete)(request.user.id, license_id, activation_id)

    async def _handle_delete(
        self, viewer_id: Optional[int], license_id: uuid.UUID, activation_id: uuid.UUID
    ) -> Response:
        """Async handler for delete activation."""
        with tracer.start_as_current_span("delete_activation") as span:
            span.set_attribute("operation", "delete_activation")
            span.set_attribute("license.id", str(license_id))
            span.set_attribute("activation.id", str(activation_id))

            handler = DeleteActivationHandler(
                license_repository=_license_repo,
                activation_repository=_activation_repo,
            )
            try:
                await handler.handle(
                    DeleteActivationCommand(
                        viewer_id=viewer_id,
                        license_id=license_id,
                        activation_id=activation_id,
                    )
                )
            except DomainException as e:
                span.set_attribute("error", e.code)
                span.set_status(Status(StatusCode.ERROR, e.message))
                raise

            span.set_status(Status(StatusCode.OK))
            serializer = DeleteActivationResponseSerializer(DeleteActivationResponseDTO())
            return Response(serializer.data, status=status.HTTP_200_OK)
