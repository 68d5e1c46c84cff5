"""
Serializers for activation API endpoints.
"""

from rest_framework import serializers


class ActivationSerializer(serializers.Serializer):
    """Serializer for ActivationDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    created_at = serializers.DateTimeField()


class DeleteActivationResponseSerializer(serializers.Serializer):
    """Serializer for DeleteActivationResponseDTO."""

    status = serializers.CharField()


class ErrorDetailSerializer(serializers.Serializer):
    code = serializers.CharField()
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    """Envelope used by every error response."""

    error = ErrorDetailSerializer()
