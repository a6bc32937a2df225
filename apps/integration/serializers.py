"""Serializers that read entity attributes for field-by-field DTO mapping."""

from __future__ import annotations

from rest_framework import serializers


class PersonNameSerializer(serializers.Serializer):
    """
    Read the display names of a Person.

    The identifier is not serialized; DTOs copy it from the entity as is.
    """

    full_name = serializers.CharField(read_only=True)
    short_name = serializers.CharField(read_only=True)
