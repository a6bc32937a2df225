"""Abstract base model shared by every persisted entity."""

from __future__ import annotations

import uuid
from typing import Any

from django.db import models


class Persisted(models.Model):
    """
    Base for every entity stored in the database.

    Provides a UUID primary key, a revision counter bumped on every update,
    and creation/modification timestamps.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    revision = models.PositiveIntegerField(default=0, editable=False)
    register = models.DateTimeField(auto_now_add=True)
    modified = models.DateTimeField(auto_now=True)

    class Meta:
        """Meta options for Persisted model."""

        abstract = True

    def save(self, *args: Any, **kwargs: Any) -> None:
        """Save the entity, bumping the revision when updating an existing row."""
        if not self._state.adding:
            self.revision += 1
        super().save(*args, **kwargs)
