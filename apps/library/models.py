"""Models for the library application."""

from __future__ import annotations

from django.core.validators import validate_email
from django.db import models

from core.models import Persisted


class Book(Persisted):
    """A published book."""

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    class Meta:
        """Meta options for Book model."""

        db_table = "books"
        ordering = ["title"]

    def __str__(self) -> str:
        """Return string representation."""
        return self.title


class Tag(Persisted):
    """Free-form label attached to library items."""

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")

    class Meta:
        """Meta options for Tag model."""

        db_table = "tags"
        ordering = ["name"]

    def __str__(self) -> str:
        """Return string representation."""
        return self.name


class Author(Persisted):
    """
    Author of one or more books.

    The e-mail address identifies the author and must be unique.
    """

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    books = models.ManyToManyField(Book, blank=True, related_name="authors")

    class Meta:
        """Meta options for Author model."""

        db_table = "authors"
        ordering = ["last_name", "first_name"]

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def create(cls, first_name: str, last_name: str, email: str) -> Author:
        """
        Build an unsaved author, validating the e-mail address.

        Raises:
            ValidationError: If the e-mail address is malformed.
        """
        validate_email(email)
        return cls(first_name=first_name, last_name=last_name, email=email)
