"""Tests for Django admin configurations."""

from __future__ import annotations

from django.contrib import admin

from apps.library.admin import AuthorAdmin, BookAdmin, TagAdmin
from apps.library.models import Author, Book, Tag
from apps.organization.admin import PersonAdmin, PhoneAddressAdmin, StreetAddressAdmin, VirtualAddressAdmin
from apps.organization.models import Person, PhoneAddress, StreetAddress, VirtualAddress


class TestAdminRegistration:
    """Tests for admin site registration."""

    def test_organization_models_registered(self) -> None:
        """Organization models should be registered with their admin classes."""
        assert isinstance(admin.site._registry[Person], PersonAdmin)
        assert isinstance(admin.site._registry[PhoneAddress], PhoneAddressAdmin)
        assert isinstance(admin.site._registry[StreetAddress], StreetAddressAdmin)
        assert isinstance(admin.site._registry[VirtualAddress], VirtualAddressAdmin)

    def test_library_models_registered(self) -> None:
        """Library models should be registered with their admin classes."""
        assert isinstance(admin.site._registry[Author], AuthorAdmin)
        assert isinstance(admin.site._registry[Book], BookAdmin)
        assert isinstance(admin.site._registry[Tag], TagAdmin)


class TestPersonAdmin:
    """Tests for PersonAdmin."""

    def test_revision_is_read_only(self) -> None:
        """The revision counter should never be edited by hand."""
        assert "revision" in PersonAdmin.readonly_fields
