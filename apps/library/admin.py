"""Admin configuration for library app."""

from django.contrib import admin

from .models import Author, Book, Tag


@admin.register(Author)
class AuthorAdmin(admin.ModelAdmin):
    """Admin configuration for Author model."""

    list_display = ("last_name", "first_name", "email", "modified")
    search_fields = ("first_name", "last_name", "email")
    filter_horizontal = ("books",)
    ordering = ("last_name", "first_name")


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    """Admin configuration for Book model."""

    list_display = ("title", "revision", "modified")
    search_fields = ("title",)


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    """Admin configuration for Tag model."""

    list_display = ("name", "description")
    search_fields = ("name",)
