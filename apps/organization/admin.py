"""Admin configuration for organization app."""

from django.contrib import admin

from .models import Person, PhoneAddress, StreetAddress, VirtualAddress


@admin.register(Person)
class PersonAdmin(admin.ModelAdmin):
    """Admin configuration for Person model."""

    list_display = (
        "primary_name",
        "secondary_name",
        "treatment_pronoun",
        "revision",
        "modified",
    )
    search_fields = ("primary_name", "secondary_name", "first_name", "last_name")
    readonly_fields = ("primary_name", "revision", "register", "modified")
    filter_horizontal = ("phone_addresses", "street_addresses", "virtual_addresses")
    ordering = ("primary_name",)


@admin.register(PhoneAddress)
class PhoneAddressAdmin(admin.ModelAdmin):
    """Admin configuration for PhoneAddress model."""

    list_display = ("country_code", "area_code", "number")
    search_fields = ("number",)


@admin.register(StreetAddress)
class StreetAddressAdmin(admin.ModelAdmin):
    """Admin configuration for StreetAddress model."""

    list_display = ("number", "name", "city", "state", "postal_service_code")
    list_filter = ("state",)
    search_fields = ("name", "city", "postal_service_code")


@admin.register(VirtualAddress)
class VirtualAddressAdmin(admin.ModelAdmin):
    """Admin configuration for VirtualAddress model."""

    list_display = ("internet_address",)
    search_fields = ("internet_address",)
