"""Models for the organization application."""

from __future__ import annotations

import re
from itertools import chain
from typing import TYPE_CHECKING

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator
from django.db import models

from core.models import Persisted

if TYPE_CHECKING:
    from collections.abc import Iterator

# North American Numbering Plan: NPA and exchange codes never start with 0 or 1
NANP_COUNTRY_CODE = "1"
NANP_AREA_CODE = re.compile(r"^[2-9]\d{2}$")
NANP_NUMBER = re.compile(r"^[2-9]\d{6}$")


class Address(Persisted):
    """
    Common interface for every kind of address an organization may have.

    Subclasses decide what makes them valid.
    """

    class Meta:
        """Meta options for Address model."""

        abstract = True

    def validate(self) -> bool:
        """Return whether this address is well formed."""
        raise NotImplementedError


class PhoneAddress(Address):
    """
    Telephone number following the North American Numbering Plan.

    Override ``validate`` for numbering plans of other countries.
    """

    country_code = models.CharField(max_length=4, help_text="Country calling code")
    area_code = models.CharField(max_length=4, help_text="Area code inside the country")
    number = models.CharField(max_length=12, help_text="Subscriber number")

    class Meta:
        """Meta options for PhoneAddress model."""

        db_table = "phone_addresses"
        verbose_name = "Phone Address"
        verbose_name_plural = "Phone Addresses"

    def __str__(self) -> str:
        """Return string representation."""
        return f"+{self.country_code} ({self.area_code}) {self.number}"

    def validate(self) -> bool:
        """Check the number against the NANP format (+1 NXX NXXXXXX)."""
        digits = re.sub(r"[\s\-.]", "", self.number)
        return (
            self.country_code.lstrip("+") == NANP_COUNTRY_CODE
            and NANP_AREA_CODE.match(self.area_code) is not None
            and NANP_NUMBER.match(digits) is not None
        )


class StreetAddress(Address):
    """Postal street address."""

    number = models.PositiveIntegerField(null=True, blank=True)
    name = models.CharField(max_length=255, help_text="Street name")
    city = models.CharField(max_length=100, help_text="City name, not abbreviated")
    state = models.CharField(max_length=10, help_text="State name abbreviation")
    postal_service_code = models.CharField(
        max_length=20,
        help_text="Postal code used by the country where the address exists",
    )

    class Meta:
        """Meta options for StreetAddress model."""

        db_table = "street_addresses"
        verbose_name = "Street Address"
        verbose_name_plural = "Street Addresses"

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.number} {self.name}, {self.city} {self.state} {self.postal_service_code}"

    def validate(self) -> bool:
        """
        Check that every part of the address is filled in.

        No geographic lookup is performed, so an existing-looking but
        fictional address still validates.
        """
        parts = (self.name, self.city, self.state, self.postal_service_code)
        return bool(self.number) and all(part.strip() for part in parts)


class VirtualAddress(Address):
    """E-mail address."""

    internet_address = models.CharField(max_length=254)

    class Meta:
        """Meta options for VirtualAddress model."""

        db_table = "virtual_addresses"
        verbose_name = "Virtual Address"
        verbose_name_plural = "Virtual Addresses"

    def __str__(self) -> str:
        """Return string representation."""
        return self.internet_address

    def validate(self) -> bool:
        """Check the address with Django's e-mail validator."""
        try:
            EmailValidator()(self.internet_address)
        except ValidationError:
            return False
        return True


class Organization(Persisted):
    """
    Attributes shared by every kind of organization.

    Concrete subclasses (such as Person) are stored in their own table
    joined to this one.
    """

    primary_name = models.CharField(max_length=255)
    secondary_name = models.CharField(max_length=255, blank=True, default="")
    phone_addresses = models.ManyToManyField(PhoneAddress, blank=True, related_name="organizations")
    street_addresses = models.ManyToManyField(StreetAddress, blank=True, related_name="organizations")
    virtual_addresses = models.ManyToManyField(VirtualAddress, blank=True, related_name="organizations")

    class Meta:
        """Meta options for Organization model."""

        db_table = "organizations"
        ordering = ["primary_name"]

    def __str__(self) -> str:
        """Return string representation."""
        return self.primary_name

    def addresses(self) -> Iterator[Address]:
        """Iterate over every address of this organization, of every kind."""
        return chain(
            self.phone_addresses.all(),
            self.street_addresses.all(),
            self.virtual_addresses.all(),
        )


class Person(Organization):
    """
    A person, with the name parts used to build display names.

    Attributes:
        treatment_pronoun: Form of address such as "Dr." or "Mrs.", optional.
        first_name: First name only, required.
        middle_name: Every name between the first and the last, optional.
        last_name: Last name only, required.
    """

    treatment_pronoun = models.CharField(max_length=50, blank=True, default="")
    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=255, blank=True, default="")
    last_name = models.CharField(max_length=100)

    class Meta:
        """Meta options for Person model."""

        db_table = "people"
        verbose_name = "Person"
        verbose_name_plural = "People"

    @classmethod
    def create(
        cls,
        social_name: str | None,
        treatment_pronoun: str | None,
        first_name: str,
        middle_name: str | None,
        last_name: str,
    ) -> Person:
        """
        Build an unsaved person from its name parts.

        Args:
            social_name: Name the person prefers to be known by, if any.
            treatment_pronoun: Form of address, if any.
            first_name: First name, required.
            middle_name: Middle names separated by spaces, if any.
            last_name: Last name, required.

        Returns:
            A new Person whose primary name is "First [Middle ]Last".

        Raises:
            ValueError: If the first or last name is missing.
        """
        if not first_name or not last_name:
            msg = "A person needs both a first and a last name"
            raise ValueError(msg)
        primary_name = " ".join(part for part in (first_name, middle_name, last_name) if part)
        return cls(
            primary_name=primary_name,
            secondary_name=social_name or "",
            treatment_pronoun=treatment_pronoun or "",
            first_name=first_name,
            middle_name=middle_name or "",
            last_name=last_name,
        )

    @property
    def full_name(self) -> str:
        """Return "[Pronoun ]First [Middle ]Last"."""
        parts = (self.treatment_pronoun, self.first_name, self.middle_name, self.last_name)
        return " ".join(part for part in parts if part)

    @property
    def first_and_last_name(self) -> str:
        """Return "[Pronoun ]First Last"."""
        parts = (self.treatment_pronoun, self.first_name, self.last_name)
        return " ".join(part for part in parts if part)

    @property
    def short_name(self) -> str:
        """
        Return the abbreviated name, "[Pronoun ]F. [M. ]Last".

        The pronoun is never abbreviated; of the middle names only the last
        one contributes an initial.
        """
        parts = [self.treatment_pronoun, f"{self.first_name[:1].upper()}."]
        if self.middle_name.strip():
            parts.append(f"{self.middle_name.split()[-1][:1].upper()}.")
        parts.append(self.last_name)
        return " ".join(part for part in parts if part)
