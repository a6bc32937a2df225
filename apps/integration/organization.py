"""DTOs exposing the names of people."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.integration.dto import DTO
from apps.integration.serializers import PersonNameSerializer
from apps.organization.models import Person

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class PersonNameDTO(DTO[Person]):
    """Full and abbreviated name of a person, mapped field by field."""

    entity_class = Person
    serializer_class = PersonNameSerializer

    full_name: str | None = None
    short_name: str | None = None


@dataclass
class OnlyBobPersonNameDTO(DTO[Person]):
    """
    Name DTO that only accepts people whose first name is Bob.

    Converting anyone else yields None.
    """

    entity_class = Person
    serializer_class = PersonNameSerializer

    accepted_first_name = "Bob"

    full_name: str | None = None
    short_name: str | None = None

    def custom_mapping(self, entity: Person) -> Iterator[OnlyBobPersonNameDTO | None]:
        """Map Bob by hand; reject everyone else with None."""
        if entity.first_name != self.accepted_first_name:
            yield None
            return
        yield OnlyBobPersonNameDTO(full_name=entity.full_name, short_name=entity.short_name)
