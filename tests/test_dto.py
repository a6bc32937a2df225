"""Tests for DTO conversion."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

import pytest

from apps.integration.dto import DTO
from apps.integration.errors import DTOInstantiationError
from apps.integration.organization import OnlyBobPersonNameDTO, PersonNameDTO
from apps.integration.serializers import PersonNameSerializer
from apps.organization.models import Person
from core.collect import CollectionSizeError


@dataclass
class RequiredFieldDTO(DTO[Person]):
    """DTO that cannot be built without arguments."""

    entity_class = Person
    serializer_class = PersonNameSerializer

    full_name: str


class TestPersonNameDTO:
    """Tests for field-by-field conversion."""

    def test_convert_maps_names(self, erick: Person) -> None:
        """convert() should copy the serializer output onto a new DTO."""
        dto = PersonNameDTO().convert(erick)

        assert dto is not None
        assert dto.short_name == "Prof. Dr. E. M. Ferdinand"
        assert dto.full_name == "Prof. Dr. Erick Joshua de Martins Ferdinand"

    def test_convert_copies_id(self, erick: Person) -> None:
        """convert() should carry the entity's identifier unchanged."""
        dto = PersonNameDTO().convert(erick)

        assert dto is not None
        assert isinstance(dto.id, uuid.UUID)
        assert dto.id == erick.id

    def test_serializer_leaves_out_id(self, erick: Person) -> None:
        """The identifier should not go through the serializer."""
        data = PersonNameSerializer(erick).data

        assert set(data) == {"full_name", "short_name"}

    def test_convert_returns_new_instance(self, erick: Person) -> None:
        """convert() should not modify the DTO it is called on."""
        source = PersonNameDTO()

        dto = source.convert(erick)

        assert dto is not source
        assert source.full_name is None


class TestOnlyBobPersonNameDTO:
    """Tests for conversion through a custom mapping."""

    def test_convert_bob(self, bob: Person) -> None:
        """The custom mapping should accept Bob."""
        dto = OnlyBobPersonNameDTO().convert(bob)

        assert dto is not None
        assert dto.short_name == "Prof. Dr. B. M. Ferdinand"
        assert dto.full_name == "Prof. Dr. Bob Joshua de Martins Ferdinand"

    def test_convert_anyone_else_is_none(self, erick: Person) -> None:
        """The custom mapping should reject everyone but Bob."""
        assert OnlyBobPersonNameDTO().convert(erick) is None

    def test_custom_mapping_must_yield_one(self, bob: Person) -> None:
        """A custom mapping producing several DTOs should be refused."""

        @dataclass
        class TwiceDTO(DTO[Person]):
            entity_class = Person
            serializer_class = PersonNameSerializer

            full_name: str | None = None

            def custom_mapping(self, entity: Person) -> list[TwiceDTO]:
                return [TwiceDTO(entity.full_name), TwiceDTO(entity.full_name)]

        with pytest.raises(CollectionSizeError):
            TwiceDTO().convert(bob)


class TestDTOContract:
    """Tests for the DTO base class contract."""

    def test_key_entity_class(self) -> None:
        """key_entity_class() should return the declared entity class."""
        assert PersonNameDTO.key_entity_class() is Person

    def test_new_instance(self) -> None:
        """new_instance() should build an empty DTO."""
        dto = PersonNameDTO.new_instance()

        assert dto == PersonNameDTO()

    def test_new_instance_requires_no_argument_constructor(self) -> None:
        """new_instance() should fail for DTOs with required fields."""
        with pytest.raises(DTOInstantiationError, match="RequiredFieldDTO can not be instantiated") as exc_info:
            RequiredFieldDTO.new_instance()

        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_convert_without_no_argument_constructor(self, erick: Person) -> None:
        """Field-by-field conversion needs a no-argument constructor."""
        with pytest.raises(DTOInstantiationError):
            RequiredFieldDTO("placeholder").convert(erick)

    def test_instantiate_not_supported(self) -> None:
        """instantiate() should name the entity and DTO classes."""
        with pytest.raises(DTOInstantiationError) as exc_info:
            PersonNameDTO().instantiate()

        assert exc_info.value.message == (
            "Class Person can not be instantiated from DataTransferObject PersonNameDTO"
        )

    def test_update_not_supported(self, erick: Person) -> None:
        """update() should be left to subclasses."""
        with pytest.raises(NotImplementedError):
            PersonNameDTO().update(erick)

    def test_persisted_key_entity_not_supported(self) -> None:
        """persisted_key_entity() should be left to subclasses."""
        with pytest.raises(NotImplementedError):
            PersonNameDTO().persisted_key_entity()

    def test_id_setter(self) -> None:
        """The identifier can be set but not cleared."""
        dto = PersonNameDTO()

        dto.id = "abc"

        assert dto.id == "abc"
        with pytest.raises(ValueError, match="can not be None"):
            dto.id = None

    def test_subclass_must_declare_entity_class(self) -> None:
        """Subclasses without an entity class should be refused."""
        with pytest.raises(TypeError, match="entity_class"):

            class Incomplete(DTO[Person]):
                serializer_class = PersonNameSerializer

    def test_subclass_must_declare_serializer_class(self) -> None:
        """Subclasses without a serializer class should be refused."""
        with pytest.raises(TypeError, match="serializer_class"):

            class Incomplete(DTO[Person]):
                entity_class = Person
