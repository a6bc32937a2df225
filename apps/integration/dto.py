"""
Data Transfer Object base class.

A DTO subclass names its entity class and the serializer used to read the
entity explicitly, instead of inferring them from its type parameters:

    >>> @dataclass
    ... class PersonNameDTO(DTO[Person]):
    ...     entity_class = Person
    ...     serializer_class = PersonNameSerializer
    ...
    ...     full_name: str | None = None
    ...     short_name: str | None = None

``convert`` first tries the subclass's ``custom_mapping``. When that is not
available (or fails) it copies the serializer's output onto a fresh DTO,
field by field.

See https://martinfowler.com/eaaCatalog/dataTransferObject.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Self

from apps.integration.errors import DTOInstantiationError
from core.collect import collect_one
from core.logging import get_logger
from core.result import Result

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rest_framework import serializers

logger = get_logger(__name__)


class DTO[E]:
    """
    Base class for Data Transfer Objects built from an entity of type ``E``.

    Attributes:
        entity_class: The entity class this DTO is built from.
        serializer_class: Serializer reading the DTO's fields off an entity.
    """

    entity_class: ClassVar[type[Any]]
    serializer_class: ClassVar[type[serializers.Serializer]]

    _id: Any = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Require concrete subclasses to declare their entity and serializer."""
        super().__init_subclass__(**kwargs)
        for attribute in ("entity_class", "serializer_class"):
            if not hasattr(cls, attribute):
                msg = f"{cls.__name__} must declare {attribute}"
                raise TypeError(msg)

    def convert(self, entity: E) -> Self | None:
        """
        Build a DTO from an entity.

        Args:
            entity: The entity to convert.

        Returns:
            The single DTO produced by ``custom_mapping`` (which may be None
            when the mapping rejects the entity), or a fresh DTO filled
            field by field from the serializer and carrying the entity's id.

        Raises:
            CollectionSizeError: If the custom mapping does not produce
                exactly one element.
        """
        custom = Result.of_supplier(lambda: self.custom_mapping(entity))
        if custom.is_present():
            return collect_one(custom.get())

        logger.debug(
            "Custom mapping unavailable, mapping fields with serializer",
            dto=type(self).__name__,
            serializer=self.serializer_class.__name__,
            reason=custom.failure,
        )
        target = self.new_instance()
        for field, value in self.serializer_class(entity).data.items():
            setattr(target, field, value)
        if (key := getattr(entity, "id", None)) is not None:
            target.id = key
        return target

    def custom_mapping(self, entity: E) -> Iterable[Self | None]:
        """
        Map an entity by hand instead of through the serializer.

        Override to return an iterable holding exactly one DTO (or None to
        reject the entity).
        """
        msg = f"{type(self).__name__} has no custom mapping"
        raise NotImplementedError(msg)

    def update(self, entity: E) -> E:
        """Update ``entity`` with the data held by this DTO and return it."""
        msg = f"{type(self).__name__} does not support updating entities"
        raise NotImplementedError(msg)

    def instantiate(self) -> E:
        """Build a new entity from this DTO."""
        raise DTOInstantiationError.for_entity(self.key_entity_class(), type(self))

    def persisted_key_entity(self) -> E:
        """
        Fetch the stored entity this DTO refers to, if any.

        Useful when converting nested DTOs that point at existing rows.
        """
        msg = f"{type(self).__name__} does not support fetching persisted entities"
        raise NotImplementedError(msg)

    @classmethod
    def key_entity_class(cls) -> type[E]:
        """Return the entity class this DTO is built from."""
        return cls.entity_class

    @classmethod
    def new_instance(cls) -> Self:
        """
        Create an empty DTO of this class.

        Raises:
            DTOInstantiationError: If the class needs constructor arguments.
        """
        try:
            return cls()
        except TypeError as e:
            logger.warning("DTO instantiation failed", dto=cls.__name__, error=e)
            raise DTOInstantiationError.for_dto(cls) from e

    @property
    def id(self) -> Any:
        """Unique identifier of the entity this DTO refers to, if any."""
        return self._id

    @id.setter
    def id(self, value: Any) -> None:
        if value is None:
            msg = "A DTO identifier can not be None"
            raise ValueError(msg)
        self._id = value
