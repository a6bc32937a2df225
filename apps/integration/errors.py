"""Error types for DTO conversion."""

from __future__ import annotations


class DTOInstantiationError(RuntimeError):
    """Raised when an entity or DTO cannot be instantiated during conversion."""

    def __init__(self, message: str) -> None:
        """Initialize with error message."""
        self.message = message
        super().__init__(message)

    @classmethod
    def for_entity(cls, entity_class: type, dto_class: type) -> DTOInstantiationError:
        """Create an error for an entity that cannot be built from a DTO."""
        return cls(
            f"Class {entity_class.__name__} can not be instantiated "
            f"from DataTransferObject {dto_class.__name__}"
        )

    @classmethod
    def for_dto(cls, dto_class: type) -> DTOInstantiationError:
        """Create an error for a DTO class without a no-argument constructor."""
        return cls(f"DataTransferObject {dto_class.__name__} can not be instantiated without arguments")
