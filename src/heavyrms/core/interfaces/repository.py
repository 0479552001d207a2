"""Abstract base class for read-only repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic read-only repository over an ordered stream of entities.

    Iteration restarts from the first entity on every call to ``__iter__``.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Lazily yield every entity in order."""
        pass

    def get(self, index: int) -> Optional[T]:
        """Retrieve the entity at position ``index``, or None past the end."""
        for position, entity in enumerate(self):
            if position == index:
                return entity
        return None

    def list(self) -> List[T]:
        """List all entities."""
        return [entity for entity in self]
