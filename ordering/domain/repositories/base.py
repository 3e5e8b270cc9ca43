"""Generic repository interface shared by all aggregates."""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract persistence capability set: create, update, find, find_all."""

    @abstractmethod
    async def create(self, entity: T) -> None:
        """Persist a new aggregate.

        Args:
            entity: Aggregate to insert
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Persist changes to an existing aggregate.

        Args:
            entity: Aggregate carrying the new state
        """
        pass

    @abstractmethod
    async def find(self, entity_id: str) -> T:
        """Retrieve an aggregate by identifier.

        Args:
            entity_id: Aggregate identifier

        Returns:
            The aggregate

        Raises:
            NotFoundError: If no aggregate matches
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Retrieve every stored aggregate.

        Returns:
            List of aggregates (empty when nothing is stored)
        """
        pass
