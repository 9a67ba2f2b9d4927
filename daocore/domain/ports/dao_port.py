"""
Ports (interfaces) for the two repository contracts.

ICrdDao:         create / read / delete against a backend that assigns ids.
ICrudRepository: upsert-style save plus id-keyed lookup and removal.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, TypeVar

EntityT = TypeVar("EntityT")
IdT = TypeVar("IdT")


class ICrdDao(ABC, Generic[EntityT, IdT]):
    @abstractmethod
    def create(self, entity: EntityT) -> EntityT:
        """Create *entity* in the backend and return it as stored."""
        ...

    @abstractmethod
    def find_by_id(self, id: IdT) -> EntityT:
        """Return the entity with the given id."""
        ...

    @abstractmethod
    def delete_by_id(self, id: IdT) -> EntityT:
        """Delete the entity and return its state immediately before deletion."""
        ...


class ICrudRepository(ABC, Generic[EntityT, IdT]):
    @abstractmethod
    def save(self, entity: EntityT) -> EntityT: ...

    @abstractmethod
    def save_all(self, entities: Iterable[EntityT]) -> list[EntityT]: ...

    @abstractmethod
    def exists_by_id(self, id: IdT) -> bool: ...

    @abstractmethod
    def find_by_id(self, id: IdT) -> Optional[EntityT]: ...

    @abstractmethod
    def find_all(self) -> list[EntityT]: ...

    @abstractmethod
    def count(self) -> int: ...

    @abstractmethod
    def delete_by_id(self, id: IdT) -> None: ...

    def find_all_by_id(self, ids: Iterable[IdT]) -> list[EntityT]:
        raise NotImplementedError("find_all_by_id is not supported")

    def delete(self, entity: EntityT) -> None:
        raise NotImplementedError("delete is not supported; use delete_by_id")

    def delete_all(self, entities: Optional[Iterable[EntityT]] = None) -> None:
        raise NotImplementedError("delete_all is not supported")
