"""
Entity Stores

In-memory keyed stores for games and rooms. Each entity has its own lock
so a whole read-validate-mutate sequence on one id is atomic while
different ids never wait on each other.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Generic, Iterator, List, Tuple, Type, TypeVar

from ..exceptions import NotFound, RoomNotFound, SessionNotFound
from ..models.game import GameSession
from ..models.room import Room

T = TypeVar('T')


class EntityStore(Generic[T]):
    """Mapping of id -> entity with per-entity locking."""

    not_found: Type[NotFound] = NotFound

    def __init__(self):
        self._guard = threading.Lock()
        self._entries: Dict[str, Tuple[T, threading.RLock]] = {}

    def add(self, entity_id: str, entity: T) -> T:
        with self._guard:
            if entity_id in self._entries:
                raise KeyError(f"Duplicate id {entity_id}")
            self._entries[entity_id] = (entity, threading.RLock())
        return entity

    @contextmanager
    def locked(self, entity_id: str) -> Iterator[T]:
        """
        Yield the entity with its lock held.

        Raises the store's ``not_found`` error if the id is unknown or the
        entity was removed while waiting for the lock.
        """
        with self._guard:
            entry = self._entries.get(entity_id)
        if entry is None:
            raise self.not_found(entity_id)

        entity, lock = entry
        with lock:
            with self._guard:
                if self._entries.get(entity_id) is not entry:
                    raise self.not_found(entity_id)
            yield entity

    def remove(self, entity_id: str) -> bool:
        """Drop an entity; returns False if it was already gone."""
        with self._guard:
            entry = self._entries.pop(entity_id, None)
        if entry is None:
            return False
        # Wait for any in-flight mutation on this entity to finish
        with entry[1]:
            return True

    def ids(self) -> List[str]:
        with self._guard:
            return list(self._entries)

    def __contains__(self, entity_id) -> bool:
        with self._guard:
            return entity_id in self._entries

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)


class SessionStore(EntityStore[GameSession]):
    not_found = SessionNotFound


class RoomStore(EntityStore[Room]):
    not_found = RoomNotFound
