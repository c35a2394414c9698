"""Stage: an ordered collection of entities with its own update logic."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from trexrunner.core.entity import Entity
from trexrunner.core.types import Frame


class Stage(ABC):
    """A screen of the game; entities are drawn in the order they were added."""

    def __init__(self) -> None:
        self._entities: List[Entity] = []
        self.clip_frame: Optional[Frame] = None

    @abstractmethod
    def init(self) -> None:
        """Set the stage up before its first update."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the stage by ``dt`` milliseconds."""

    def add_entity(self, entity: Entity) -> None:
        self._entities.append(entity)

    def remove_entity(self, entity: Entity) -> None:
        """Remove the first occurrence of ``entity``; ValueError if absent."""
        self._entities.remove(entity)

    @property
    def entities(self) -> List[Entity]:
        """A copy of the entities in drawing order."""
        return list(self._entities)