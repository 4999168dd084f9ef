# workforce/business_logic/person_registry.py

from collections import Counter
from typing import Optional, TYPE_CHECKING

from workforce.constants import ConstructionPath
from workforce.presentation.console_narrator import ConsoleNarrator
import logging

if TYPE_CHECKING:
    from workforce.business_logic.entities.person_entity import PersonEntity

logger = logging.getLogger(__name__)

class PersonRegistry:
    def __init__(self, narrator: Optional[ConsoleNarrator] = None):
        """
        Owns the live-instance counter shared by every PersonEntity built with it.
        :param narrator: Sink for lifecycle narration. Defaults to a stdout ConsoleNarrator.
        """
        self.narrator = narrator if narrator is not None else ConsoleNarrator()
        self._population = 0
        self._constructed_by_path: Counter = Counter()

    @property
    def population(self) -> int:
        return self._population

    def constructed_by_path(self, path: ConstructionPath) -> int:
        """Number of constructions that went through the given path."""
        return self._constructed_by_path[path]

    def register(self, person: 'PersonEntity', path: ConstructionPath) -> int:
        if not isinstance(path, ConstructionPath):
            logger.error(f"Invalid construction path: {path}")
            raise ValueError(f"Invalid construction path: {path}")
        self._population += 1
        self._constructed_by_path[path] += 1
        logger.debug(f"Registered {person.kind.value} via {path.value} path. Population: {self._population}")
        return self._population

    def unregister(self, person: 'PersonEntity') -> int:
        if self._population <= 0:
            logger.error(f"Cannot unregister {type(person).__name__}: population is already {self._population}.")
            raise ValueError("population cannot go below zero")
        self._population -= 1
        logger.debug(f"Unregistered {person.kind.value}. Population: {self._population}")
        return self._population

    def announce(self, line: str) -> None:
        self.narrator.say(line)
