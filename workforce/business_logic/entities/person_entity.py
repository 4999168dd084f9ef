# workforce/business_logic/entities/person_entity.py
from typing import Optional, TYPE_CHECKING
import logging

from workforce.constants import ConstructionPath, PersonKind, DEFAULT_PERSON_NAME

if TYPE_CHECKING:
    from workforce.business_logic.person_registry import PersonRegistry

logger = logging.getLogger(__name__)

class PersonEntity:
    """
    Base entity for everyone tracked by a PersonRegistry.

    Four construction paths exist, each registering exactly once:
      PersonEntity(registry=r)             -> default ("Unknown", age 0)
      PersonEntity(name, age, registry=r)  -> parameterized
      PersonEntity.copy_of(other)          -> copy (also copy.copy(other))
      PersonEntity.moved_from(other)       -> move (source is left with age 0 and no name)

    Subclasses hook into the copy/move/release paths through _copy_from,
    _move_from and _teardown, always calling super() so that the registry
    sees one event per object regardless of depth.
    """
    kind = PersonKind.PERSON

    def __init__(self, name: Optional[str] = None, age: int = 0, *, registry: 'PersonRegistry'):
        if registry is None:
            raise ValueError("registry cannot be None")
        self._registry = registry
        self._released = False
        if name is None:
            self._name = DEFAULT_PERSON_NAME
            self._age = 0
            self._enter(ConstructionPath.DEFAULT, f"[Person] default init for {self._name}")
        else:
            self._name = name
            self._age = age
            self._enter(ConstructionPath.PARAMETERIZED, f"[Person] parameterized init for {self._name}")

    @classmethod
    def copy_of(cls, other: 'PersonEntity') -> 'PersonEntity':
        if not isinstance(other, cls):
            raise TypeError(f"Cannot copy {type(other).__name__} into {cls.__name__}")
        clone = cls.__new__(cls)
        clone._copy_from(other)
        return clone

    @classmethod
    def moved_from(cls, other: 'PersonEntity') -> 'PersonEntity':
        if not isinstance(other, cls):
            raise TypeError(f"Cannot move {type(other).__name__} into {cls.__name__}")
        moved = cls.__new__(cls)
        moved._move_from(other)
        return moved

    def __copy__(self) -> 'PersonEntity':
        return type(self).copy_of(self)

    # the registry is shared, never duplicated
    def __deepcopy__(self, memo: dict) -> 'PersonEntity':
        return type(self).copy_of(self)

    def _enter(self, path: ConstructionPath, line: str) -> None:
        self._registry.register(self, path)
        self._registry.announce(line)

    def _copy_from(self, other: 'PersonEntity') -> None:
        self._registry = other._registry
        self._released = False
        self._name = other._name
        self._age = other._age
        self._enter(ConstructionPath.COPY, f"[Person] copy init for {self._name}")

    def _move_from(self, other: 'PersonEntity') -> None:
        self._registry = other._registry
        self._released = False
        self._name = other._name
        self._age = other._age
        other._name = ""
        other._age = 0
        self._enter(ConstructionPath.MOVE, "[Person] move init")

    # --- Encapsulated state ---
    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    def get_age(self) -> int:
        return self._age

    def set_age(self, age: int) -> 'PersonEntity':
        """Assigns the age and returns self so calls can be chained."""
        self._age = age
        return self

    @property
    def registry(self) -> 'PersonRegistry':
        return self._registry

    @property
    def released(self) -> bool:
        return self._released

    # --- Behaviour ---
    def introduce(self, mood: Optional[str] = None) -> str:
        if mood is None:
            return f"Hi, I'm {self._name}."
        return f"Hi, I'm {self._name}. I'm feeling {mood}."

    def show(self) -> str:
        return f"[Person.show] Name: {self._name}, Age: {self._age}"

    # --- Release ---
    def release(self) -> bool:
        """
        Removes this person from the registry population.
        Returns False if the person was already released.
        """
        if self._released:
            logger.warning(f"{type(self).__name__} '{self._name}' was already released.")
            return False
        self._released = True
        self._teardown()
        return True

    def _teardown(self) -> None:
        self._registry.unregister(self)
        self._registry.announce(f"[Person] released {self._name}")

    def __enter__(self) -> 'PersonEntity':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.release()
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, age={self._age!r})"
