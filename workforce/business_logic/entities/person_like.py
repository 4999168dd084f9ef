# workforce/business_logic/entities/person_like.py
from typing import Optional, Protocol, runtime_checkable

from workforce.constants import PersonKind


@runtime_checkable
class PersonLike(Protocol):
    """What PersonEntity and its subclasses share with the composed LeadEntity."""
    kind: PersonKind

    @property
    def name(self) -> str: ...

    @property
    def age(self) -> int: ...

    def get_name(self) -> str: ...

    def set_age(self, age: int) -> 'PersonLike': ...

    def introduce(self, mood: Optional[str] = None) -> str: ...

    def show(self) -> str: ...

    def release(self) -> bool: ...
