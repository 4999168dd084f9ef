# workforce/business_logic/entities/lead_entity.py
from typing import Optional, Union, TYPE_CHECKING
import logging

from .consultant_entity import ConsultantEntity
from .manager_entity import ManagerEntity
from .payable import Payable
from .salary_entity import Salary
from workforce.constants import PersonKind

if TYPE_CHECKING:
    from workforce.business_logic.person_registry import PersonRegistry

logger = logging.getLogger(__name__)

class LeadEntity(Payable):
    """
    A manager who also carries a consultancy affiliation.

    Built from two named parts instead of two base classes: `manager` holds the
    person, pay and team data (and is the only part the registry counts), and
    `consultant` holds the firm. Person and pay operations forward to the
    manager part; show() renders both parts together.
    """
    kind = PersonKind.LEAD

    def __init__(self,
                 name: str,
                 age: int,
                 employee_id: int,
                 salary: Union[Salary, float],
                 team_size: int,
                 consultancy_firm: str,
                 *,
                 registry: 'PersonRegistry'):
        self.manager = ManagerEntity(name, age, employee_id, salary, team_size, registry=registry)
        self.consultant = ConsultantEntity(consultancy_firm, narrator=registry.narrator)
        self._registry = registry
        self._released = False
        self._registry.announce(f"[Lead] init for {self.get_name()}")

    @classmethod
    def copy_of(cls, other: 'LeadEntity') -> 'LeadEntity':
        """Copies both parts; the manager part goes through the person copy path."""
        if not isinstance(other, cls):
            raise TypeError(f"Cannot copy {type(other).__name__} into {cls.__name__}")
        clone = cls.__new__(cls)
        clone._registry = other._registry
        clone._released = False
        clone.manager = ManagerEntity.copy_of(other.manager)
        clone.consultant = ConsultantEntity(other.consultancy_firm, narrator=other._registry.narrator)
        clone._registry.announce(f"[Lead] copy init for {clone.get_name()}")
        return clone

    def __copy__(self) -> 'LeadEntity':
        return type(self).copy_of(self)

    def __deepcopy__(self, memo: dict) -> 'LeadEntity':
        return type(self).copy_of(self)

    # --- Forwarded to the manager part ---
    @property
    def name(self) -> str:
        return self.manager.name

    def get_name(self) -> str:
        return self.manager.get_name()

    @property
    def age(self) -> int:
        return self.manager.age

    def set_age(self, age: int) -> 'LeadEntity':
        self.manager.set_age(age)
        return self

    def introduce(self, mood: Optional[str] = None) -> str:
        return self.manager.introduce(mood)

    @property
    def employee_id(self) -> int:
        return self.manager.employee_id

    @property
    def team_size(self) -> int:
        return self.manager.team_size

    @property
    def salary(self) -> Salary:
        return self.manager.salary

    def set_salary(self, salary: Union[Salary, float]) -> None:
        self.manager.set_salary(salary)

    def get_pay(self) -> float:
        return self.manager.get_pay()

    # --- Forwarded to the consultant part ---
    @property
    def consultancy_firm(self) -> str:
        return self.consultant.consultancy_firm

    def show_consultancy(self) -> str:
        return self.consultant.show_consultancy()

    def show(self) -> str:
        return f"[Lead.show] {self.get_name()} is a lead at {self.consultancy_firm}"

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> bool:
        """Releases the consultant part, then the manager part."""
        if self._released:
            logger.warning(f"Lead '{self.get_name()}' was already released.")
            return False
        self._released = True
        self._registry.announce("[Lead] released")
        self.consultant.release()
        self.manager.release()
        return True

    def __enter__(self) -> 'LeadEntity':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.release()
        return False
