# workforce/business_logic/entities/manager_entity.py
from typing import Optional, Union, TYPE_CHECKING

from .employee_entity import EmployeeEntity
from .salary_entity import Salary
from workforce.constants import PersonKind

if TYPE_CHECKING:
    from workforce.business_logic.person_registry import PersonRegistry


class ManagerEntity(EmployeeEntity):
    kind = PersonKind.MANAGER

    def __init__(self,
                 name: Optional[str] = None,
                 age: int = 0,
                 employee_id: int = 0,
                 salary: Union[Salary, float] = 0.0,
                 team_size: int = 0,
                 *,
                 registry: 'PersonRegistry'):
        super().__init__(name, age, employee_id, salary, registry=registry)
        self._team_size = team_size
        if name is None:
            self._registry.announce("[Manager] default init")
        else:
            self._registry.announce(f"[Manager] parameterized init for {name}")

    # copies and moves carry the team size without narrating
    def _copy_from(self, other: 'ManagerEntity') -> None:
        super()._copy_from(other)
        self._team_size = other._team_size

    def _move_from(self, other: 'ManagerEntity') -> None:
        super()._move_from(other)
        self._team_size = other._team_size

    @property
    def team_size(self) -> int:
        return self._team_size

    def show(self) -> str:
        return f"[Manager.show] {self.get_name()} manages team of {self._team_size}"

    def _teardown(self) -> None:
        self._registry.announce("[Manager] released")
        super()._teardown()
