# workforce/business_logic/entities/intern_entity.py
from typing import Union, TYPE_CHECKING

from .employee_entity import EmployeeEntity
from .salary_entity import Salary
from workforce.constants import PersonKind

if TYPE_CHECKING:
    from workforce.business_logic.person_registry import PersonRegistry


class InternEntity(EmployeeEntity):
    kind = PersonKind.INTERN

    def __init__(self, name: str, age: int, employee_id: int, salary: Union[Salary, float], *,
                 registry: 'PersonRegistry'):
        super().__init__(name, age, employee_id, salary, registry=registry)
        self._registry.announce("[Intern] init")

    def show(self) -> str:
        return f"[Intern.show] {self.get_name()} is an intern."

    def _teardown(self) -> None:
        self._registry.announce("[Intern] released")
        super()._teardown()
