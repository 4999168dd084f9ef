# workforce/business_logic/entities/employee_entity.py
from typing import Optional, Union, TYPE_CHECKING

from .person_entity import PersonEntity
from .payable import Payable
from .salary_entity import Salary
from workforce.constants import PersonKind

if TYPE_CHECKING:
    from workforce.business_logic.person_registry import PersonRegistry


def as_salary(value: Union[Salary, float]) -> Salary:
    return value if isinstance(value, Salary) else Salary(value)


class EmployeeEntity(PersonEntity, Payable):
    kind = PersonKind.EMPLOYEE

    def __init__(self,
                 name: Optional[str] = None,
                 age: int = 0,
                 employee_id: int = 0,
                 salary: Union[Salary, float] = 0.0,
                 *,
                 registry: 'PersonRegistry'):
        super().__init__(name, age, registry=registry)
        self._employee_id = employee_id
        self._salary = as_salary(salary)
        if name is None:
            self._registry.announce("[Employee] default init")
        else:
            self._registry.announce(f"[Employee] parameterized init for {name}")

    def _copy_from(self, other: 'EmployeeEntity') -> None:
        super()._copy_from(other)
        self._employee_id = other._employee_id
        self._salary = other._salary
        self._registry.announce("[Employee] copy init")

    def _move_from(self, other: 'EmployeeEntity') -> None:
        super()._move_from(other)
        self._employee_id = other._employee_id
        self._salary = other._salary

    @property
    def employee_id(self) -> int:
        return self._employee_id

    @property
    def salary(self) -> Salary:
        return self._salary

    def get_salary(self) -> Salary:
        return self._salary

    def set_salary(self, salary: Union[Salary, float]) -> None:
        self._salary = as_salary(salary)

    def get_pay(self) -> float:
        return self._salary.get()

    def show(self) -> str:
        return f"[Employee.show] {self.get_name()} (ID: {self._employee_id}), Salary: {self._salary}"

    def _teardown(self) -> None:
        self._registry.announce(f"[Employee] released {self.get_name()}")
        super()._teardown()
