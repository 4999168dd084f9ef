# workforce/business_logic/employee_manager.py

from typing import Iterable, List, Union

from workforce.business_logic.entities import EmployeeEntity, LeadEntity, Payable, Salary
from workforce.business_logic.entities.salary_entity import format_amount
from workforce.presentation.console_narrator import ConsoleNarrator
import logging

logger = logging.getLogger(__name__)

class EmployeeManager:
    def __init__(self, narrator: ConsoleNarrator):
        """
        Initializes the EmployeeManager.
        :param narrator: Sink for the promotion narration.
        """
        if narrator is None: raise ValueError("narrator cannot be None")
        self.narrator = narrator

    def promote(self, employee: Union[EmployeeEntity, LeadEntity], raise_amount: float) -> Salary:
        """
        Raises an employee's salary by building a new Salary from the current one
        plus the raise, then assigning it. Returns the new salary.
        Amounts are not validated; a negative raise lowers the salary.
        """
        self.narrator.say(f"[promote] Promoting {employee.get_name()} by {format_amount(raise_amount)}")
        new_salary = employee.salary + Salary(raise_amount)
        employee.set_salary(new_salary)
        logger.info(f"Employee '{employee.get_name()}' (ID: {employee.employee_id}) promoted to {new_salary}.")
        return new_salary

    def payroll(self, payables: Iterable[Payable]) -> List[float]:
        """Current pay of each payable, in the order given."""
        pays = [payable.get_pay() for payable in payables]
        logger.debug(f"Payroll computed for {len(pays)} payables.")
        return pays

    def total_payroll(self, payables: Iterable[Payable]) -> Salary:
        total = Salary()
        for payable in payables:
            total = total + Salary(payable.get_pay())
        return total
