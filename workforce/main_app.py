# workforce/main_app.py
import sys
import logging
from contextlib import ExitStack
from typing import List, Optional

# --- Configuration and Constants ---
from workforce.config import configure_logging
from workforce.constants import DEMO_START_BANNER, DEMO_END_BANNER

# --- Business Logic Layer (BLL) ---
from workforce.business_logic.person_registry import PersonRegistry
from workforce.business_logic.employee_manager import EmployeeManager
from workforce.business_logic.entities import (EmployeeEntity, InternEntity, LeadEntity,
                                               ManagerEntity, Payable, PersonEntity, PersonLike, Salary)
from workforce.business_logic.entities.salary_entity import format_amount

# --- Presentation Layer ---
from workforce.presentation.console_narrator import ConsoleNarrator

logger = logging.getLogger(__name__)


def run_demo(narrator: Optional[ConsoleNarrator] = None) -> PersonRegistry:
    """
    Builds one of each entity, exercises each capability once and narrates it.
    Everything constructed is released in reverse order once the end banner is out.
    Returns the registry so callers can inspect the final population.
    """
    narrator = narrator if narrator is not None else ConsoleNarrator()
    registry = PersonRegistry(narrator)
    employee_manager = EmployeeManager(narrator)

    narrator.say(DEMO_START_BANNER)
    narrator.blank()

    with ExitStack() as stack:
        # Encapsulation, construction and chained setters
        p1 = stack.enter_context(PersonEntity("Alice", 30, registry=registry))
        narrator.say(p1.introduce())
        narrator.say(p1.introduce("happy"))
        p1.set_age(31).set_age(32)
        narrator.say(f"{p1.get_name()} is {p1.age} years old.")
        narrator.blank()

        # Operator overloading
        s1, s2 = Salary(5000), Salary(1500)
        s3 = s1 + s2
        narrator.say(f"Combined Salary: {s3}")

        # Single inheritance + Payable
        e1 = stack.enter_context(EmployeeEntity("Bob", 28, 1001, 7000.0, registry=registry))
        narrator.say(f"Employee pay: {format_amount(e1.get_pay())}")
        narrator.say(e1.show())

        employee_manager.promote(e1, 500.0)
        narrator.say(f"After promotion, pay: {format_amount(e1.get_pay())}")

        # Dispatch through a base-typed reference
        base_ref: PersonEntity = e1
        narrator.say(base_ref.show())

        # Multilevel
        m = stack.enter_context(ManagerEntity("Carol", 35, 2001, 15000.0, 5, registry=registry))
        narrator.say(m.show())

        # Manager + Consultant by composition
        lead = stack.enter_context(LeadEntity("Dave", 40, 3001, 20000.0, 10, "TopConsult", registry=registry))
        # Lead is not a PersonEntity but satisfies the same PersonLike surface
        lead_ref: PersonLike = lead
        narrator.say(lead_ref.show())
        narrator.say(lead.show_consultancy())

        # Hierarchical
        intern = stack.enter_context(InternEntity("Eve", 22, 4001, 1000.0, registry=registry))
        narrator.say(intern.show())

        # Dispatch through the Payable capability
        pays: List[Payable] = [e1, m, intern]
        narrator.blank()
        narrator.say("Payable objects:")
        for pay in employee_manager.payroll(pays):
            narrator.say(f" - Pay: {format_amount(pay)}")

        narrator.blank()
        narrator.say(f"Current Person population (live-instance counter): {registry.population}")

        narrator.blank()
        narrator.say(DEMO_END_BANNER)
        logger.info(f"Demo finished with population {registry.population}; releasing entities.")

    return registry


def main() -> int:
    configure_logging()
    logger.info("Workforce demo starting...")
    registry = run_demo()
    logger.info(f"Workforce demo finished. Remaining population: {registry.population}")
    return 0

if __name__ == '__main__':
    sys.exit(main())
