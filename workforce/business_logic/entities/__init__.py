# workforce/business_logic/entities/__init__.py
from .salary_entity import Salary
from .payable import Payable
from .person_entity import PersonEntity
from .employee_entity import EmployeeEntity
from .manager_entity import ManagerEntity
from .intern_entity import InternEntity
from .consultant_entity import ConsultantEntity
from .lead_entity import LeadEntity
from .person_like import PersonLike
__all__ = [
    "Salary", "Payable", "PersonEntity", "EmployeeEntity",
    "ManagerEntity", "InternEntity", "ConsultantEntity", "LeadEntity", "PersonLike",
]
