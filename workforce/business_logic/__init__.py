# workforce/business_logic/__init__.py
from .person_registry import PersonRegistry
from .employee_manager import EmployeeManager
