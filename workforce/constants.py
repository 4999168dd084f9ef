# workforce/constants.py

from enum import Enum

# Defaults
DEFAULT_PERSON_NAME = "Unknown"
DEFAULT_CONSULTANCY_FIRM = "Independent"

# Demo banners
DEMO_START_BANNER = "----- OOP Concepts Demo Start -----"
DEMO_END_BANNER = "----- OOP Concepts Demo End -----"

class PersonKind(Enum):
    PERSON = "person"
    EMPLOYEE = "employee"
    MANAGER = "manager"
    LEAD = "lead"
    INTERN = "intern"

class ConstructionPath(Enum):
    DEFAULT = "default"
    PARAMETERIZED = "parameterized"
    COPY = "copy"
    MOVE = "move"
