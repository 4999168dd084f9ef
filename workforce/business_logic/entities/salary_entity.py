# workforce/business_logic/entities/salary_entity.py
from dataclasses import dataclass, field


def format_amount(amount: float) -> str:
    """Shortest general rendering: 5000.0 -> '5000', 7500.5 -> '7500.5'."""
    return f"{amount:g}"


@dataclass(frozen=True)
class Salary:
    amount: float = field(default=0.0)

    def get(self) -> float:
        return self.amount

    def __add__(self, other: "Salary") -> "Salary":
        if not isinstance(other, Salary):
            return NotImplemented
        return Salary(self.amount + other.amount)

    def __str__(self) -> str:
        return format_amount(self.amount)
