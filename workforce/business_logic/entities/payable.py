# workforce/business_logic/entities/payable.py
from abc import ABC, abstractmethod


class Payable(ABC):
    """Capability of anything that carries a pay amount."""

    @abstractmethod
    def get_pay(self) -> float:
        pass
