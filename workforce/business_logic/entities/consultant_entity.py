# workforce/business_logic/entities/consultant_entity.py
import logging

from workforce.constants import DEFAULT_CONSULTANCY_FIRM
from workforce.presentation.console_narrator import ConsoleNarrator

logger = logging.getLogger(__name__)

class ConsultantEntity:
    """An outside affiliation. Not a person, so it is never counted by a registry."""

    def __init__(self, consultancy_firm: str = DEFAULT_CONSULTANCY_FIRM, *, narrator: ConsoleNarrator):
        if narrator is None:
            raise ValueError("narrator cannot be None")
        self._narrator = narrator
        self._consultancy_firm = consultancy_firm
        self._released = False
        self._narrator.say(f"[Consultant] init for {self._consultancy_firm}")

    @property
    def consultancy_firm(self) -> str:
        return self._consultancy_firm

    def show_consultancy(self) -> str:
        return f"Consultancy: {self._consultancy_firm}"

    def release(self) -> bool:
        if self._released:
            logger.warning(f"Consultant for '{self._consultancy_firm}' was already released.")
            return False
        self._released = True
        self._narrator.say("[Consultant] released")
        return True
