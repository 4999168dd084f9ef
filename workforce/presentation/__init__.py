# workforce/presentation/__init__.py
from .console_narrator import ConsoleNarrator, RecordingNarrator
