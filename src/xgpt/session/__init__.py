from .commands import parse_input
from .controller import SessionController
from .models import Command, CommandKind, Mode, Session

__all__ = [
    "parse_input",
    "SessionController",
    "Command",
    "CommandKind",
    "Mode",
    "Session",
]
