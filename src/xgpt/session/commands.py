"""Classification of raw input lines into commands."""

from .models import Command, CommandKind, Mode

QUIT_COMMAND = "/quit"
NEW_SESSION_COMMANDS = {
    "/ns": Mode.STREAMING,
    "/nsm": Mode.RENDERED,
}


def parse_input(line: str) -> Command:
    """Classify one line of user input.

    Rules, in priority order: an empty line or ``/quit`` quits; ``/ns``
    and ``/nsm`` start a new session (optionally followed by a space and a
    first message); anything else is a chat message sent as typed.
    """
    if not line:
        return Command(CommandKind.QUIT, farewell="Exiting...")

    stripped = line.strip()
    if stripped == QUIT_COMMAND:
        return Command(CommandKind.QUIT, farewell="Quitting...")

    for token, mode in NEW_SESSION_COMMANDS.items():
        if line.startswith(f"{token} "):
            return Command(CommandKind.NEW_SESSION, text=line[len(token):].strip(), mode=mode)
        if stripped == token:
            return Command(CommandKind.NEW_SESSION, mode=mode)

    return Command(CommandKind.CHAT, text=line)
