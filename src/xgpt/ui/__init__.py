"""Terminal presentation for xgpt."""

from .console import ChatConsole
from .formatting import render_markdown

__all__ = ["ChatConsole", "render_markdown"]
