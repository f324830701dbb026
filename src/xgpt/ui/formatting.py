"""Text formatting utilities for the terminal.

Hides the details of markdown rendering.
"""

from rich.markdown import Markdown

from .config import CODE_THEME


def render_markdown(text: str) -> Markdown:
    """Render an assistant reply as terminal markdown."""
    return Markdown(text, code_theme=CODE_THEME)
