"""Main CLI application using Typer."""
import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..llm import CompletionClient, ConfigurationError, OpenAIProvider
from ..session import Session, SessionController
from ..ui import ChatConsole
from .config import Settings, load_settings

# Create Typer app
app = typer.Typer(
    name="xgpt",
    help="Chat with an OpenAI-compatible model from the terminal",
    add_completion=False,
)


def setup_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=verbose)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


async def run_chat(settings: Settings, console: Console) -> int:
    """Build the chat core from settings and run the interactive loop."""
    chat_console = ChatConsole(console)
    async with OpenAIProvider(
        api_key=settings.api_key,
        model=settings.model,
        base_url=settings.base_url,
    ) as provider:
        controller = SessionController(
            session=Session(mode=settings.mode),
            client=CompletionClient(provider, chat_console),
            console=chat_console,
        )
        return await controller.run(initial_prompt=settings.initial_prompt)


@app.command()
def chat(
    prompt: Optional[str] = typer.Argument(
        None,
        help="Initial prompt to start the conversation"
    ),
    apikey: Optional[str] = typer.Option(
        None,
        "--apikey",
        help="Your OpenAI API key"
    ),
    markdown: bool = typer.Option(
        False,
        "--markdown",
        help="Start in Markdown mode"
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use (overrides MODEL)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging"
    ),
):
    """Start an interactive chat session."""
    console = Console()
    setup_logging(verbose)

    try:
        settings = load_settings(
            apikey=apikey,
            model=model,
            markdown=markdown,
            initial_prompt=prompt,
            verbose=verbose,
        )
    except ConfigurationError as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=1)

    try:
        exit_code = asyncio.run(run_chat(settings, console))
    except KeyboardInterrupt:
        console.print("\nExiting...", style="dim")
        exit_code = 0
    raise typer.Exit(code=exit_code)


def main() -> None:
    """Console script entry point."""
    app()
