"""King CLI - Personal task assistant."""

import logging
import sys

import click

from . import __version__
from .assistant import Assistant, build_assistant
from .config import Config, load_config
from .core.formatter import boxed
from .errors import ParseError, StorageError


def _setup_logging(config: Config, debug: bool) -> None:
    level = logging.DEBUG if debug else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def _open_session(config: Config) -> Assistant:
    try:
        return build_assistant(config)
    except StorageError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(__version__)
@click.pass_context
def main(ctx):
    """King - Personal task assistant CLI."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.option("--boxed", "use_box", is_flag=True, help="Frame replies in a chat box")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def chat(use_box: bool = False, debug: bool = False):
    """Interactive session; type 'bye' to quit."""
    config = load_config()
    _setup_logging(config, debug)
    use_box = use_box or config.boxed_replies

    assistant = _open_session(config)
    click.echo(assistant.greeting())

    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break
        if not line.strip():
            continue
        response = assistant.respond(line)
        click.echo(boxed(response.text) if use_box else response.text)
        if response.exit:
            break


@main.command()
@click.argument("command", nargs=-1, required=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def say(command: tuple[str, ...], debug: bool):
    """Run a single command, e.g. king say todo read book."""
    config = load_config()
    _setup_logging(config, debug)

    assistant = _open_session(config)
    line = " ".join(command)
    try:
        click.echo(assistant.parser.dispatch(line))
    except (StorageError, ParseError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def bot(debug: bool):
    """Run the Telegram bot."""
    config = load_config()
    _setup_logging(config, debug)

    try:
        from .telegram_bot import run_bot
        click.echo("Starting King Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot(config)
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except (ValueError, StorageError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()
