#!/usr/bin/env python3

import argparse
import logging
import sys

from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .ai import Assistant, LLMClient
from .config import API_KEY_VAR, load_config, log_level_from_env
from .errors import ConfigurationError
from .loop import InteractionLoop


def configure_logging(level: int):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
            )
        ],
        force=True,
    )


def _report_missing_configuration(error: ConfigurationError):
    console = Console(stderr=True)
    console.print(f"[red]Error: {error}[/red]")
    console.print("[yellow]Please create a .env file with your OpenAI API key.[/yellow]")
    console.print(f"[dim]Example: {API_KEY_VAR}=your_api_key_here[/dim]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-shell",
        description=(
            "An interactive shell that runs your commands and answers questions "
            "in natural language."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_cli(argv: Optional[List[str]] = None) -> int:
    """
    Parses command-line arguments, loads the configuration and runs the shell.

    Args:
        argv: A list of strings representing the command-line arguments.
              If None, `sys.argv[1:]` is used automatically by `parse_args`.

    Returns:
        The exit status of the interactive session.
    """
    build_parser().parse_args(argv)
    configure_logging(log_level_from_env())

    try:
        config = load_config()
    except ConfigurationError as e:
        _report_missing_configuration(e)
        sys.exit(1)

    llm = LLMClient(config.provider_configs)
    assistant = Assistant(llm, config.model_id)
    return InteractionLoop(assistant).run()


def main():
    """The main entry point for the command-line interface, called by the `ai-shell` script."""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
