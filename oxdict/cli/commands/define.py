"""Definition lookup command."""

import asyncio
import logging

import typer

from oxdict.cli.utils.console import console, error_console, print_error
from oxdict.cli.utils.progress import create_lookup_spinner, lookup_description
from oxdict.errors import OxdictError
from oxdict.logging_config import setup_logging
from oxdict.services.definitions import render
from oxdict.services.oxford import OxfordClient

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"


def parse_expression(words: list[str]) -> str:
    """Join command-line words into one expression, dropping any # comment.

    Multi-word expressions like "so far" may be passed unquoted.
    """
    expression = " ".join(words)
    comment_index = expression.find(COMMENT_MARKER)
    if comment_index > -1:
        expression = expression[:comment_index]
    return expression.strip()


def define(
    words: list[str] = typer.Argument(
        ..., metavar="EXPRESSION...", help="Word or phrase to look up (text after # is ignored)"
    ),
) -> None:
    """Show the definitions of a word or phrase, grouped by part of speech."""
    setup_logging()

    expression = parse_expression(words)
    if not expression:
        error_console.print("[error]Nothing to look up: the expression is empty.[/]")
        raise typer.Exit(1)

    try:
        text = asyncio.run(_define(expression))
    except OxdictError as e:
        logger.debug(f"Lookup of '{expression}' failed: {e!r}")
        print_error(e)
        raise typer.Exit(1) from None

    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


async def _define(expression: str) -> str:
    """Fetch and render the definitions of an expression."""
    client = OxfordClient()

    with create_lookup_spinner() as progress:
        progress.add_task(lookup_description(expression), total=None)
        api_response = await client.fetch_entries(expression)

    return render(api_response, expression)
