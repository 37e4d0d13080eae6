"""Main CLI application entry point."""

import typer

from oxdict.cli.commands import define

app = typer.Typer(
    name="oxdict",
    help="Look up definitions in the Oxford Dictionaries API",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Single command: `oxdict so far # idiom` looks up "so far"
app.command(name="define", help="Show the definitions of a word or phrase")(define.define)


if __name__ == "__main__":
    app()
