# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from weekline.logger import configure_logging
from weekline.terminal import category, configuration, event, task, view
from weekline.terminal.custom_typer import OrderedAliasedTyperGroup
from weekline.terminal.sheet_import import sheet_import
from weekline.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Weekline - Weekly project timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(task.app, name="task, t")
app.add_typer(event.app, name="event, e")
app.add_typer(category.app, name="category, ca")
app.add_typer(view.app, name="view, v")
app.command(name="import, i")(sheet_import)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every change to stderr",
        ),
    ] = False,
) -> None:
    """
    Weekline - Weekly project timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        configure_logging("DEBUG")


def run() -> None:
    app()
