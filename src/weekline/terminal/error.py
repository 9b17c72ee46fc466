# SPDX-License-Identifier: MIT

from typing import NoReturn

import typer
from rich.console import Console


def exit_with_error(error: Exception | str) -> NoReturn:
    Console(stderr=True).print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)
