"""Append Typer app factory - add a snippet to a file once."""

from typing import Annotated

import typer

from dotinstall.api.install.cmd_append import cmd_append
from dotinstall.cli._handle_stage_result import _handle_stage_result


def append() -> typer.Typer:
    """Create and configure the append Typer app."""
    app = typer.Typer(
        name="append",
        help="Append a snippet to a file unless it is already there",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        file: Annotated[str | None, typer.Argument(help="File to append to (created if missing)")] = None,
        content: Annotated[str | None, typer.Argument(help="Text to append")] = None,
    ) -> None:
        """Append CONTENT to FILE unless FILE already contains it."""
        if file is None or content is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        _handle_stage_result(cmd_append, ctx)(file, content)

    return app
