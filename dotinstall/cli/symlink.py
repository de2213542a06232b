"""Symlink Typer app factory - link a dotfile into place."""

import sys
from typing import Annotated

import typer

from dotinstall.api.install.cmd_symlink import cmd_symlink
from dotinstall.cli._handle_stage_result import _handle_stage_result


def symlink() -> typer.Typer:
    """Create and configure the symlink Typer app."""
    app = typer.Typer(
        name="symlink",
        help="Link a file from the dotfiles repository into place",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        existing: Annotated[str | None, typer.Argument(help="Path the link points to (e.g. ~/dotfiles/vimrc)")] = None,
        new: Annotated[str | None, typer.Argument(help="Path of the link (e.g. ~/.vimrc)")] = None,
    ) -> None:
        """Make NEW a symbolic link to EXISTING.

        Nothing happens when NEW already links to EXISTING. Any other entry
        at NEW is replaced only after answering y to the overwrite prompt.
        """
        if existing is None or new is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        # stdout carries the structured output, so the question goes to stderr
        _handle_stage_result(cmd_symlink, ctx)(existing, new, stdout=sys.stderr)

    return app
