"""Create the main Typer CLI app."""

import typer

from dotinstall.api.config.DotinstallConfig import DotinstallConfig
from dotinstall.cli.append import append
from dotinstall.cli.config import config
from dotinstall.cli.symlink import symlink
from dotinstall.logging_config import setup_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Link dotfiles into place and append shell-init snippets",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(symlink(), name="symlink")
    app.add_typer(append(), name="append")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str | None = typer.Option(None, "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display is not None and display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # A broken config must not block the commands; config show reports it
        try:
            cfg = DotinstallConfig.load()
        except ValueError as e:
            typer.echo(f"Warning: {e}; using defaults", err=True)
            cfg = DotinstallConfig()
        setup_logging(cfg)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display or cfg.display.format

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
