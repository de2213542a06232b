"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Typer runs in standalone mode, so usage errors and ``typer.Exit`` arrive
    here as ``SystemExit`` carrying the exit code.
    """
    import typer

    from dotinstall.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        app(argv, prog_name="dotinstall")
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
