"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from skicka_deploy.cli._create_app import _create_app
    from skicka_deploy.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    app = _create_app()
    try:
        # Without standalone mode, typer.Exit comes back as the return value
        rv = app(argv, standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except click.exceptions.Abort:
        typer.echo("Aborted", err=True)
        return 1
    return rv if isinstance(rv, int) else 0
