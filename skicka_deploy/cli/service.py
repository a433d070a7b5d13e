"""Service Typer app factory."""

import typer

from skicka_deploy.api.service.cmd_install import cmd_install
from skicka_deploy.api.service.cmd_render import cmd_render
from skicka_deploy.api.service.cmd_start import cmd_start
from skicka_deploy.api.service.cmd_status import cmd_status
from skicka_deploy.api.service.cmd_stop import cmd_stop
from skicka_deploy.api.service.cmd_uninstall import cmd_uninstall
from skicka_deploy.cli._handle_stage_result import _handle_stage_result


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="Compile and manage the skicka systemd unit",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="render")
    def render_cmd() -> None:
        """Show the unit, start script and argv without installing."""
        _handle_stage_result(cmd_render)()

    @app.command(name="install")
    def install_cmd() -> None:
        """Install and enable the unit."""
        _handle_stage_result(cmd_install)()

    @app.command(name="uninstall")
    def uninstall_cmd() -> None:
        """Stop, disable and remove the unit."""
        _handle_stage_result(cmd_uninstall)()

    @app.command(name="start")
    def start_cmd() -> None:
        """Start the unit."""
        _handle_stage_result(cmd_start)()

    @app.command(name="stop")
    def stop_cmd() -> None:
        """Stop the unit."""
        _handle_stage_result(cmd_stop)()

    @app.command(name="status")
    def status_cmd() -> None:
        """Check unit status."""
        _handle_stage_result(cmd_status)()

    return app
