"""Build Typer app factory."""

import typer

from skicka_deploy.api.build.cmd_build import cmd_build
from skicka_deploy.cli._handle_stage_result import _handle_stage_result


def build() -> typer.Typer:
    """Create and configure the build Typer app."""
    app = typer.Typer(
        name="build",
        help="Build the skicka executable with the pinned toolchain",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Build (or locate) the skicka executable."""
        if ctx.invoked_subcommand is None:
            _handle_stage_result(cmd_build)()

    return app
