"""Service install command - installs the skicka unit into systemd."""

from collections.abc import Iterator

from ..build.BuildError import BuildError
from ..config.SkickaDeployConfig import SkickaDeployConfig
from ..StageResult import StageResult
from .._output_schemas.service import ServiceInstallOutput
from .compile_service import compile_service
from .Service import Service


def cmd_install() -> StageResult:
    """Compile the configuration and install the resulting unit.

    Build failures and misconfiguration stop here, before anything is written to
    the host.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SkickaDeployConfig.load()
            yield (0.3, "Compiling service descriptor...")
            descriptor = compile_service(config)
        except (BuildError, ValueError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error compiling service: {e}"
            result_obj.output = ServiceInstallOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                installed=False,
                unit_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        if descriptor is None:
            yield (1.0, "Complete")
            result_obj.result = "Service is disabled (service.enable is false); nothing to install"
            result_obj.output = ServiceInstallOutput(
                errors=[result_obj.result],
                warnings=[],
                message=result_obj.result,
                installed=False,
                unit_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Installing service...")
        try:
            with Service(config.systemd) as service:
                result = service.install_service(descriptor)
        except (RuntimeError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error installing service: {e}"
            result_obj.output = ServiceInstallOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                installed=False,
                unit_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Service installed successfully (unit: {result['unit_name']})"
        result_obj.output = ServiceInstallOutput(
            errors=[],
            warnings=[],
            message=result_obj.result,
            installed=True,
            unit_path=result["unit_path"],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Installing skicka service...",
        progress_callback=do_work,
    )
