"""Service uninstall command - removes the skicka unit."""

from collections.abc import Iterator

from ..config.SkickaDeployConfig import SkickaDeployConfig
from ..StageResult import StageResult
from .._output_schemas.service import ServiceUninstallOutput
from .Service import Service


def cmd_uninstall() -> StageResult:
    """Uninstall the skicka unit."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SkickaDeployConfig.load()
            yield (0.5, "Uninstalling service...")
            with Service(config.systemd) as service:
                service.uninstall_service()
        except (RuntimeError, ValueError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error uninstalling service: {e}"
            result_obj.output = ServiceUninstallOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                uninstalled=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "Service uninstalled successfully"
        result_obj.output = ServiceUninstallOutput(
            errors=[],
            warnings=[],
            message=result_obj.result,
            uninstalled=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Uninstalling service...",
        progress_callback=do_work,
    )
