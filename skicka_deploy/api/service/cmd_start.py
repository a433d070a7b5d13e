"""Service start command."""

from collections.abc import Iterator

from ..config.SkickaDeployConfig import SkickaDeployConfig
from ..StageResult import StageResult
from .._output_schemas.service import ServiceStartOutput
from .Service import Service


def cmd_start() -> StageResult:
    """Start the skicka unit via systemd."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SkickaDeployConfig.load()
            yield (0.5, "Starting service...")
            with Service(config.systemd) as service:
                result = service.start_service()
        except (RuntimeError, ValueError, OSError) as e:
            result = {"success": False, "error": str(e)}

        yield (1.0, "Complete")
        if result["success"]:
            message = f"Service started successfully (unit: {result['unit_name']})"
            errors: list[str] = []
        else:
            message = f"Error starting service: {result['error']}"
            errors = [result["error"]]

        result_obj.result = message
        result_obj.output = ServiceStartOutput(
            errors=errors,
            warnings=[],
            message=message,
            running=result["success"],
        ).model_dump(mode="python")
        result_obj.success = result["success"]

    return StageResult(
        announce="Starting service...",
        progress_callback=do_work,
    )
