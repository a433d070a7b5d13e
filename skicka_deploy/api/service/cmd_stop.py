"""Service stop command."""

from collections.abc import Iterator

from ..config.SkickaDeployConfig import SkickaDeployConfig
from ..StageResult import StageResult
from .._output_schemas.service import ServiceStopOutput
from .Service import Service


def cmd_stop() -> StageResult:
    """Stop the skicka unit via systemd."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SkickaDeployConfig.load()
            yield (0.5, "Stopping service...")
            with Service(config.systemd) as service:
                result = service.stop_service()
        except (RuntimeError, ValueError, OSError) as e:
            result = {"success": False, "error": str(e)}

        yield (1.0, "Complete")
        warnings = [result["note"]] if "note" in result else []
        if result["success"]:
            message = "Service stopped successfully"
            errors: list[str] = []
        else:
            message = f"Error stopping service: {result['error']}"
            errors = [result["error"]]

        result_obj.result = message
        result_obj.output = ServiceStopOutput(
            errors=errors,
            warnings=warnings,
            message=message,
            stopped=result["success"],
        ).model_dump(mode="python")
        result_obj.success = result["success"]

    return StageResult(
        announce="Stopping service...",
        progress_callback=do_work,
    )
