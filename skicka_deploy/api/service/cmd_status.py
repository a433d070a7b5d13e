"""Service status command."""

from collections.abc import Iterator

from ..config.SkickaDeployConfig import SkickaDeployConfig
from ..StageResult import StageResult
from .._output_schemas.service import ServiceStatusOutput
from .Service import Service


def cmd_status() -> StageResult:
    """Report whether the skicka unit is installed and running."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SkickaDeployConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ServiceStatusOutput(
                errors=[str(e)],
                warnings=[],
                unit_name="",
                unit_path="",
                installed=False,
                running=False,
                pid=-1,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Checking service status...")
        errors: list[str] = []
        status = {"installed": False, "running": False, "pid": None, "unit_path": str(config.systemd.unit_path())}
        try:
            with Service(config.systemd) as service:
                status = service.get_service_status()
        except (RuntimeError, OSError) as e:
            errors.append(f"service status error: {e}")

        yield (1.0, "Complete")
        pid = status["pid"] if status["pid"] is not None else -1
        if errors:
            result_obj.result = errors[0]
        elif status["running"]:
            result_obj.result = f"Service is running (PID: {pid})"
        elif status["installed"]:
            result_obj.result = "Service is installed but not running"
        else:
            result_obj.result = "Service is not installed"
        result_obj.output = ServiceStatusOutput(
            errors=errors,
            warnings=[],
            unit_name=config.systemd.unit_name,
            unit_path=status["unit_path"],
            installed=status["installed"],
            running=status["running"],
            pid=pid,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce="Checking service status...",
        progress_callback=do_work,
    )
