"""Service render command - compiles the unit and writes its motto file, without installing anything."""

from collections.abc import Iterator

from ..build.BuildError import BuildError
from ..config.SkickaDeployConfig import SkickaDeployConfig
from ..StageResult import StageResult
from .._output_schemas.service import ServiceRenderOutput
from .compile_service import compile_service


def cmd_render() -> StageResult:
    """Compile the configuration and show the unit, start script and argv.

    The motto file is written to the state directory, since the argv is read back from it.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = SkickaDeployConfig.load()
            yield (0.4, "Compiling service descriptor...")
            descriptor = compile_service(config)
        except (BuildError, ValueError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error compiling service: {e}"
            result_obj.output = ServiceRenderOutput(
                errors=[str(e)],
                warnings=[],
                enabled=False,
                unit_name="",
                unit="",
                script="",
                argv=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        if descriptor is None:
            yield (1.0, "Complete")
            result_obj.result = "Service is disabled, nothing emitted"
            result_obj.output = ServiceRenderOutput(
                errors=[],
                warnings=["service.enable is false"],
                enabled=False,
                unit_name=config.systemd.unit_name,
                unit="",
                script="",
                argv=[],
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.8, "Rendering unit...")
        argv = descriptor.command.materialize()
        yield (1.0, "Complete")
        result_obj.result = f"Rendered {descriptor.unit_name}"
        result_obj.output = ServiceRenderOutput(
            errors=[],
            warnings=[],
            enabled=True,
            unit_name=descriptor.unit_name,
            unit=descriptor.render_unit(),
            script=descriptor.render_script(),
            argv=argv,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Rendering service...",
        progress_callback=do_work,
    )
