"""Build command - resolves the skicka artifact."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.build import BuildOutput
from ..config.SkickaDeployConfig import SkickaDeployConfig
from .BuildError import BuildError
from .CargoArtifact import CargoArtifact
from .resolver_for import resolver_for


def cmd_build() -> StageResult:
    """Build (or locate) the skicka executable the service will run."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = SkickaDeployConfig.load()
            yield (0.3, "Reading toolchain...")
            resolver = resolver_for(config)
            toolchain = resolver.toolchain.channel if isinstance(resolver, CargoArtifact) else ""
            yield (0.5, f"Resolving artifact ({resolver.kind})...")
            executable = resolver.resolve()
        except (BuildError, ValueError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Build failed: {e}"
            result_obj.output = BuildOutput(
                errors=[str(e)],
                warnings=[],
                built=False,
                executable="",
                resolver="",
                toolchain="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Artifact ready at {executable}"
        result_obj.output = BuildOutput(
            errors=[],
            warnings=[],
            built=True,
            executable=str(executable),
            resolver=resolver.kind,
            toolchain=toolchain,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Building skicka...",
        progress_callback=do_work,
    )
