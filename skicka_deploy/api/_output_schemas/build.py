"""Output schemas for build commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class BuildOutput(BaseOutputSchema):
    """Output schema for the build command."""

    built: bool = Field(..., description="Whether an executable artifact was resolved")
    executable: str = Field(..., description="Path to the resolved executable, empty string on failure")
    resolver: str = Field(..., description="Resolver kind: 'path' or 'cargo', empty string if unknown")
    toolchain: str = Field(..., description="Pinned toolchain channel, empty string for pre-built artifacts")


register_output_schema("build", "build", BuildOutput)
