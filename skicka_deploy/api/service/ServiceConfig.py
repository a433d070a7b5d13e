"""Operator-facing options for the skicka service."""

from pydantic import BaseModel, ConfigDict, Field


class ServiceConfig(BaseModel):
    """Options of the skicka service.

    Only type-level constraints are enforced. Addresses are passed through to the
    binary verbatim and listen/remote are independent of each other.
    """

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    enable: bool = Field(default=False, description="Send files between machines")
    package: str | None = Field(
        default=None, description="Path to a pre-built skicka executable; None builds from the build section"
    )
    listen: str | None = Field(default=None, description="Address to listen on (host:port)")
    remote: str | None = Field(default=None, description="Public address users reach the service at (host:port)")
    motto: str | None = Field(default=None, description="Message shown to users, may span several lines")
