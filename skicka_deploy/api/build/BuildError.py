"""Build failure raised at compile time."""


class BuildError(RuntimeError):
    """The skicka artifact could not be produced or does not resolve to an executable."""
