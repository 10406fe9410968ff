"""Exception hierarchy for the path tracer.

Library code raises these; only the command line entry point turns them
into exit codes.
"""


class PathTracerError(Exception):
    """Base class for all path tracer errors."""


class BoundingBoxError(PathTracerError, ValueError):
    """A surface that must be bounded reported no bounding box."""


class TextureLoadError(PathTracerError, ValueError):
    """A texture image exists but could not be decoded."""


class SceneError(PathTracerError, KeyError):
    """An unknown scene name was requested."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class RenderError(PathTracerError, RuntimeError):
    """A render worker failed; no image is produced."""
