"""Exception kinds raised by apimark discovery."""

from __future__ import annotations

from pathlib import Path


class DiscoveryError(RuntimeError):
    """Base class for every fatal discovery condition."""


class CollectionError(DiscoveryError):
    """The file collector could not produce parsed files for a root."""

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = str(path)
        self.reason = reason
        message = f"Failed to collect parsed files from {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AnnotationSyntaxError(DiscoveryError):
    """A composite marker list annotation could not be split into markers.

    ``annotation`` holds the rendered annotation text and ``declaration``
    the name of the declaration it is attached to.
    """

    def __init__(self, annotation: str, declaration: str, reason: str) -> None:
        self.annotation = annotation
        self.declaration = declaration
        self.reason = reason
        super().__init__(
            f"Failed to parse {annotation} on {declaration}: {reason}"
        )


class ConfigError(DiscoveryError):
    """Configuration values have the wrong shape."""
