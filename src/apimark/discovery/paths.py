from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Sequence

from apimark.syntax.model import PATH_SEPARATOR

NamespacePath = tuple[str, ...]

_FILE_EXTENSION = ".rs"
_ROOT_FILE_STEMS = ("mod", "lib", "main")
_SOURCE_DIR = "src"


@dataclass(frozen=True)
class ReferencePath:
    segments: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def namespace(self) -> NamespacePath:
        return self.segments[:-1]

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(self.segments)


def build_path(namespace: Sequence[str], name: str) -> ReferencePath:
    return ReferencePath(segments=(*namespace, name))


def extend_namespace(namespace: NamespacePath, name: str) -> NamespacePath:
    return (*namespace, name)


def namespace_path_for_file(file: str | PurePath, namespace_root: str) -> NamespacePath:
    """Derive the namespace path of a source file from its location.

    ``./src/routes/user.rs`` under root ``crate`` becomes
    ``("crate", "routes", "user")``; module root files (``mod``, ``lib``,
    ``main``) stand for their directory, and only the part below the first
    ``src`` directory contributes segments.
    """
    text = str(file).replace("\\", "/")
    if text.endswith(_FILE_EXTENSION):
        text = text[: -len(_FILE_EXTENSION)]
    while text.startswith("./"):
        text = text[2:]
    segments = [part for part in text.split("/") if part and part != "."]
    if segments and segments[-1] in _ROOT_FILE_STEMS:
        segments.pop()
    if _SOURCE_DIR in segments:
        segments = segments[segments.index(_SOURCE_DIR) + 1 :]
    return (namespace_root, *(part.replace("-", "_") for part in segments))
