from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from apimark.syntax.model import ParsedFile


@runtime_checkable
class FileCollector(Protocol):
    def collect(self, root: Path, namespace_root: str) -> Iterable[ParsedFile]: ...
