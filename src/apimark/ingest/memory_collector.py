from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from apimark.exceptions import CollectionError
from apimark.syntax.model import ParsedFile


class InMemoryCollector:
    """Serves preset parsed files keyed by root path."""

    def __init__(self, files_by_root: Mapping[Path | str, Iterable[ParsedFile]] | None = None) -> None:
        self._files_by_root: dict[Path, tuple[ParsedFile, ...]] = {}
        for root, files in (files_by_root or {}).items():
            self.register(root, files)

    def register(self, root: Path | str, files: Iterable[ParsedFile]) -> None:
        self._files_by_root[Path(root)] = tuple(files)

    def collect(self, root: Path, namespace_root: str) -> tuple[ParsedFile, ...]:
        files = self._files_by_root.get(Path(root))
        if files is None:
            raise CollectionError(root, "path not found")
        return files
