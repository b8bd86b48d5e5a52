"""Collector for syntax dumps written by an external parser.

A syntax dump is a JSON document holding the already-parsed declaration
trees of one or more source files::

    {"files": [{"file": "src/routes/user.rs", "items": [...]}]}

Each item carries a ``kind`` (``mod``, ``fn``, ``struct``, ``enum``,
``impl`` or any other shape, which discovery ignores) plus the fields that
kind needs.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import ValidationError

from apimark.discovery.paths import namespace_path_for_file
from apimark.exceptions import CollectionError
from apimark.schema import AnnotationDTO, SyntaxDumpDTO, SyntaxFileDTO, SyntaxItemDTO
from apimark.syntax.model import (
    Annotation,
    DataTypeDecl,
    Declaration,
    FunctionDecl,
    ImplBlock,
    NamespaceDecl,
    OtherDecl,
    ParsedFile,
    SyntaxPath,
)

DUMP_SUFFIX = ".json"
DATA_TYPE_KINDS = frozenset({"struct", "enum"})


class SyntaxDumpCollector:
    def collect(self, root: Path, namespace_root: str) -> list[ParsedFile]:
        parsed: list[ParsedFile] = []
        for dump_path in iter_dump_paths(root):
            dump = load_dump(dump_path)
            parsed.extend(to_parsed_file(unit, namespace_root) for unit in dump.files)
        return parsed


def iter_dump_paths(root: Path) -> list[Path]:
    """Expand ``root`` to the dump files below it in sorted path order."""
    root = Path(root)
    if root.is_file():
        return [root]
    if not root.is_dir():
        raise CollectionError(root, "path not found")
    out: list[Path] = []
    for current, dirnames, filenames in os.walk(root, topdown=True):
        dirnames[:] = sorted(dirnames)
        for filename in sorted(filenames):
            if filename.endswith(DUMP_SUFFIX):
                out.append(Path(current) / filename)
    return out


def load_dump(path: Path) -> SyntaxDumpDTO:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise CollectionError(path, f"unreadable: {exc}") from exc
    try:
        return SyntaxDumpDTO.model_validate_json(raw)
    except ValidationError as exc:
        raise CollectionError(path, f"invalid syntax dump: {exc}") from exc


def to_parsed_file(unit: SyntaxFileDTO, namespace_root: str) -> ParsedFile:
    if unit.namespace is not None:
        namespace = tuple(unit.namespace)
    else:
        namespace = namespace_path_for_file(unit.file, namespace_root)
    return ParsedFile(
        namespace=namespace,
        items=tuple(_to_declaration(item) for item in unit.items),
        source=unit.file,
    )


def _to_annotations(annotations: list[AnnotationDTO]) -> tuple[Annotation, ...]:
    return tuple(
        Annotation(path=SyntaxPath.parse(annotation.path), arguments=annotation.arguments)
        for annotation in annotations
    )


def _to_declaration(item: SyntaxItemDTO) -> Declaration:
    if item.kind == "mod":
        children = None
        if item.items is not None:
            children = tuple(_to_declaration(child) for child in item.items)
        return NamespaceDecl(name=item.name, items=children)
    if item.kind == "fn":
        return FunctionDecl(name=item.name, annotations=_to_annotations(item.annotations))
    if item.kind in DATA_TYPE_KINDS:
        return DataTypeDecl(
            name=item.name,
            annotations=_to_annotations(item.annotations),
            generic_params=tuple(item.generics),
        )
    if item.kind == "impl":
        return ImplBlock(
            self_type=item.self_type,
            capability=SyntaxPath.parse(item.trait) if item.trait else None,
        )
    return OtherDecl(kind=item.kind)
