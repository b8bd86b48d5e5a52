from __future__ import annotations

from typing import Sequence

from apimark.discovery.markers import parse_marker_list
from apimark.discovery.model import DiscoveredEntry, EntryKind, Parameters
from apimark.discovery.paths import NamespacePath, build_path
from apimark.syntax.model import (
    BUILTIN_MODEL_NAME,
    BUILTIN_NAMESPACE,
    BUILTIN_RESPONSE_NAME,
    COMPOSITE_MARKER_NAME,
    IGNORE_MARKER_NAME,
    Annotation,
    DataTypeDecl,
    FunctionDecl,
    ImplBlock,
    SyntaxPath,
)

_BUILTIN_KINDS = {
    BUILTIN_MODEL_NAME: EntryKind.MODEL,
    BUILTIN_RESPONSE_NAME: EntryKind.RESPONSE_MODEL,
}


def is_ignored(annotations: Sequence[Annotation]) -> bool:
    return any(annotation.path.is_ident(IGNORE_MARKER_NAME) for annotation in annotations)


def classify_function(
    function: FunctionDecl, namespace: NamespacePath, params: Parameters
) -> list[DiscoveredEntry]:
    """One operation entry per annotation naming the function marker.

    A dotted annotation such as ``#[api::op]`` matches when any of its
    segments equals the marker name. Repeated markers repeat the entry.
    """
    if not function.annotations or is_ignored(function.annotations):
        return []
    path = build_path(namespace, function.name)
    return [
        DiscoveredEntry(EntryKind.OPERATION, path)
        for annotation in function.annotations
        if params.fn_marker_name in annotation.path.segments
    ]


def classify_data_type(
    data_type: DataTypeDecl, namespace: NamespacePath, params: Parameters
) -> list[DiscoveredEntry]:
    if data_type.generic_params:
        return []
    if is_ignored(data_type.annotations):
        return []
    path = build_path(namespace, data_type.name)
    entries: list[DiscoveredEntry] = []
    for annotation in data_type.annotations:
        if not annotation.path.is_ident(COMPOSITE_MARKER_NAME):
            continue
        for marker in parse_marker_list(annotation, data_type.name):
            entries.extend(
                DiscoveredEntry(kind, path) for kind in _marker_kinds(marker, params)
            )
    return entries


def _marker_kinds(marker: SyntaxPath, params: Parameters) -> list[EntryKind]:
    if len(marker.segments) == 2 and marker.segments[0] == BUILTIN_NAMESPACE:
        kind = _BUILTIN_KINDS.get(marker.segments[1])
        return [kind] if kind is not None else []
    kinds: list[EntryKind] = []
    if marker.is_ident(params.model_marker_name):
        kinds.append(EntryKind.MODEL)
    if marker.is_ident(params.response_marker_name):
        kinds.append(EntryKind.RESPONSE_MODEL)
    return kinds


def classify_impl(
    block: ImplBlock, namespace: NamespacePath, params: Parameters
) -> list[DiscoveredEntry]:
    if block.capability is None:
        return []
    capability = block.capability.last
    if capability == params.model_marker_name:
        kind = EntryKind.CUSTOM_MODEL_IMPL
    elif capability == params.response_marker_name:
        kind = EntryKind.CUSTOM_RESPONSE_IMPL
    else:
        return []
    return [DiscoveredEntry(kind, build_path(namespace, block.self_type))]
