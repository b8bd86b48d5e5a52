from __future__ import annotations

from typing import Iterable

from apimark.discovery.model import DiscoveredEntry, DiscoveryResult, EntryKind
from apimark.discovery.paths import ReferencePath

_OPERATION_KINDS = frozenset({EntryKind.OPERATION})
_MODEL_KINDS = frozenset({EntryKind.MODEL, EntryKind.CUSTOM_MODEL_IMPL})
_RESPONSE_KINDS = frozenset({EntryKind.RESPONSE_MODEL, EntryKind.CUSTOM_RESPONSE_IMPL})


def aggregate_entries(entries: Iterable[DiscoveredEntry]) -> DiscoveryResult:
    operations: list[ReferencePath] = []
    models: list[ReferencePath] = []
    responses: list[ReferencePath] = []
    for entry in entries:
        if entry.kind in _OPERATION_KINDS:
            operations.append(entry.path)
        elif entry.kind in _MODEL_KINDS:
            models.append(entry.path)
        elif entry.kind in _RESPONSE_KINDS:
            responses.append(entry.path)
    return DiscoveryResult(
        operations=tuple(operations),
        models=tuple(models),
        responses=tuple(responses),
    )
