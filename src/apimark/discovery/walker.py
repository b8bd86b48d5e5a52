from __future__ import annotations

from typing import Sequence

from apimark.discovery.classify import classify_data_type, classify_function, classify_impl
from apimark.discovery.model import DiscoveredEntry, Parameters
from apimark.discovery.paths import NamespacePath, extend_namespace
from apimark.syntax.model import (
    DataTypeDecl,
    Declaration,
    FunctionDecl,
    ImplBlock,
    NamespaceDecl,
)


def walk_namespace(
    namespace: NamespacePath,
    items: Sequence[Declaration],
    params: Parameters,
) -> list[DiscoveredEntry]:
    """Collect discovered entries from ``items`` and every inline namespace below."""
    entries: list[DiscoveredEntry] = []
    for item in items:
        if isinstance(item, NamespaceDecl):
            # Out-of-line namespaces are collected from their own file.
            if item.items is not None:
                entries.extend(
                    walk_namespace(extend_namespace(namespace, item.name), item.items, params)
                )
        elif isinstance(item, FunctionDecl):
            entries.extend(classify_function(item, namespace, params))
        elif isinstance(item, DataTypeDecl):
            entries.extend(classify_data_type(item, namespace, params))
        elif isinstance(item, ImplBlock):
            entries.extend(classify_impl(item, namespace, params))
    return entries
