from apimark.discovery.aggregate import aggregate_entries
from apimark.discovery.model import (
    DEFAULT_NAMESPACE_ROOT,
    DiscoveredEntry,
    DiscoverRoot,
    DiscoveryResult,
    EntryKind,
    Parameters,
)
from apimark.discovery.paths import ReferencePath, build_path, namespace_path_for_file
from apimark.discovery.pipeline import discover, discover_from_files, discover_from_roots
from apimark.discovery.walker import walk_namespace

__all__ = [
    "DEFAULT_NAMESPACE_ROOT",
    "DiscoveredEntry",
    "DiscoverRoot",
    "DiscoveryResult",
    "EntryKind",
    "Parameters",
    "ReferencePath",
    "aggregate_entries",
    "build_path",
    "discover",
    "discover_from_files",
    "discover_from_roots",
    "namespace_path_for_file",
    "walk_namespace",
]
