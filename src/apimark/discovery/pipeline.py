from __future__ import annotations

from pathlib import Path
from typing import Iterable

from apimark.discovery.aggregate import aggregate_entries
from apimark.discovery.model import DiscoveredEntry, DiscoverRoot, DiscoveryResult, Parameters
from apimark.discovery.walker import walk_namespace
from apimark.exceptions import CollectionError
from apimark.ingest.adapter_contract import FileCollector
from apimark.syntax.model import ParsedFile


def discover_from_files(files: Iterable[ParsedFile], params: Parameters) -> DiscoveryResult:
    entries: list[DiscoveredEntry] = []
    for parsed in files:
        entries.extend(walk_namespace(parsed.namespace, parsed.items, params))
    return aggregate_entries(entries)


def collect_files(
    root: Path, namespace_root: str, collector: FileCollector
) -> tuple[ParsedFile, ...]:
    try:
        return tuple(collector.collect(root, namespace_root))
    except CollectionError:
        raise
    except Exception as exc:
        raise CollectionError(root, str(exc)) from exc


def discover(
    root: Path,
    namespace_root: str,
    params: Parameters,
    collector: FileCollector,
) -> DiscoveryResult:
    """Discover operations, models and responses under ``root``.

    Every file is collected before the walk starts, so a collection failure
    never yields a partial result.
    """
    files = collect_files(Path(root), namespace_root, collector)
    return discover_from_files(files, params)


def discover_from_roots(
    roots: Iterable[DiscoverRoot],
    params: Parameters,
    collector: FileCollector,
) -> DiscoveryResult:
    result = DiscoveryResult()
    for root in roots:
        result = result.extend(discover(root.path, root.namespace_root, params, collector))
    return result
