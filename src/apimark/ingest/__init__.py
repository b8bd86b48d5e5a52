from apimark.ingest.adapter_contract import FileCollector
from apimark.ingest.dump_collector import SyntaxDumpCollector, iter_dump_paths, load_dump
from apimark.ingest.memory_collector import InMemoryCollector

__all__ = [
    "FileCollector",
    "InMemoryCollector",
    "SyntaxDumpCollector",
    "iter_dump_paths",
    "load_dump",
]
