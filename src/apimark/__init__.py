"""apimark package root."""

from apimark.discovery import DiscoveryResult, Parameters, discover, discover_from_files
from apimark.exceptions import AnnotationSyntaxError, CollectionError, DiscoveryError

__all__ = [
    "__version__",
    "AnnotationSyntaxError",
    "CollectionError",
    "DiscoveryError",
    "DiscoveryResult",
    "Parameters",
    "discover",
    "discover_from_files",
]

__version__ = "0.1.0"
