from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from apimark.discovery.paths import ReferencePath
from apimark.json_types import JSONObject

DEFAULT_NAMESPACE_ROOT = "crate"


@dataclass(frozen=True)
class Parameters:
    fn_marker_name: str
    model_marker_name: str
    response_marker_name: str


@dataclass(frozen=True)
class DiscoverRoot:
    path: Path
    namespace_root: str = DEFAULT_NAMESPACE_ROOT


class EntryKind(StrEnum):
    OPERATION = "operation"
    MODEL = "model"
    RESPONSE_MODEL = "response_model"
    CUSTOM_MODEL_IMPL = "custom_model_impl"
    CUSTOM_RESPONSE_IMPL = "custom_response_impl"


@dataclass(frozen=True)
class DiscoveredEntry:
    kind: EntryKind
    path: ReferencePath


@dataclass(frozen=True)
class DiscoveryResult:
    operations: tuple[ReferencePath, ...] = ()
    models: tuple[ReferencePath, ...] = ()
    responses: tuple[ReferencePath, ...] = ()

    def extend(self, other: DiscoveryResult) -> DiscoveryResult:
        return DiscoveryResult(
            operations=self.operations + other.operations,
            models=self.models + other.models,
            responses=self.responses + other.responses,
        )

    def to_payload(self) -> JSONObject:
        return {
            "operations": [str(path) for path in self.operations],
            "models": [str(path) for path in self.models],
            "responses": [str(path) for path in self.responses],
        }
