from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, model_validator

NAMED_ITEM_KINDS = frozenset({"mod", "fn", "struct", "enum"})


class AnnotationDTO(BaseModel):
    path: str
    arguments: Optional[str] = None


class SyntaxItemDTO(BaseModel):
    kind: str
    name: Optional[str] = None
    annotations: List[AnnotationDTO] = []
    generics: List[str] = []
    items: Optional[List["SyntaxItemDTO"]] = None
    self_type: Optional[str] = None
    trait: Optional[str] = None

    @model_validator(mode="after")
    def _require_shape_fields(self) -> "SyntaxItemDTO":
        if self.kind in NAMED_ITEM_KINDS and not self.name:
            raise ValueError(f"{self.kind} item requires a name")
        if self.kind == "impl" and not self.self_type:
            raise ValueError("impl item requires a self_type")
        return self


class SyntaxFileDTO(BaseModel):
    file: str
    namespace: Optional[List[str]] = None
    items: List[SyntaxItemDTO] = []

    @model_validator(mode="after")
    def _require_namespace_segments(self) -> "SyntaxFileDTO":
        if self.namespace is not None and not self.namespace:
            raise ValueError("namespace must have at least one segment")
        return self


class SyntaxDumpDTO(BaseModel):
    files: List[SyntaxFileDTO]


class DiscoveryResponseDTO(BaseModel):
    operations: List[str] = []
    models: List[str] = []
    responses: List[str] = []


SyntaxItemDTO.model_rebuild()
