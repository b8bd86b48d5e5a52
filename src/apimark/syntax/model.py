"""Parsed declaration trees handed over by external parsers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

PATH_SEPARATOR = "::"

COMPOSITE_MARKER_NAME = "derive"
IGNORE_MARKER_NAME = "utoipa_ignore"
BUILTIN_NAMESPACE = "utoipa"
BUILTIN_MODEL_NAME = "ToSchema"
BUILTIN_RESPONSE_NAME = "ToResponse"


@dataclass(frozen=True)
class SyntaxPath:
    segments: tuple[str, ...]
    leading_colon: bool = False

    @classmethod
    def parse(cls, text: str) -> SyntaxPath:
        """Parse ``a::b::Name<Args>`` keeping only each segment's identifier.

        Generic and parenthesized arguments (``ToSchema<'s>``, ``Fn(A)``,
        turbofish ``::<T>``) are dropped, and separators inside them never
        split the path.
        """
        raw = text.strip()
        leading_colon = raw.startswith(PATH_SEPARATOR)
        if leading_colon:
            raw = raw[len(PATH_SEPARATOR):]
        segments = [
            _segment_ident(part) for part in _split_top_level_path(raw)
        ]
        return cls(
            segments=tuple(segment for segment in segments if segment),
            leading_colon=leading_colon,
        )

    @property
    def last(self) -> str:
        return self.segments[-1] if self.segments else ""

    def is_ident(self, name: str) -> bool:
        return (
            not self.leading_colon
            and len(self.segments) == 1
            and self.segments[0] == name
        )

    def __str__(self) -> str:
        prefix = PATH_SEPARATOR if self.leading_colon else ""
        return prefix + PATH_SEPARATOR.join(self.segments)


_ARGUMENT_OPENERS = {"<": ">", "(": ")", "[": "]"}


def _split_top_level_path(text: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    index = 0
    while index < len(text):
        char = text[index]
        if char in _ARGUMENT_OPENERS:
            depth += 1
        elif char in _ARGUMENT_OPENERS.values():
            # `->` inside `Fn(A) -> B` is not a closer.
            if not (char == ">" and index > 0 and text[index - 1] == "-"):
                depth = max(depth - 1, 0)
        elif depth == 0 and text.startswith(PATH_SEPARATOR, index):
            parts.append("".join(current))
            current = []
            index += len(PATH_SEPARATOR)
            continue
        current.append(char)
        index += 1
    parts.append("".join(current))
    return parts


def _segment_ident(part: str) -> str:
    cut = len(part)
    for opener in _ARGUMENT_OPENERS:
        position = part.find(opener)
        if position != -1:
            cut = min(cut, position)
    return part[:cut].strip()


@dataclass(frozen=True)
class Annotation:
    path: SyntaxPath
    # Raw text between the annotation's parentheses, None for the bare form.
    arguments: str | None = None

    def render(self) -> str:
        if self.arguments is None:
            return f"#[{self.path}]"
        return f"#[{self.path}({self.arguments})]"


@dataclass(frozen=True)
class FunctionDecl:
    name: str
    annotations: tuple[Annotation, ...] = ()


@dataclass(frozen=True)
class DataTypeDecl:
    name: str
    annotations: tuple[Annotation, ...] = ()
    generic_params: tuple[str, ...] = ()


@dataclass(frozen=True)
class ImplBlock:
    self_type: str
    capability: SyntaxPath | None = None


@dataclass(frozen=True)
class OtherDecl:
    kind: str


@dataclass(frozen=True)
class NamespaceDecl:
    name: str
    # None when the namespace body lives in another file.
    items: tuple[Declaration, ...] | None = None


Declaration: TypeAlias = (
    NamespaceDecl | FunctionDecl | DataTypeDecl | ImplBlock | OtherDecl
)


@dataclass(frozen=True)
class ParsedFile:
    namespace: tuple[str, ...]
    items: tuple[Declaration, ...] = field(default_factory=tuple)
    source: str = ""
