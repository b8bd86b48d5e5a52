"""Splitting of composite marker list annotations into marker paths."""

from __future__ import annotations

import re

from apimark.exceptions import AnnotationSyntaxError
from apimark.syntax.model import Annotation, SyntaxPath

_IDENT = r"(?:r#)?[A-Za-z_][A-Za-z0-9_]*"
_MARKER_PATH_RE = re.compile(
    rf"^(?P<path>(?:::\s*)?{_IDENT}(?:\s*::\s*{_IDENT})*)(?P<rest>.*)$",
    re.DOTALL,
)
_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())


def parse_marker_list(annotation: Annotation, declaration: str) -> list[SyntaxPath]:
    """Return the marker paths listed inside a composite marker annotation."""
    if annotation.arguments is None:
        raise AnnotationSyntaxError(
            annotation.render(), declaration, "expected a parenthesized marker list"
        )
    items = [
        item.strip()
        for item in _split_top_level(annotation.arguments, annotation, declaration)
    ]
    if items == [""]:
        return []
    # A single trailing comma is allowed.
    if len(items) > 1 and not items[-1]:
        items.pop()
    return [_parse_marker(item, annotation, declaration) for item in items]


def _split_top_level(
    text: str, annotation: Annotation, declaration: str
) -> list[str]:
    items: list[str] = []
    current: list[str] = []
    expected_closers: list[str] = []
    in_string = False
    escaped = False
    for char in text:
        if in_string:
            current.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in _OPENERS:
            expected_closers.append(_OPENERS[char])
        elif char in _CLOSERS:
            if not expected_closers or expected_closers.pop() != char:
                raise AnnotationSyntaxError(
                    annotation.render(), declaration, f"unexpected {char!r}"
                )
        elif char == "," and not expected_closers:
            items.append("".join(current))
            current = []
            continue
        current.append(char)
    if in_string:
        raise AnnotationSyntaxError(
            annotation.render(), declaration, "unterminated string literal"
        )
    if expected_closers:
        raise AnnotationSyntaxError(
            annotation.render(), declaration, f"missing {expected_closers[-1]!r}"
        )
    items.append("".join(current))
    return items


def _parse_marker(item: str, annotation: Annotation, declaration: str) -> SyntaxPath:
    if not item:
        raise AnnotationSyntaxError(
            annotation.render(), declaration, "empty marker entry"
        )
    match = _MARKER_PATH_RE.match(item)
    if match is None:
        raise AnnotationSyntaxError(
            annotation.render(), declaration, f"expected a marker path, found {item!r}"
        )
    rest = match.group("rest").strip()
    if rest and not (_is_single_group(rest) or _is_name_value(rest)):
        raise AnnotationSyntaxError(
            annotation.render(), declaration, f"unexpected tokens after marker path in {item!r}"
        )
    path_text = re.sub(r"\s+", "", match.group("path"))
    return SyntaxPath.parse(path_text)


def _is_single_group(text: str) -> bool:
    # Delimiters are already known to balance.
    if text[0] not in _OPENERS:
        return False
    depth = 0
    in_string = False
    escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
            if depth == 0:
                return index == len(text) - 1
    return False


def _is_name_value(text: str) -> bool:
    return text.startswith("=") and bool(text[1:].strip())
