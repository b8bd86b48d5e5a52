from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import Mapping, TypeAlias
import re
import tomllib

from apimark.discovery.model import DEFAULT_NAMESPACE_ROOT, DiscoverRoot, Parameters
from apimark.exceptions import ConfigError

DEFAULT_CONFIG_NAME = "apimark.toml"

DEFAULT_FN_MARKER = "utoipa"
DEFAULT_MODEL_MARKER = "ToSchema"
DEFAULT_RESPONSE_MARKER = "ToResponse"

_NAMESPACE_ROOT_SEPARATOR_RE = re.compile(r"\s+from\b\s*")

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def _section(name: str, root: Path | None, config_path: Path | None) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}


def marker_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    return _section("markers", root, config_path)


def discover_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    return _section("discover", root, config_path)


def merge_payload(payload: Mapping[str, TomlValue], defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def _marker_name(section: TomlTable, key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"markers.{key} must be a non-empty string, got {value!r}")
    return value.strip()


def resolve_parameters(
    overrides: Mapping[str, TomlValue] | None = None,
    section: TomlTable | None = None,
) -> Parameters:
    """Merge explicit marker names over the ``[markers]`` table and defaults.

    ``overrides`` uses the table's keys (``function``, ``model``,
    ``response``); ``None`` values leave the configured name in place.
    """
    merged = merge_payload(overrides or {}, section or {})
    return Parameters(
        fn_marker_name=_marker_name(merged, "function", DEFAULT_FN_MARKER),
        model_marker_name=_marker_name(merged, "model", DEFAULT_MODEL_MARKER),
        response_marker_name=_marker_name(merged, "response", DEFAULT_RESPONSE_MARKER),
    )


def _split_entries(value: TomlValue) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",")]
    if isinstance(value, list):
        entries: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigError(f"discover path entries must be strings, got {item!r}")
            entries.extend(part.strip() for part in item.split(","))
        return entries
    raise ConfigError(f"discover paths must be a string or a list, got {value!r}")


def parse_discover_paths(
    value: TomlValue,
    default_namespace_root: str = DEFAULT_NAMESPACE_ROOT,
) -> list[DiscoverRoot]:
    """Parse ``"./src/routes from api, ./src/models"`` style root lists."""
    roots: list[DiscoverRoot] = []
    for entry in _split_entries(value):
        if not entry:
            continue
        parts = _NAMESPACE_ROOT_SEPARATOR_RE.split(entry, maxsplit=1)
        path_text = parts[0].strip()
        namespace_root = parts[1].strip() if len(parts) > 1 else default_namespace_root
        if not path_text:
            raise ConfigError(f"discover path entry {entry!r} has no path")
        if not namespace_root:
            raise ConfigError(f"discover path entry {entry!r} has no namespace root")
        roots.append(DiscoverRoot(path=Path(path_text), namespace_root=namespace_root))
    return roots
