from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from apimark.config import discover_defaults, marker_defaults, parse_discover_paths, resolve_parameters
from apimark.discovery import DEFAULT_NAMESPACE_ROOT, DiscoverRoot, DiscoveryResult, discover_from_roots
from apimark.exceptions import DiscoveryError
from apimark.ingest import FileCollector, SyntaxDumpCollector
from apimark.schema import DiscoveryResponseDTO

app = typer.Typer(add_completion=False)

_STDOUT_ALIAS = "-"


@app.callback()
def main() -> None:
    """Discover annotated API operations and models in parsed source trees."""


def _write_text_to_target(target: Path, text: str) -> None:
    if str(target) == _STDOUT_ALIAS:
        typer.echo(text)
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text + "\n", encoding="utf-8")


def _resolve_roots(
    root: Path | None,
    namespace_root: str | None,
    config_path: Path | None,
) -> list[DiscoverRoot]:
    if root is not None:
        return [DiscoverRoot(path=root, namespace_root=namespace_root or DEFAULT_NAMESPACE_ROOT)]
    section = discover_defaults(config_path=config_path)
    roots = parse_discover_paths(
        section.get("paths"),
        default_namespace_root=namespace_root or DEFAULT_NAMESPACE_ROOT,
    )
    if not roots:
        raise typer.BadParameter(
            "Pass a ROOT or set discover paths in apimark.toml.", param_hint="ROOT"
        )
    return roots


def run_discover(
    roots: list[DiscoverRoot],
    *,
    overrides: dict[str, Optional[str]],
    config_path: Path | None,
    collector: FileCollector | None = None,
) -> DiscoveryResult:
    params = resolve_parameters(overrides, marker_defaults(config_path=config_path))
    return discover_from_roots(roots, params, collector or SyntaxDumpCollector())


@app.command("discover")
def discover_command(
    root: Optional[Path] = typer.Argument(
        None, help="Syntax dump file or directory of dumps."
    ),
    namespace_root: Optional[str] = typer.Option(None, "--namespace-root"),
    config_path: Optional[Path] = typer.Option(None, "--config"),
    fn_marker: Optional[str] = typer.Option(None, "--fn-marker"),
    model_marker: Optional[str] = typer.Option(None, "--model-marker"),
    response_marker: Optional[str] = typer.Option(None, "--response-marker"),
    output_path: Path = typer.Option(
        Path(_STDOUT_ALIAS), "--output", help="Write JSON to file or '-' for stdout."
    ),
) -> None:
    """Print discovered operations, models and responses as JSON."""
    overrides = {
        "function": fn_marker,
        "model": model_marker,
        "response": response_marker,
    }
    try:
        roots = _resolve_roots(root, namespace_root, config_path)
        result = run_discover(roots, overrides=overrides, config_path=config_path)
    except DiscoveryError as exc:
        typer.echo(f"apimark: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    normalized = DiscoveryResponseDTO.model_validate(result.to_payload()).model_dump()
    _write_text_to_target(output_path, json.dumps(normalized, indent=2, sort_keys=True))
