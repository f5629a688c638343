"""Reading OpenAPI specifications from disk and turning them into routes."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

import yaml

from apsmock.config import MockError
from apsmock.openapi_types import HttpMethod, OpenApiSpec, RouteDefinition, spec_from_dict

logger = logging.getLogger(__name__)

_SPEC_SUFFIXES = frozenset({".yaml", ".yml", ".json"})
_PATH_PARAM = re.compile(r"\{([^}]+)\}")
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _SpecLoader(yaml.SafeLoader):
    """Safe loader that keeps dates and timestamps as plain strings."""


_SpecLoader.yaml_implicit_resolvers = {
    first: [(tag, pattern) for tag, pattern in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_directory(directory: str | Path) -> list[tuple[str, OpenApiSpec]]:
    """Parse every specification file below a directory.

    Files that fail to parse are logged and skipped. A missing directory
    yields an empty list.
    """
    base = Path(directory)
    if not base.exists():
        logger.warning("OpenAPI directory does not exist: %s", base)
        return []
    return list(_walk(base, base))


def _walk(base: Path, current: Path) -> Iterator[tuple[str, OpenApiSpec]]:
    try:
        entries = sorted(current.iterdir())
    except OSError as exc:
        raise MockError(f"IO error: {exc}") from exc
    for path in entries:
        if path.is_dir():
            yield from _walk(base, path)
        elif path.suffix in _SPEC_SUFFIXES:
            try:
                spec = parse_file(path)
            except MockError as exc:
                logger.warning("Failed to parse %s: %s", path, exc)
                continue
            yield _spec_name(base, path), spec


def _spec_name(base: Path, path: Path) -> str:
    return (
        path.relative_to(base)
        .as_posix()
        .replace("\\", "/")
        .replace(".yaml", "")
        .replace(".yml", "")
        .replace(".json", "")
    )


def parse_file(path: str | Path) -> OpenApiSpec:
    """Parse a single YAML or JSON specification file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MockError(f"IO error: {exc}") from exc
    try:
        data = yaml.load(text, Loader=_SpecLoader)
    except yaml.YAMLError as exc:
        raise MockError(f"YAML parsing error: {exc}") from exc
    try:
        return spec_from_dict(data)
    except ValueError as exc:
        raise MockError(f"YAML parsing error: {exc}") from exc


def extract_routes(spec: OpenApiSpec) -> list[RouteDefinition]:
    """List a route for every operation of every path in the spec."""
    routes = []
    for path, item in spec.paths.items():
        pattern = convert_path_to_pattern(path)
        for method in HttpMethod:
            operation = getattr(item, method.value.lower())
            if operation is not None:
                routes.append(
                    RouteDefinition(
                        method=method,
                        path=path,
                        operation=operation,
                        path_pattern=pattern,
                        components=spec.components,
                    )
                )
    return routes


def convert_path_to_pattern(path: str) -> str:
    """Turn ``{paramName}`` placeholders into ``:param_name`` form."""

    def replace(match: re.Match) -> str:
        return ":" + _CAMEL_BOUNDARY.sub(r"\1_\2", match.group(1)).lower()

    return _PATH_PARAM.sub(replace, path)