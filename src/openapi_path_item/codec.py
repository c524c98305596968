"""Read and write path items as JSON or YAML."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from openapi_path_item.errors import DecodingError
from openapi_path_item.models.base import EXTENSION_PREFIX
from openapi_path_item.models.path_item import PathItemObject, PathItemReferenceOr, Paths

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")
JSON_INDENT = 2


def detect_format(file_path: Path) -> str:
    """Pick the serialization format from the file suffix.

    Returns: 'json' or 'yaml'. YAML is the fallback since it also reads JSON.
    """
    return "json" if file_path.suffix.lower() == ".json" else "yaml"


def load_document(file_path: Path, fmt: str = "auto") -> dict[str, Any]:
    """Read a JSON or YAML file into a mapping.

    fmt: 'auto' (from the suffix), 'json' or 'yaml'.
    """
    if fmt == "auto":
        fmt = detect_format(file_path)
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format: {fmt!r} (expected one of {', '.join(FORMATS)})")

    text = file_path.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if fmt == "json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DecodingError("", f"{file_path} is not valid {fmt.upper()}: {e}") from e

    if not isinstance(data, dict):
        raise DecodingError("", f"{file_path} does not contain a mapping")
    logger.debug("Loaded %s as %s (%d top-level keys)", file_path, fmt, len(data))
    return data


def load_path_item(file_path: Path, fmt: str = "auto") -> PathItemObject:
    """Read a single Path Item Object from a file."""
    return PathItemObject.decode(load_document(file_path, fmt))


def load_paths(file_path: Path, fmt: str = "auto") -> Paths:
    """Read a paths map, either bare or from a full OpenAPI document."""
    doc = load_document(file_path, fmt)
    if "openapi" in doc or "swagger" in doc:
        logger.debug("%s is a full OpenAPI document, using its paths", file_path)
        paths = doc.get("paths")
        return decode_paths({} if paths is None else paths, location="paths")
    return decode_paths(doc)


def decode_paths(data: Any, location: str = "") -> Paths:
    if not isinstance(data, dict):
        raise DecodingError(location, f"expected a mapping of paths, got {type(data).__name__}")
    paths: Paths = {}
    for path, item in data.items():
        if not isinstance(path, str):
            raise DecodingError(str(path), f"path keys must be strings, got {type(path).__name__}")
        if path.startswith(EXTENSION_PREFIX):
            continue
        paths[path] = PathItemReferenceOr.decode(item, location=path)
    return paths


def encode_paths(paths: Paths) -> dict[str, Any]:
    return {path: item.encode() for path, item in paths.items()}


def dump(data: Any, fmt: str) -> str:
    """Render an encoded tree as JSON or YAML text."""
    if fmt == "json":
        return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    raise ValueError(f"Unknown format: {fmt!r} (expected one of {', '.join(FORMATS)})")


def dump_paths(paths: Paths, fmt: str) -> str:
    return dump(encode_paths(paths), fmt)
