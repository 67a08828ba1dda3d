"""
Reading and writing YAML and JSON documents.

The namespace operations work on in-memory mappings; this module is the
boundary to files and streams used by the CLI and the config loader.
"""

from __future__ import annotations

import json as _json
import pathlib as _pathlib
import typing as _typing

import yaml as _yaml

FORMATS = ("yaml", "json")

_SUFFIX_FORMATS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


class DocumentError(Exception):
    """Error reading, parsing or writing a document."""

    def __init__(self, source: str | _pathlib.Path, message: str) -> None:
        self.source = source
        self.message = message
        super().__init__(f"Error in document {source}: {message}")


def detect_format(path: _pathlib.Path | None, default: str = "yaml") -> str:
    """Pick a format from a file suffix, falling back to default."""
    if path is None:
        return default
    return _SUFFIX_FORMATS.get(path.suffix.lower(), default)


def parse_document(
    text: str,
    fmt: str,
    *,
    source: str | _pathlib.Path = "<string>",
) -> dict[str, _typing.Any]:
    """
    Parse document text into a dict.

    Empty YAML documents parse as {}.

    Raises:
        DocumentError: If the text is malformed or its top level is not a
            mapping.
    """
    try:
        if fmt == "json":
            data = _json.loads(text) if text.strip() else None
        elif fmt == "yaml":
            data = _yaml.safe_load(text)
        else:
            raise DocumentError(source, f"unknown format {fmt!r}")
    except (_json.JSONDecodeError, _yaml.YAMLError) as e:
        raise DocumentError(source, f"invalid {fmt.upper()}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DocumentError(
            source,
            f"document must be a mapping at the top level, got {type(data).__name__}",
        )
    return data


def load_document(path: _pathlib.Path, fmt: str | None = None) -> dict[str, _typing.Any]:
    """
    Load a YAML or JSON file.

    Args:
        path: File to read.
        fmt: "yaml" or "json"; detected from the suffix if None.

    Raises:
        DocumentError: If the file cannot be read or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise DocumentError(path, f"permission denied: {e}") from e
    except OSError as e:
        raise DocumentError(path, f"cannot read file: {e}") from e
    return parse_document(text, fmt or detect_format(path), source=path)


def dump_value(
    value: _typing.Any,
    fmt: str,
    *,
    indent: int = 2,
    sort_keys: bool = False,
) -> str:
    """
    Serialize any value (mapping, list or scalar) as YAML or JSON text.

    JSON output falls back to str() for values it cannot represent.
    """
    if fmt == "json":
        return _json.dumps(value, indent=indent, sort_keys=sort_keys, default=str)
    text = _yaml.safe_dump(
        value,
        indent=indent,
        sort_keys=sort_keys,
        default_flow_style=False,
        allow_unicode=True,
    )
    # safe_dump terminates scalars with an explicit document end marker
    if text.endswith("\n...\n"):
        text = text[: -len("...\n")]
    return text.rstrip("\n")


def save_document(
    data: _typing.Mapping[str, _typing.Any],
    path: _pathlib.Path,
    fmt: str | None = None,
    *,
    indent: int = 2,
    sort_keys: bool = False,
) -> None:
    """
    Write a mapping to a YAML or JSON file.

    Raises:
        DocumentError: If the file cannot be written.
    """
    text = dump_value(dict(data), fmt or detect_format(path), indent=indent, sort_keys=sort_keys)
    try:
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise DocumentError(path, f"cannot write file: {e}") from e


def parse_scalar(text: str) -> _typing.Any:
    """
    Parse a command-line value as a YAML scalar or flow collection.

    "3000" becomes 3000, "true" becomes True, "[1, 2]" becomes a list and
    "null" becomes None. Text that is not valid YAML stays a string.
    """
    try:
        return _yaml.safe_load(text)
    except _yaml.YAMLError:
        return text
