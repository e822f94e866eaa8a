"""Read-only loaders for snapshot and settings documents.

Every loader treats a missing or blank file as an empty document and hands
parser errors back to the caller untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import yaml


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8") if path.is_file() else ""


def _load_mapping(path: Path, parse: Callable[[str], Any]) -> dict[str, Any]:
    text = read_text(path)
    data = parse(text) if text.strip() else None
    return data if isinstance(data, dict) else {}


def read_json(path: Path) -> dict[str, Any]:
    return _load_mapping(path, json.loads)


def read_yaml(path: Path) -> dict[str, Any]:
    return _load_mapping(path, yaml.safe_load)


def read_document(path: Path) -> dict[str, Any]:
    """Pick the YAML or JSON loader from the file suffix."""
    loader = read_yaml if path.suffix.lower() in (".yaml", ".yml") else read_json
    return loader(path)
