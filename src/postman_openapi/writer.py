"""Serialize description documents to JSON or YAML."""

import json
from pathlib import Path

import yaml

from postman_openapi.converter.document import OpenApiDocument

YAML_SUFFIXES = (".yaml", ".yml")


def resolve_format(output: Path, fmt: str = "auto") -> str:
    """Pick 'json' or 'yaml'; 'auto' decides from the output file suffix."""
    if fmt != "auto":
        return fmt
    return "yaml" if output.suffix.lower() in YAML_SUFFIXES else "json"


def dump_document(doc: OpenApiDocument, fmt: str = "json", indent: int = 2) -> str:
    data = doc.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"


def write_document(doc: OpenApiDocument, output: Path, fmt: str = "auto", indent: int = 2) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_document(doc, resolve_format(output, fmt), indent), encoding="utf-8")
    return output
