"""Postman Collection v2.x loader.

Reads Postman exported JSON files (or already-decoded mappings) into
Collection models.
"""

import json
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from postman_openapi.errors import CollectionError
from postman_openapi.parser.base import Collection


def load_collection(file_path: Path) -> Collection:
    """Read a Postman collection file into a Collection."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CollectionError(f"{file_path} is not valid JSON: {e}") from e
    return parse_collection(data)


def parse_collection(data: Collection | Mapping) -> Collection:
    """Validate a decoded collection document.

    Missing sections are filled with defaults; only structurally wrong
    input (for example ``item`` that is not a list) is rejected.
    """
    if isinstance(data, Collection):
        return data
    if not isinstance(data, Mapping):
        raise CollectionError(f"Collection must be a JSON object, got {type(data).__name__}")
    try:
        return Collection.model_validate(dict(data))
    except ValidationError as e:
        raise CollectionError(f"Invalid collection: {e}") from e
