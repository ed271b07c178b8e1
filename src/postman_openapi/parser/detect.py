"""Auto-detect API documentation format."""

import json
from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect the format of an API documentation file.

    Returns: 'openapi', 'postman', or 'unknown'.
    """
    text = file_path.read_text(encoding="utf-8")

    # YAML is a superset of JSON, so this covers most files
    try:
        fmt = _classify(yaml.safe_load(text))
        if fmt:
            return fmt
    except yaml.YAMLError:
        pass

    # Try JSON specifically (for files not parseable as YAML)
    try:
        fmt = _classify(json.loads(text))
        if fmt:
            return fmt
    except json.JSONDecodeError:
        pass

    return "unknown"


def _classify(data) -> str | None:
    if not isinstance(data, dict):
        return None
    if "openapi" in data or "swagger" in data:
        return "openapi"
    info = data.get("info")
    if isinstance(info, dict) and ("_postman_id" in info or "postman" in str(info.get("schema", ""))):
        return "postman"
    if isinstance(data.get("item"), list):
        return "postman"
    return None
