"""Request body schema inference.

Schemas are derived from a single sample request: the declared body mode,
the ``Content-Type`` header and, for JSON, the top-level keys of the raw
payload. Nested values are typed but never expanded.
"""

import json
import logging

from postman_openapi.converter.document import MediaType, RequestBody
from postman_openapi.parser.base import KeyValue
from postman_openapi.parser.base import RequestBody as PostmanBody

logger = logging.getLogger(__name__)

JSON = "application/json"
STRING_SCHEMA_TYPES = {"text/html", "application/xml"}
DEFAULT_RAW_TYPE = "text/plain"


def infer_request_body(body: PostmanBody, headers: list[KeyValue] | None, item_name: str = "") -> RequestBody:
    """Build the requestBody for a request.

    Problems with a single request (malformed JSON, unknown mode) are
    logged and leave ``content`` empty; they never abort the conversion.
    """
    request_body = RequestBody()

    if body.mode == "raw":
        entry = _raw_content(body.raw, content_type(headers), item_name)
        if entry:
            media_type, schema = entry
            request_body.content[media_type] = MediaType(schema=schema)
    elif body.mode == "formdata":
        request_body.content["multipart/form-data"] = MediaType(schema=_formdata_schema(body))
    elif body.mode == "urlencoded":
        request_body.content["application/x-www-form-urlencoded"] = MediaType(schema=_urlencoded_schema(body))
    else:
        logger.warning("Unhandled body mode for %s: %s", item_name, body.mode)

    return request_body


def content_type(headers: list[KeyValue] | None) -> str | None:
    """Value of the first header keyed exactly ``Content-Type``, unmodified."""
    for header in headers or []:
        if header.key == "Content-Type":
            return header.value
    return None


def json_type(value) -> str:
    """Map a decoded JSON value to an OpenAPI type name."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"  # dict and null


def json_schema(raw: str) -> dict:
    """Shallow object schema from one JSON sample.

    Raises ValueError when ``raw`` is not JSON or is JSON ``null``. A
    payload that is not an object (array, scalar) has no top-level keys.
    """
    parsed = json.loads(raw)
    if parsed is None:
        raise ValueError("body is JSON null")
    keys = parsed.items() if isinstance(parsed, dict) else []
    return {
        "type": "object",
        "properties": {key: {"type": json_type(value)} for key, value in keys},
    }


def _raw_content(raw: str | None, media_type: str | None, item_name: str) -> tuple[str, dict] | None:
    if media_type == JSON and raw:
        try:
            return JSON, json_schema(raw)
        except (ValueError, RecursionError) as e:
            logger.warning("Failed to parse JSON body for %s: %s", item_name, e)
            return None
    if media_type in STRING_SCHEMA_TYPES:
        return media_type, {"type": "string"}
    return DEFAULT_RAW_TYPE, {"type": "string"}


def _formdata_schema(body: PostmanBody) -> dict:
    properties = {}
    for field in body.formdata or []:
        if field.key is None:
            continue
        if field.type == "file":
            properties[field.key] = {"type": "string", "format": "binary"}
        else:
            properties[field.key] = {"type": "string"}
    return {"type": "object", "properties": properties}


def _urlencoded_schema(body: PostmanBody) -> dict:
    return {
        "type": "object",
        "properties": {param.key: {"type": "string"} for param in body.urlencoded or [] if param.key is not None},
    }
