"""Path templating and query parameter construction."""

from postman_openapi.converter.document import Parameter
from postman_openapi.parser.base import KeyValue


def template_path(segments: list[str]) -> str:
    """Join Postman path segments into an OpenAPI path key.

    ``["users", ":id"]`` becomes ``/users/{id}``; no segments gives ``/``.
    """
    parts = ["{" + s[1:] + "}" if s.startswith(":") else s for s in segments]
    return "/" + "/".join(parts)


def query_parameters(query: list[KeyValue]) -> list[Parameter]:
    """One query parameter per entry, in input order.

    NOTE: ``required`` is True only when the sample value is the empty
    string, so an unfilled value marks the parameter as required. This may
    be an inversion of the intended rule; it is kept deliberately and is
    pinned by tests. Entries without a key are skipped.
    """
    return [
        Parameter(
            name=q.key,
            location="query",
            required=q.value == "",
            schema={"type": "string"},
        )
        for q in query
        if q.key is not None
    ]
