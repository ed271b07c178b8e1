"""Collection tree flattening.

Walks the folder/request tree depth-first and writes one operation per
request into a DocumentBuilder, keyed by templated path and lower-cased
method.
"""

import logging
from collections.abc import Iterator, Mapping

from postman_openapi.converter.body import infer_request_body
from postman_openapi.converter.document import DocumentBuilder, OpenApiDocument, Operation
from postman_openapi.converter.params import query_parameters, template_path
from postman_openapi.parser.base import Collection, Item
from postman_openapi.parser.postman import parse_collection

logger = logging.getLogger(__name__)

BREADCRUMB_SEPARATOR = " / "


def convert(
    collection: Collection | Mapping,
    title: str | None = None,
    version: str | None = None,
) -> OpenApiDocument:
    """Convert a Postman collection into an OpenAPI description document.

    ``title`` and ``version`` override the values taken from the
    collection's ``info`` block.
    """
    collection = parse_collection(collection)
    info = collection.info
    builder = DocumentBuilder(
        title=title or info.name,
        description=info.description,
        version=version or info.version,
    )
    flatten(collection.item, builder)
    logger.debug("Converted %d paths", len(builder.paths))
    return builder.build()


def breadcrumb(parent: str, name: str) -> str:
    return f"{parent}{BREADCRUMB_SEPARATOR}{name}" if parent else name


def flatten(items: list[Item], builder: DocumentBuilder, parent: str = "") -> None:
    """Add every request under ``items`` to ``builder``.

    A node's children are visited before its own request. The walk keeps an
    explicit stack so folder depth is not limited by the recursion limit.
    """
    # Each frame: (remaining siblings, their breadcrumb, owner waiting on them)
    stack: list[tuple[Iterator[Item], str, tuple[Item, str] | None]] = [(iter(items), parent, None)]
    while stack:
        siblings, crumb, owner = stack[-1]
        item = next(siblings, None)
        if item is None:
            stack.pop()
            if owner is not None:
                add_request(*owner, builder)
            continue

        name = breadcrumb(crumb, item.name)
        if item.item:
            stack.append((iter(item.item), name, (item, name) if item.request else None))
        elif item.request:
            add_request(item, name, builder)


def add_request(item: Item, summary: str, builder: DocumentBuilder) -> None:
    """Convert one request node into an operation."""
    request = item.request
    method = request.method.lower()
    if not method:
        logger.warning("Skipping %s: request has no method", summary)
        return

    path = template_path(request.url.segments())
    operation = Operation(summary=summary, description=request.description or "")

    if request.body:
        operation.request_body = infer_request_body(request.body, request.header, summary)

    if request.url.query:
        operation.parameters = query_parameters(request.url.query)

    builder.add_operation(path, method, operation)
