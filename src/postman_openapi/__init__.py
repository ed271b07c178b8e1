"""Convert Postman collections into OpenAPI 3.0 description documents."""

from postman_openapi.converter.flatten import convert

__all__ = ["convert"]
