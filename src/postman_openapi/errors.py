"""Exceptions raised outside the conversion core."""


class CollectionError(ValueError):
    """The input could not be read as a Postman collection."""
