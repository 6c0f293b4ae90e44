# streaming_catalog/domain/errors.py

"""Error taxonomy shared by the catalog, registry and ledger."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all errors raised by the in-memory collections."""


class DuplicateKeyError(CatalogError):
    """An entry with the same key (or an equal subscription) already exists."""


class NotFoundError(CatalogError, LookupError):
    """A film, person or subscription lookup missed."""


class PersonNotFoundError(NotFoundError):
    """A subscription references a document that is not in the registry."""


class InvalidArgumentError(CatalogError, ValueError):
    """Malformed record or out-of-range value."""


class OutOfMemoryError(CatalogError, MemoryError):
    """Allocation failed while inserting; the collection was rolled back."""
