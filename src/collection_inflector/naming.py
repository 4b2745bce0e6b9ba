"""Derive document collection names from class names.

A document class is stored in the collection named by its @collection_name
decorator when it has one, otherwise in the camelized plural of its class
name. A partition key, when given, prefixes the name.
"""

from __future__ import annotations

from typing import Optional

from .inflection import camelize, pluralize

PARTITION_SEPARATOR = "-"
COLLECTION_NAME_ATTR = "__collection_name__"


def collection_name(name: str):
    """Class decorator pinning the collection a document type is stored in.

    Subclasses inherit the name unless they declare their own.
    """
    if not name:
        raise ValueError("collection name must not be empty")

    def decorator(cls):
        setattr(cls, COLLECTION_NAME_ATTR, name)
        return cls

    return decorator


def class_name_to_collection_name(class_name: str, partition_key: Optional[str] = None) -> str:
    """Convert a CamelCase document class name to a camelCase plural collection name.

    Examples:
      Customer      -> customers
      CustomerOrder -> customerOrders
      Person        -> people
      Company       -> companies
    """
    return _with_partition(camelize(pluralize(class_name)), partition_key)


def collection_name_for(document_cls: type, partition_key: Optional[str] = None) -> str:
    explicit = getattr(document_cls, COLLECTION_NAME_ATTR, None)
    # The derived name is used with or without a partition key, so an
    # undecorated type never ends up in a bare "<key>-" collection.
    if explicit:
        return _with_partition(explicit, partition_key)
    return class_name_to_collection_name(document_cls.__name__, partition_key)


def _with_partition(name: str, partition_key: Optional[str]) -> str:
    if not partition_key:
        return name
    return f"{partition_key}{PARTITION_SEPARATOR}{name}"
