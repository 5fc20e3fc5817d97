"""Document serialization: JSON round-trip for Pluma nodes.

Converts nodes to/from JSON-compatible dicts. Useful for caching parsed
documents, handing them to renderers in other processes, and debugging.

All output is deterministic (sorted keys).

Example:
    from pluma import parse
    from pluma.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure: safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any, TypeAlias

from pluma.errors import SerializationError
from pluma.nodes import (
    Blank,
    Bold,
    Document,
    Header,
    HeaderLevel,
    Image,
    InlineCode,
    Italic,
    Link,
    Paragraph,
    Regular,
)

Node: TypeAlias = (
    Document | Header | Paragraph | Image | Blank | Regular | Bold | Italic | InlineCode | Link
)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Header": Header,
    "Paragraph": Paragraph,
    "Image": Image,
    "Blank": Blank,
    "Regular": Regular,
    "Bold": Bold,
    "Italic": Italic,
    "InlineCode": InlineCode,
    "Link": Link,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Child tuples become lists; header levels become ints.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return [to_dict(item) for item in value]
    if isinstance(value, HeaderLevel):
        return value.value
    # Primitives: str
    if isinstance(value, str):
        return value
    return to_dict(value)


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a node from a dict produced by to_dict().

    Raises:
        SerializationError: Unknown or missing ``_type``, or a bad level.
    """
    type_name = data.get("_type")
    cls = _NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise SerializationError(f"unknown node type: {type_name!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name == "level":
            try:
                kwargs[f.name] = HeaderLevel(value)
            except ValueError as e:
                raise SerializationError(f"invalid header level: {value!r}") from e
        elif isinstance(value, list):
            kwargs[f.name] = tuple(from_dict(item) for item in value)
        else:
            kwargs[f.name] = value

    return cls(**kwargs)


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string with sorted keys."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(text: str) -> Node:
    """Deserialize a node from a JSON string.

    Raises:
        SerializationError: The JSON describes an unknown node type.
    """
    return from_dict(json.loads(text))
