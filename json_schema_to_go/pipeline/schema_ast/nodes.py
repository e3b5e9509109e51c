"""
Node definitions for the JSON Schema tree.

A document is parsed into a tree of SchemaNode objects. Each parent owns its
children; $ref placeholders are later overwritten in place with a copy of the
node they point to.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from ..errors import DecodeError


class SchemaKind(str, Enum):
    """Closed set of schema types understood by the generator."""

    ANY = "any"  # No "type" keyword
    ARRAY = "array"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    NULL = "null"
    OBJECT = "object"
    STRING = "string"

    @classmethod
    def parse(cls, value: Any) -> SchemaKind:
        """Map a raw "type" value to a kind.

        Raises:
            DecodeError: If the value is not one of the recognized type strings
        """
        if isinstance(value, str) and value != cls.ANY.value:
            try:
                return cls(value)
            except ValueError:
                pass
        raise DecodeError(f'unknown schema type "{value}"')


@dataclass
class SchemaNode:
    """One element of a parsed schema document."""

    title: str = ""
    id: str = ""
    kind: SchemaKind = SchemaKind.ANY
    description: str = ""
    definitions: dict[str, SchemaNode] = field(default_factory=dict)
    properties: dict[str, SchemaNode] = field(default_factory=dict)
    pattern_properties: dict[str, SchemaNode] = field(default_factory=dict)
    ref: str = ""
    items: SchemaNode | None = None

    @property
    def name(self) -> str:
        """The node's name: its title, falling back to its id."""
        return self.title or self.id

    def children(self) -> list[SchemaNode]:
        """All owned child nodes: definitions, properties, pattern properties, items."""
        nodes = [*self.definitions.values(), *self.properties.values(), *self.pattern_properties.values()]
        if self.items is not None:
            nodes.append(self.items)
        return nodes

    def replace_with(self, other: SchemaNode) -> None:
        """Overwrite every field of this node with a deep copy of `other`."""
        replacement = copy.deepcopy(other)
        for f in fields(self):
            setattr(self, f.name, getattr(replacement, f.name))

    @classmethod
    def from_dict(cls, data: Any, path: str = "#") -> SchemaNode:
        """
        Build a node tree from a decoded JSON value.

        Args:
            data: The decoded JSON object
            path: Location of `data` in its document (for error messages)

        Returns:
            The root SchemaNode

        Raises:
            DecodeError: If a schema is not a JSON object or has an unknown type
        """
        if not isinstance(data, dict):
            raise DecodeError(f"schema at {path} must be an object, got {type(data).__name__}")

        kind = SchemaKind.ANY
        if "type" in data:
            try:
                kind = SchemaKind.parse(data["type"])
            except DecodeError as e:
                raise DecodeError(f"{e} at {path}") from e

        items = data.get("items")
        return cls(
            title=_string_field(data, "title", path),
            id=_string_field(data, "id", path),
            kind=kind,
            description=_string_field(data, "description", path),
            definitions=_parse_map(data, "definitions", path),
            properties=_parse_map(data, "properties", path),
            pattern_properties=_parse_map(data, "patternProperties", path),
            ref=_string_field(data, "$ref", path),
            items=cls.from_dict(items, f"{path}/items") if items is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to JSON Schema keys, omitting empty fields."""
        out: dict[str, Any] = {}
        if self.title:
            out["title"] = self.title
        if self.id:
            out["id"] = self.id
        if self.kind is not SchemaKind.ANY:
            out["type"] = self.kind.value
        if self.description:
            out["description"] = self.description
        for key, children in (
            ("definitions", self.definitions),
            ("properties", self.properties),
            ("patternProperties", self.pattern_properties),
        ):
            if children:
                out[key] = {k: children[k].to_dict() for k in sorted(children)}
        if self.ref:
            out["$ref"] = self.ref
        if self.items is not None:
            out["items"] = self.items.to_dict()
        return out


def _string_field(data: dict[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f'"{key}" at {path} must be a string')
    return value


def _parse_map(data: dict[str, Any], key: str, path: str) -> dict[str, SchemaNode]:
    raw = data.get(key)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DecodeError(f'"{key}" at {path} must be an object')
    return {name: SchemaNode.from_dict(value, f"{path}/{key}/{name}") for name, value in raw.items()}
