"""
Go backend: maps resolved, named schema nodes to Go type declarations.

Each call returns the Go type reference to use at the call site. Composite
named types (structs, named maps and slices) are rendered and handed to the
emission sink once per type name; scalars and anonymous containers are
returned inline.
"""

from __future__ import annotations

import json
import logging

from ...rendering import create_environment, load_template
from ...utils import camel_case, is_named_type, pluralize
from ..config import GeneratorConfig
from ..emitter.base import EmissionSink
from ..schema_ast.nodes import SchemaKind, SchemaNode
from ..session import GenerationSession

logger = logging.getLogger(__name__)

SCALAR_TYPES = {
    SchemaKind.BOOLEAN: "bool",
    SchemaKind.INTEGER: "int",
    SchemaKind.NUMBER: "float64",
    SchemaKind.NULL: "interface{}",
    SchemaKind.ANY: "interface{}",
    SchemaKind.STRING: "string",
}

OPEN_MAP_TYPE = "map[string]interface{}"


class GoBackend:
    """Synthesizes Go type declarations from schema nodes."""

    def __init__(self, config: GeneratorConfig, sink: EmissionSink, session: GenerationSession):
        self.config = config
        self.sink = sink
        self.session = session
        self.jinja_env = create_environment()
        self.struct_template = load_template(self.jinja_env, "struct")
        self.map_template = load_template(self.jinja_env, "map")
        self.slice_template = load_template(self.jinja_env, "slice")
        self.comment_template = load_template(self.jinja_env, "comment")

    def synthesize(self, node: SchemaNode) -> str:
        """
        Return the Go type reference for `node`, emitting declarations as needed.

        Args:
            node: A fully resolved and named schema node

        Returns:
            The type reference, e.g. "*Widget", "TagMap", "[]string" or "int"
        """
        if node.kind is SchemaKind.OBJECT:
            if node.properties:
                return self._synthesize_struct(node)
            if node.pattern_properties:
                return self._synthesize_pattern_map(node)
            return OPEN_MAP_TYPE
        if node.kind is SchemaKind.ARRAY:
            return self._synthesize_slice(node)
        return SCALAR_TYPES[node.kind]

    def _synthesize_struct(self, node: SchemaNode) -> str:
        type_name = camel_case(node.name)
        if not type_name:
            type_name = self.session.next_anonymous_name()

        fields = [{"key": key, "type_ref": self.synthesize(node.properties[key])} for key in sorted(node.properties)]
        code = self.struct_template.render(
            comment=self._comment(node, type_name),
            name=type_name,
            fields=fields,
        )
        self.emit(type_name, code)
        return f"*{type_name}"

    def _synthesize_pattern_map(self, node: SchemaNode) -> str:
        type_ref = ""
        for pattern in sorted(node.pattern_properties):
            value_type = self.synthesize(node.pattern_properties[pattern])
            if is_named_type(value_type):
                type_ref = f"{value_type.removeprefix('*')}Map"
                code = self.map_template.render(
                    comment=self._comment(node, type_ref),
                    name=type_ref,
                    value_type=value_type,
                )
                self.emit(type_ref, code)
            else:
                type_ref = f"map[string]{value_type}"
        return type_ref

    def _synthesize_slice(self, node: SchemaNode) -> str:
        item_type = self.synthesize(node.items) if node.items is not None else SCALAR_TYPES[SchemaKind.ANY]

        type_name = camel_case(node.name)
        if not type_name and is_named_type(item_type):
            type_name = pluralize(item_type.removeprefix("*"))
        if not type_name:
            return f"[]{item_type}"

        code = self.slice_template.render(
            comment=self._comment(node, type_name),
            name=type_name,
            item_type=item_type,
        )
        self.emit(type_name, code)
        return type_name

    def _comment(self, node: SchemaNode, type_name: str) -> str:
        if not self.config.comments:
            return ""
        schema_lines = json.dumps(node.to_dict(), indent=2).splitlines()
        return self.comment_template.render(name=type_name, schema_lines=schema_lines)

    def emit(self, type_name: str, code: str) -> bool:
        """Hand a declaration to the sink unless the type was already emitted.

        Returns:
            True if the declaration was passed to the sink
        """
        if not self.session.mark_processed(type_name):
            logger.debug("Type %s already emitted, skipping", type_name)
            return False
        self.sink.emit(type_name, code)
        return True
