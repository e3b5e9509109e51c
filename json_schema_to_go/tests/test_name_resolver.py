from unittest import TestCase

from json_schema_to_go.pipeline.analyzer import NameAssigner
from json_schema_to_go.pipeline.schema_ast import SchemaKind, SchemaNode
from json_schema_to_go.pipeline.session import GenerationSession


def array_of(item, **kwargs):
    return SchemaNode(kind=SchemaKind.ARRAY, items=item, **kwargs)


class TestNameAssigner(TestCase):
    def setUp(self):
        self.session = GenerationSession()
        self.assigner = NameAssigner(self.session)

    def test_map_children_are_named_after_their_key(self):
        root = SchemaNode(
            definitions={"Def": SchemaNode()},
            properties={"prop": SchemaNode(), "titled": SchemaNode(title="Custom")},
            pattern_properties={"^p$": SchemaNode()},
        )
        self.assigner.assign_names(root)
        self.assertEqual(root.definitions["Def"].name, "Def")
        self.assertEqual(root.properties["prop"].name, "prop")
        self.assertEqual(root.properties["titled"].name, "Custom")
        self.assertEqual(root.pattern_properties["^p$"].name, "^p$")

    def test_nested_properties(self):
        root = SchemaNode(properties={"outer": SchemaNode(properties={"inner": SchemaNode()})})
        self.assigner.assign_names(root)
        self.assertEqual(root.properties["outer"].properties["inner"].name, "inner")

    def test_items_are_named_after_their_array(self):
        root = SchemaNode(properties={"tags": array_of(SchemaNode(kind=SchemaKind.STRING))})
        self.assigner.assign_names(root)
        self.assertEqual(root.properties["tags"].items.name, "tagsItem")
        self.assertEqual(self.session.anonymous_count, 0)

    def test_unnamed_array_gets_an_anonymous_name(self):
        first = array_of(SchemaNode())
        second = array_of(SchemaNode())
        self.assigner.assign_names(first)
        self.assigner.assign_names(second)
        self.assertEqual(first.name, "AnonymousObject1")
        self.assertEqual(first.items.name, "AnonymousObject1Item")
        self.assertEqual(second.name, "AnonymousObject2")
        self.assertEqual(second.items.name, "AnonymousObject2Item")

    def test_named_items_keep_their_name(self):
        root = array_of(SchemaNode(title="Widget"))
        self.assigner.assign_names(root)
        self.assertEqual(root.items.name, "Widget")
        self.assertEqual(root.name, "")

    def test_nested_arrays(self):
        root = SchemaNode(properties={"rows": array_of(array_of(SchemaNode(kind=SchemaKind.INTEGER)))})
        self.assigner.assign_names(root)
        rows = root.properties["rows"]
        self.assertEqual(rows.items.name, "rowsItem")
        self.assertEqual(rows.items.items.name, "rowsItemItem")

    def test_idempotent(self):
        root = SchemaNode(properties={"list": array_of(array_of(SchemaNode()))})
        self.assigner.assign_names(root)
        before = root.to_dict()
        self.assigner.assign_names(root)
        self.assertEqual(root.to_dict(), before)
        self.assertEqual(self.session.anonymous_count, 0)

    def test_root_is_named_after_reference_key(self):
        root = SchemaNode(kind=SchemaKind.OBJECT)
        self.assigner.assign_root("b", root)
        self.assertEqual(root.name, "b")

        titled = SchemaNode(title="Order")
        self.assigner.assign_root("orders", titled)
        self.assertEqual(titled.name, "Order")

    def test_sessions_are_isolated(self):
        NameAssigner(GenerationSession()).assign_names(array_of(SchemaNode()))
        root = array_of(SchemaNode())
        self.assigner.assign_names(root)
        self.assertEqual(root.name, "AnonymousObject1")
