import json
from unittest import TestCase

import pytest

from json_schema_to_go.pipeline import CollectingSink, DecodeError, GeneratorConfig, SchemaProcessor, SchemaReferenceError, expand_patterns


class TestSchemaProcessor(TestCase):
    def setUp(self):
        self.sink = CollectingSink()
        self.processor = SchemaProcessor(GeneratorConfig(comments=False), self.sink)

    def load(self, key, schema):
        self.processor.load_document(json.dumps(schema), key)

    def test_widget_holder(self):
        self.load(
            "a",
            {
                "definitions": {
                    "Widget": {
                        "type": "object",
                        "properties": {"id": {"type": "string"}, "count": {"type": "integer"}},
                    }
                }
            },
        )
        self.load("b", {"type": "object", "properties": {"w": {"$ref": "a#/definitions/Widget"}}})

        self.assertEqual(self.processor.process(), ["interface{}", "*B"])
        self.assertEqual(list(self.sink.declarations), ["Widget", "B"])
        self.assertIn("    ID string `json:\"id,omitempty\"", self.sink.declarations["Widget"])
        self.assertIn("    Count int `json:\"count,omitempty\"", self.sink.declarations["Widget"])
        self.assertIn("    W *Widget `json:\"w,omitempty\"", self.sink.declarations["B"])

    def test_alias_chain(self):
        self.load(
            "c",
            {
                "type": "object",
                "definitions": {
                    "Alias": {"$ref": "#/definitions/Real"},
                    "Real": {"type": "object", "properties": {"v": {"type": "boolean"}}},
                },
                "properties": {"x": {"$ref": "#/definitions/Alias"}},
            },
        )
        self.assertEqual(self.processor.process(), ["*C"])
        self.assertEqual(list(self.sink.declarations), ["Real", "C"])
        self.assertIn("    X *Real `json:\"x,omitempty\"", self.sink.declarations["C"])

    def test_roots_are_processed_in_load_order(self):
        self.load("second", {"title": "Second", "type": "object", "properties": {"a": {"type": "string"}}})
        self.load("first", {"title": "First", "type": "object", "properties": {"a": {"type": "string"}}})
        self.processor.process()
        self.assertEqual(list(self.sink.declarations), ["Second", "First"])

    def test_shared_type_is_emitted_once_across_documents(self):
        self.load("shared", {"definitions": {"Foo": {"type": "object", "properties": {"x": {"type": "integer"}}}}})
        self.load("one", {"type": "array", "items": {"$ref": "shared#/definitions/Foo"}})
        self.load("two", {"type": "array", "items": {"$ref": "shared#/definitions/Foo"}})
        self.assertEqual(self.processor.process(), ["interface{}", "One", "Two"])
        self.assertEqual(list(self.sink.declarations), ["Foo", "One", "Two"])
        self.assertEqual(self.sink.declarations["One"], "type One []*Foo\n")

    def test_reference_error_propagates(self):
        self.load("doc", {"properties": {"x": {"$ref": "#/definitions/Missing"}}})
        with self.assertRaises(SchemaReferenceError):
            self.processor.process()
        self.assertEqual(self.sink.declarations, {})

    def test_output_does_not_depend_on_load_order(self):
        documents = {
            "a": {"type": "object", "properties": {"x": {"type": "string"}}},
            "b": {"type": "object", "properties": {"p": {"$ref": "a#"}}},
        }
        outputs = []
        for order in (["a", "b"], ["b", "a"]):
            sink = CollectingSink()
            processor = SchemaProcessor(GeneratorConfig(comments=False), sink)
            for key in order:
                processor.load_document(json.dumps(documents[key]), key)
            processor.process()
            outputs.append(dict(sink.declarations))

        self.assertEqual(outputs[0], outputs[1])
        self.assertIn("    P *P `json:\"p,omitempty\"", outputs[0]["B"])
        self.assertNotIn("*A `", outputs[0]["B"])


def test_load_files_uses_file_stem(tmp_path):
    (tmp_path / "a.json").write_text(json.dumps({"title": "A", "type": "object", "properties": {"n": {"type": "number"}}}))
    processor = SchemaProcessor(GeneratorConfig(comments=False))
    processor.load_files([tmp_path / "a.json"])
    assert list(processor.documents) == ["a"]
    assert processor.process() == ["*A"]


def test_load_files_missing_file(tmp_path):
    with pytest.raises(DecodeError, match="Cannot read"):
        SchemaProcessor().load_files([tmp_path / "missing.json"])


def test_expand_patterns(tmp_path):
    for name in ("b.json", "a.json", "c.txt"):
        (tmp_path / name).write_text("{}")
    files = expand_patterns([str(tmp_path / "c.txt"), str(tmp_path / "*.json"), str(tmp_path / "a.json")])
    assert files == [str(tmp_path / "c.txt"), str(tmp_path / "a.json"), str(tmp_path / "b.json")]
