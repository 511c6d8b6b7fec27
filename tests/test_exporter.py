import json
import unittest

import shape_schema as ss
from shape_schema import ValidationError
from shape_schema.exporter import dump_json_schema, to_json_schema
from tests._util import tmp_dir


class DescribeTests(unittest.TestCase):
    def test_primitives(self):
        self.assertEqual(
            ss.string().min(1).max(5).pattern("[a-z]+").describe(),
            {"type": "string", "minLength": 1, "maxLength": 5, "pattern": "[a-z]+"},
        )
        self.assertEqual(ss.number().min(0).max(9).describe(), {"type": "number", "minimum": 0, "maximum": 9})
        self.assertEqual(ss.number().integer().describe(), {"type": "integer"})
        self.assertEqual(ss.boolean().describe(), {"type": "boolean"})

    def test_coerced_schemas_describe_like_their_targets(self):
        self.assertEqual(ss.coerce.number().integer().describe(), {"type": "integer"})
        self.assertEqual(ss.coerce.boolean().describe(), {"type": "boolean"})
        self.assertEqual(ss.coerce.string().max(3).describe(), {"type": "string", "maxLength": 3})

    def test_array(self):
        self.assertEqual(
            ss.array(ss.string()).min(1).max(3).describe(),
            {"type": "array", "items": {"type": "string"}, "minItems": 1, "maxItems": 3},
        )

    def test_object_required_keys(self):
        schema = ss.object({
            "name": ss.string().min(1),
            "age": ss.number().optional(),
            "nick": ss.string().nullable(),
        })
        self.assertEqual(
            schema.describe(),
            {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "age": {"type": "number"},
                    "nick": {"oneOf": [{"type": "string"}, {"type": "null"}]},
                },
                "required": ["name", "nick"],
            },
        )

    def test_object_without_required_keys_omits_list(self):
        doc = ss.object({"a": ss.string().optional()}).describe()
        self.assertNotIn("required", doc)

    def test_sum_types_record_and_date(self):
        self.assertEqual(ss.enum(["a", "b"]).describe(), {"type": "string", "enum": ["a", "b"]})
        self.assertEqual(ss.literal("x").describe(), {"const": "x"})
        self.assertEqual(
            ss.union([ss.string(), ss.number()]).describe(),
            {"oneOf": [{"type": "string"}, {"type": "number"}]},
        )
        self.assertEqual(
            ss.record(ss.number()).describe(),
            {"type": "object", "additionalProperties": {"type": "number"}},
        )
        self.assertEqual(ss.date().describe(), {"type": "string", "format": "date-time"})

    def test_modifiers(self):
        self.assertEqual(ss.string().optional().describe(), {"type": "string"})
        self.assertEqual(ss.string().transform(len).describe(), {"type": "string"})


class ExporterTests(unittest.TestCase):
    def setUp(self):
        self.schema = ss.object({
            "tags": ss.array(ss.string().min(2)),
            "when": ss.date().min("2024-01-01"),
        })

    def test_describe_is_idempotent_after_failed_parse(self):
        first = to_json_schema(self.schema)
        with self.assertRaises(ValidationError):
            self.schema.parse({"tags": ["x"], "when": "never"})
        self.assertEqual(to_json_schema(self.schema), first)
        self.assertEqual(self.schema.describe(), self.schema.describe())

    def test_result_is_a_private_copy(self):
        doc = to_json_schema(self.schema)
        doc["properties"]["tags"]["items"]["minLength"] = 99
        self.assertEqual(to_json_schema(self.schema)["properties"]["tags"]["items"]["minLength"], 2)

    def test_rejects_non_schema(self):
        with self.assertRaises(TypeError):
            to_json_schema({"type": "string"})

    def test_dump_json_schema_writes_file(self):
        with tmp_dir() as d:
            target = d / "nested" / "schema.json"
            dump_json_schema(self.schema, target)
            self.assertEqual(json.loads(target.read_text(encoding="utf-8")), to_json_schema(self.schema))
