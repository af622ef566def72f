import unittest

import pandas as pd

from pack_schema.errors import SchemaError
from pack_schema.explainer import explain
from pack_schema.predicates import is_number, is_string
from pack_schema.report import flatten, to_frame, to_markdown_report


class ReportTests(unittest.TestCase):
    def setUp(self):
        schema = {"name": is_string, "toy": {"age": is_number}}
        value = {"name": None, "toy": {"age": "old", "colour": "red"}, "x": True}
        self.explanation = explain(schema, value)

    def test_flatten_paths(self):
        self.assertEqual(
            list(flatten(self.explanation)),
            [
                ("root.name", "invalid", None),
                ("root.toy.age", "invalid", "old"),
                ("root.x", "extra", True),
                ("root.toy.colour", "extra", "red"),
            ],
        )

    def test_flatten_custom_root(self):
        paths = [path for path, _, _ in flatten(self.explanation, root="cfg")]
        self.assertTrue(all(path.startswith("cfg.") for path in paths))

    def test_to_frame(self):
        df = to_frame(self.explanation)
        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(list(df.columns), ["path", "kind", "value"])
        self.assertEqual(len(df), 4)
        self.assertEqual(list(df[df["kind"] == "extra"]["path"]), ["root.x", "root.toy.colour"])

    def test_to_frame_empty(self):
        df = to_frame({"invalid": [], "extra": []})
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), ["path", "kind", "value"])

    def test_markdown_report(self):
        md = to_markdown_report(self.explanation)
        self.assertIn("## Invalid", md)
        self.assertIn("- **root.name**: null", md)
        self.assertIn("- **root.toy.age**: 'old'", md)
        self.assertIn("## Extra", md)
        self.assertIn("- **root.x**: true", md)

    def test_markdown_report_empty_sections(self):
        md = to_markdown_report({"invalid": [], "extra": []}, heading_level=3)
        self.assertEqual(md, "### Invalid\n_none_\n\n### Extra\n_none_")

    def test_malformed_explanation_rejected(self):
        with self.assertRaises(SchemaError):
            list(flatten({"invalid": []}))
        with self.assertRaises(SchemaError):
            to_frame(None)


class ReportLeafValueTests(unittest.TestCase):
    def test_list_of_pairs_value_stays_a_leaf(self):
        explanation = explain({"pairs": is_string}, {"pairs": [("a", 1)]})
        self.assertEqual(
            list(flatten(explanation)),
            [("root.pairs", "invalid", [("a", 1)])],
        )

    def test_list_of_pairs_extra_stays_a_leaf(self):
        explanation = explain({}, {"more": [("k", "v"), ("x", 2)]})
        self.assertEqual(
            list(flatten(explanation)),
            [("root.more", "extra", [("k", "v"), ("x", 2)])],
        )

    def test_list_of_pairs_inside_nested_pack(self):
        explanation = explain({"toy": {"tags": is_string}}, {"toy": {"tags": [("a", 1)]}})
        self.assertEqual(
            list(flatten(explanation)),
            [("root.toy.tags", "invalid", [("a", 1)])],
        )

    def test_entries_must_be_pairs(self):
        for bad in (
            {"invalid": [1], "extra": []},
            {"invalid": [], "extra": [("a", 1, 2)]},
            {"invalid": [("a", 1)], "extra": ["ab"]},
        ):
            with self.assertRaises(SchemaError, msg=repr(bad)):
                list(flatten(bad))
            with self.assertRaises(SchemaError, msg=repr(bad)):
                to_markdown_report(bad)
