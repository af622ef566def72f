import unittest

from pack_schema.errors import SchemaError
from pack_schema.rules import Nested, Pack, Predicate, compile_pack, to_rule
from tests._util import PET, boom


class RuleTests(unittest.TestCase):
    def test_callable_becomes_predicate(self):
        rule = to_rule(str.isdigit)
        self.assertIsInstance(rule, Predicate)
        self.assertFalse(rule.nested)

    def test_mapping_becomes_nested(self):
        rule = to_rule({"a": callable})
        self.assertIsInstance(rule, Nested)
        self.assertTrue(rule.nested)
        self.assertIsInstance(rule.pack, Pack)

    def test_non_rule_value_raises(self):
        for bad in (1, "string", [callable], None):
            with self.assertRaises(SchemaError, msg=repr(bad)):
                to_rule(bad)

    def test_predicate_coerces_truthiness(self):
        self.assertIs(Predicate(len).check([1]), True)
        self.assertIs(Predicate(len).check([]), False)

    def test_predicate_exception_is_false(self):
        self.assertIs(Predicate(boom).check(1), False)
        with self.assertLogs("pack_schema.rules", level="DEBUG"):
            Predicate(boom).check(1)


class CompilePackTests(unittest.TestCase):
    def test_schema_must_be_mapping(self):
        for bad in ([], 5, "abc", None):
            with self.assertRaisesRegex(SchemaError, "schema must be a mapping"):
                compile_pack(bad)

    def test_compile_preserves_order_and_nesting(self):
        pack = compile_pack(PET)
        self.assertEqual(list(pack), ["kind", "toy"])
        self.assertTrue(pack["toy"].nested)
        self.assertEqual(list(pack["toy"].pack), ["age", "name"])

    def test_compile_is_idempotent(self):
        pack = compile_pack(PET)
        self.assertIs(compile_pack(pack), pack)

    def test_compile_does_not_mutate_input(self):
        raw = {"toy": {"age": callable}}
        compile_pack(raw)
        self.assertEqual(raw, {"toy": {"age": callable}})

    def test_malformed_nested_rule_raises(self):
        with self.assertRaises(SchemaError):
            compile_pack({"toy": {"age": 42}})
