import unittest

from pack_schema import config
from pack_schema.assertions import checked, validate
from pack_schema.errors import SchemaError, ValidationError
from pack_schema.predicates import is_string
from tests._util import PET


class ValidateTests(unittest.TestCase):
    def setUp(self):
        self.good = {"kind": "cat", "toy": {"age": 1, "name": "mouse"}}

    def tearDown(self):
        config.configure(validation_enabled=True)

    def test_returns_value_unchanged(self):
        self.assertIs(validate(self.good, schema=PET), self.good)

    def test_raises_with_explanation(self):
        bad = {"kind": "cow", "toy": {"age": -1, "name": "mouse"}}
        with self.assertRaisesRegex(ValidationError, r"root\.toy\.age: invalid -1") as cm:
            validate(bad, schema=PET)
        self.assertEqual(cm.exception.explanation["invalid"][0], ("kind", "cow"))
        self.assertIsInstance(cm.exception, SchemaError)

    def test_exact_mode_rejects_extras(self):
        value = dict(self.good, owner="me")
        self.assertIs(validate(value, schema=PET), value)
        with self.assertRaisesRegex(ValidationError, r"root\.owner: extra 'me'"):
            validate(value, schema=PET, exact=True)

    def test_disabled_is_pure_pass_through(self):
        calls = []

        def spy(x):
            calls.append(x)
            return False

        off = config.Settings(validation_enabled=False)
        value = object()
        self.assertIs(validate(value, schema={"a": spy}, settings=off), value)
        self.assertEqual(calls, [])

        config.configure(validation_enabled=False)
        self.assertIs(validate(value, schema={"a": spy}), value)
        self.assertEqual(calls, [])


class CheckedTests(unittest.TestCase):
    def tearDown(self):
        config.configure(validation_enabled=True)

    def test_checks_return_value(self):
        @checked({"name": is_string}, exact=True)
        def make(name, **extra):
            return dict(name=name, **extra)

        self.assertEqual(make("x"), {"name": "x"})
        self.assertEqual(make.__name__, "make")
        with self.assertRaises(ValidationError):
            make(1)
        with self.assertRaises(ValidationError):
            make("x", age=2)

    def test_disabled_at_decoration_returns_function(self):
        config.configure(validation_enabled=False)

        def make():
            return 5

        self.assertIs(checked({"name": is_string})(make), make)


class ExactFlagTests(unittest.TestCase):
    def test_validate_rejects_non_bool_exact(self):
        for bad in (1, "yes", None):
            with self.assertRaisesRegex(SchemaError, "exact must be a bool", msg=repr(bad)):
                validate({"kind": "cat"}, schema=PET, exact=bad)

    def test_flag_checked_even_when_disabled(self):
        off = config.Settings(validation_enabled=False)
        with self.assertRaises(SchemaError):
            validate({}, schema=PET, exact=0, settings=off)

    def test_checked_rejects_non_bool_exact(self):
        with self.assertRaisesRegex(SchemaError, "exact must be a bool"):
            checked({"name": is_string}, exact="true")
