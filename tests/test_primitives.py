import re
import unittest

import shape_schema as ss
from shape_schema import ValidationError
from tests._util import catch, issue_pairs


class StringSchemaTests(unittest.TestCase):
    def test_accepts_string(self):
        self.assertEqual(ss.string().parse("hello"), "hello")

    def test_rejects_non_string(self):
        for bad in (42, None, True, ["a"], {"a": 1}):
            with self.assertRaises(ValidationError):
                ss.string().parse(bad)

    def test_default_type_message(self):
        self.assertEqual(issue_pairs(catch(ss.string(), 42)), [("", "Expected string")])

    def test_min_and_max(self):
        schema = ss.string().min(3).max(5)
        self.assertEqual(schema.parse("abc"), "abc")
        self.assertEqual(schema.parse("hello"), "hello")
        self.assertEqual(
            issue_pairs(catch(schema, "toolong")),
            [("", "String must be at most 5 characters")],
        )

    def test_fail_fast_reports_only_first_constraint(self):
        schema = ss.string().min(3).max(5)
        err = catch(schema, "ab")
        self.assertEqual(issue_pairs(err), [("", "String must be at least 3 characters")])

    def test_pattern_requires_full_match(self):
        schema = ss.string().pattern(r"\d+")
        self.assertEqual(schema.parse("123"), "123")
        self.assertEqual(
            issue_pairs(catch(schema, "12a")),
            [("", r"String must match pattern \d+")],
        )

    def test_pattern_accepts_compiled_regex(self):
        schema = ss.string().pattern(re.compile("[a-z]+", re.IGNORECASE))
        self.assertEqual(schema.parse("AbC"), "AbC")

    def test_chained_checks_run_in_order(self):
        schema = ss.string().min(2).max(5).pattern("[a-z]+")
        self.assertEqual(schema.parse("abc"), "abc")
        self.assertIn("at least", catch(schema, "a").issues[0].message)
        self.assertIn("at most", catch(schema, "abcdef").issues[0].message)
        self.assertIn("pattern", catch(schema, "AB").issues[0].message)

    def test_with_message_overrides_type_failure_only(self):
        schema = ss.string().min(3).with_message("Name is required")
        self.assertEqual(catch(schema, 42).issues[0].message, "Name is required")
        self.assertEqual(
            catch(schema, "ab").issues[0].message,
            "String must be at least 3 characters",
        )

    def test_issue_is_anchored_at_given_path(self):
        self.assertEqual(catch(ss.string(), 1, "user.name").issues[0].path, "user.name")

    def test_bad_builder_arguments(self):
        with self.assertRaises(ValueError):
            ss.string().min(-1)
        with self.assertRaises(TypeError):
            ss.string().pattern(123)


class NumberSchemaTests(unittest.TestCase):
    def test_accepts_ints_and_floats(self):
        self.assertEqual(ss.number().parse(42), 42)
        self.assertEqual(ss.number().parse(3.5), 3.5)

    def test_rejects_numeric_text_booleans_and_nan(self):
        for bad in ("42", True, False, None, float("nan")):
            with self.assertRaises(ValidationError, msg=repr(bad)):
                ss.number().parse(bad)

    def test_min_max_integer(self):
        schema = ss.number().min(1).max(10).integer()
        self.assertEqual(schema.parse(5), 5)
        self.assertEqual(issue_pairs(catch(schema, 0)), [("", "Number must be at least 1")])
        self.assertEqual(issue_pairs(catch(schema, 11)), [("", "Number must be at most 10")])
        self.assertEqual(issue_pairs(catch(schema, 5.5)), [("", "Number must be an integer")])

    def test_integral_float_passes_integer_check(self):
        self.assertEqual(ss.number().integer().parse(4.0), 4.0)

    def test_fractional_bound_is_rendered_plainly(self):
        err = catch(ss.number().min(0.5), 0.25)
        self.assertEqual(err.issues[0].message, "Number must be at least 0.5")

    def test_custom_message(self):
        schema = ss.number().with_message("Must be a number")
        self.assertEqual(catch(schema, "abc").issues[0].message, "Must be a number")

    def test_bound_must_be_numeric(self):
        with self.assertRaises(TypeError):
            ss.number().min("1")


class BooleanSchemaTests(unittest.TestCase):
    def test_accepts_booleans(self):
        self.assertIs(ss.boolean().parse(True), True)
        self.assertIs(ss.boolean().parse(False), False)

    def test_rejects_truthy_lookalikes(self):
        for bad in (1, 0, "true", None):
            with self.assertRaises(ValidationError):
                ss.boolean().parse(bad)

    def test_custom_message(self):
        schema = ss.boolean().with_message("Toggle required")
        self.assertEqual(catch(schema, "yes").issues[0].message, "Toggle required")


class BuilderImmutabilityTests(unittest.TestCase):
    def test_constraints_return_new_nodes(self):
        base = ss.string()
        longer = base.min(3)
        self.assertIsNot(base, longer)
        self.assertEqual(base.parse("a"), "a")
        with self.assertRaises(ValidationError):
            longer.parse("a")

    def test_with_message_leaves_receiver_untouched(self):
        base = ss.number()
        friendly = base.with_message("Numbers only")
        self.assertEqual(catch(base, "x").issues[0].message, "Expected number")
        self.assertEqual(catch(friendly, "x").issues[0].message, "Numbers only")


# ---------------------------------------------------------------------- #
# Coercion                                                               #
# ---------------------------------------------------------------------- #

class CoercedStringTests(unittest.TestCase):
    def test_strings_pass_unchanged(self):
        self.assertEqual(ss.coerce.string().parse("hello"), "hello")

    def test_numbers_and_booleans_use_canonical_text(self):
        schema = ss.coerce.string()
        self.assertEqual(schema.parse(42), "42")
        self.assertEqual(schema.parse(3.0), "3")
        self.assertEqual(schema.parse(1.5), "1.5")
        self.assertEqual(schema.parse(True), "true")
        self.assertEqual(schema.parse(False), "false")

    def test_other_types_fail_as_strings(self):
        for bad in (None, {}, [], ss.MISSING):
            self.assertEqual(issue_pairs(catch(ss.coerce.string(), bad)), [("", "Expected string")])

    def test_constraints_see_coerced_value(self):
        schema = ss.coerce.string().min(2).max(5)
        self.assertEqual(schema.parse(42), "42")
        with self.assertRaises(ValidationError):
            schema.parse(1)
        with self.assertRaises(ValidationError):
            schema.parse(123456)

    def test_pattern_after_coercion(self):
        schema = ss.coerce.string().pattern(r"\d+")
        self.assertEqual(schema.parse(123), "123")
        with self.assertRaises(ValidationError):
            schema.parse(True)


class CoercedNumberTests(unittest.TestCase):
    def test_numbers_pass_unchanged(self):
        self.assertEqual(ss.coerce.number().parse(42), 42)

    def test_numeric_text(self):
        schema = ss.coerce.number()
        self.assertEqual(schema.parse("42"), 42)
        self.assertIsInstance(schema.parse("42"), int)
        self.assertEqual(schema.parse("3.14"), 3.14)
        self.assertEqual(schema.parse("-10"), -10)
        self.assertEqual(schema.parse("1e3"), 1000.0)

    def test_whitespace_is_trimmed(self):
        self.assertEqual(ss.coerce.number().parse("  42  "), 42)

    def test_empty_and_blank_text_fail(self):
        for bad in ("", "   "):
            self.assertEqual(issue_pairs(catch(ss.coerce.number(), bad)), [("", "Expected number")])

    def test_non_ascii_digits_fail(self):
        for bad in ("\u0661\u0662", "\uff11\uff12", "\u0664.5"):
            self.assertEqual(issue_pairs(catch(ss.coerce.number(), bad)), [("", "Expected number")], bad)

    def test_unparseable_text_fails(self):
        for bad in ("abc", "12abc", "1_000", "nan"):
            with self.assertRaises(ValidationError, msg=bad):
                ss.coerce.number().parse(bad)

    def test_non_text_types_fail(self):
        for bad in (None, True, [1]):
            with self.assertRaises(ValidationError):
                ss.coerce.number().parse(bad)

    def test_constraints_after_coercion(self):
        schema = ss.coerce.number().min(1).max(100).integer()
        self.assertEqual(schema.parse("50"), 50)
        self.assertEqual(catch(schema, "0").issues[0].message, "Number must be at least 1")
        self.assertEqual(catch(schema, "5.5").issues[0].message, "Number must be an integer")

    def test_custom_message_applies_to_coercion_failure(self):
        schema = ss.coerce.number().with_message("page must be numeric")
        self.assertEqual(catch(schema, "").issues[0].message, "page must be numeric")
        self.assertEqual(catch(schema, "x").issues[0].message, "page must be numeric")


class CoercedBooleanTests(unittest.TestCase):
    def test_booleans_pass_unchanged(self):
        self.assertIs(ss.coerce.boolean().parse(True), True)
        self.assertIs(ss.coerce.boolean().parse(False), False)

    def test_truthy_words(self):
        for word in ("true", "1", "TRUE", "True"):
            self.assertIs(ss.coerce.boolean().parse(word), True, word)

    def test_falsy_words(self):
        for word in ("false", "0", "", "FALSE"):
            self.assertIs(ss.coerce.boolean().parse(word), False, word)

    def test_other_words_fail(self):
        for word in ("yes", "no", "2", " true"):
            self.assertEqual(issue_pairs(catch(ss.coerce.boolean(), word)), [("", "Expected boolean")])

    def test_numbers_are_not_coerced(self):
        for bad in (0, 1, None):
            with self.assertRaises(ValidationError):
                ss.coerce.boolean().parse(bad)
