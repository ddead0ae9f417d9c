import unittest
from pkgmap.mapping.identifier import is_valid_identifier, check_identifier
from pkgmap.mapping.errors import FormatError

class TestIdentifier(unittest.TestCase):
    def test_valid_names(self):
        for name in ("foo", "Foo_Bar", "_x", "$x", "x1", "a$b_9", "ZZ"):
            self.assertTrue(is_valid_identifier(name), name)

    def test_invalid_names(self):
        for name in ("1x", "foo-bar", "foo.bar", "a b", "café", ""):
            self.assertFalse(is_valid_identifier(name), name)

    def test_digit_first_is_relative_to_range(self):
        # the range starts mid-string; its first char may not be a digit
        self.assertFalse(is_valid_identifier("ab9c", 2, 4))
        self.assertTrue(is_valid_identifier("ab9c", 1, 4))

    def test_check_reports_offset(self):
        with self.assertRaises(FormatError) as ctx:
            check_identifier("xx foo-bar", 3, 10)
        self.assertEqual(ctx.exception.offset, 6)
        self.assertEqual(ctx.exception.message, "not an identifier")

    def test_check_empty_range(self):
        with self.assertRaises(FormatError) as ctx:
            check_identifier("abc", 2, 2)
        self.assertEqual(ctx.exception.offset, 2)

    def test_check_accepts_valid(self):
        self.assertIsNone(check_identifier("$foo_1"))

if __name__ == "__main__":
    unittest.main()
