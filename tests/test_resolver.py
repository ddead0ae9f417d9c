import unittest
from pkgmap.mapping.table import Packages
from pkgmap.mapping.parser import parse
from pkgmap.mapping.errors import ArgumentError
from pkgmap.location.uri import Location

MAPPING = "foo=http://example.com/foo/\nbar=file:///opt/bar/lib/\n"

class TestResolver(unittest.TestCase):
    def setUp(self):
        self.packages = parse(MAPPING, "http://example.com/")

    def test_resolve_file(self):
        self.assertEqual(str(self.packages.resolve("package:foo/a/b.py")), "http://example.com/foo/a/b.py")
        self.assertEqual(str(self.packages.resolve("package:bar/x")), "file:///opt/bar/lib/x")

    def test_scheme_is_case_insensitive(self):
        self.assertEqual(str(self.packages.resolve("PACKAGE:foo/x")), "http://example.com/foo/x")

    def test_package_root(self):
        self.assertEqual(str(self.packages.resolve("package:foo")), "http://example.com/foo/")
        self.assertEqual(str(self.packages.resolve("package:foo/")), "http://example.com/foo/")

    def test_dot_segments_are_normalized(self):
        self.assertEqual(str(self.packages.resolve("package:foo/a/../b/./c")), "http://example.com/foo/b/c")
        # '..' can walk into another package
        self.assertEqual(str(self.packages.resolve("package:foo/../bar/y")), "file:///opt/bar/lib/y")

    def test_query_and_fragment_are_dropped(self):
        self.assertEqual(str(self.packages.resolve("package:foo/a?x=1#top")), "http://example.com/foo/a")

    def test_non_package_passes_through(self):
        loc = Location.parse("https://other.org/z")
        self.assertIs(self.packages.resolve(loc), loc)
        self.assertEqual(str(self.packages.resolve("relative/path")), "relative/path")

    def test_rejects_authority(self):
        with self.assertRaises(ArgumentError):
            self.packages.resolve("package://auth/foo")

    def test_rejects_root_relative(self):
        with self.assertRaises(ArgumentError):
            self.packages.resolve("package:/foo")

    def test_unknown_package(self):
        with self.assertRaises(ArgumentError) as ctx:
            self.packages.resolve("package:nope/a")
        self.assertEqual(ctx.exception.message, "unknown package name: nope")

    def test_idempotent(self):
        a = self.packages.resolve("package:foo/q/r")
        b = self.packages.resolve("package:foo/q/r")
        self.assertEqual(a, b)

    def test_trusting_constructor(self):
        p = Packages({"x": Location.parse("http://h/x/")})
        self.assertEqual(str(p.resolve("package:x/y")), "http://h/x/y")
        # read-only view
        with self.assertRaises(TypeError):
            p.package_mapping["y"] = Location.parse("http://h/y/")

if __name__ == "__main__":
    unittest.main()
