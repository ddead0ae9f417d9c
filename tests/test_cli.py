import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from pathlib import Path
from pkgmap.resolver.cli import main

class TestCLI(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / ".packages"
        self.path.write_text("foo=http://h/root/foo/\nbar=lib/bar/\n", encoding="utf-8")

    def tearDown(self):
        self.tmp.cleanup()

    def run_cli(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_resolve(self):
        code, out, _ = self.run_cli("--packages", str(self.path), "--base", "http://h/root/", "resolve", "package:foo/a.py", "package:bar/b.py")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), [
            {"uri": "package:foo/a.py", "location": "http://h/root/foo/a.py"},
            {"uri": "package:bar/b.py", "location": "http://h/root/lib/bar/b.py"},
        ])

    def test_unknown_package_exit_code(self):
        code, _, err = self.run_cli("--packages", str(self.path), "resolve", "package:nope/x")
        self.assertEqual(code, 1)
        self.assertIn("unknown package name: nope", err)

    def test_format_error_is_rendered(self):
        self.path.write_text("ok=a/\nbad name=b/\n", encoding="utf-8")
        code, _, err = self.run_cli("--packages", str(self.path), "resolve", "package:ok/")
        self.assertEqual(code, 1)
        self.assertIn("not an identifier (line 2, column 4)", err)
        self.assertIn("   ^", err)

    def test_missing_file(self):
        code, _, err = self.run_cli("--packages", str(self.path) + ".missing", "resolve", "package:x/")
        self.assertEqual(code, 1)
        self.assertIn("cannot read", err)

    def test_relativize(self):
        code, out, _ = self.run_cli("relativize", "http://e/a/b", "http://e/f/g/h")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "../../a/b")

    def test_normalize(self):
        code, out, _ = self.run_cli("--packages", str(self.path), "--base", "http://h/root/", "normalize", "--output-base", "http://h/root/x", "--comment", "hi")
        self.assertEqual(code, 0)
        self.assertEqual(out, "#hi\nfoo=foo/\nbar=lib/bar/\n")

    def test_usage_error(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertEqual(ctx.exception.code, 2)

if __name__ == "__main__":
    unittest.main()
