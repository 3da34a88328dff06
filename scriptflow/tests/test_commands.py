# pylint: disable=missing-docstring
import os
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase

from scriptflow.management.commands.evaluate_script import parse_binding

FILES_DIR = os.path.join(os.path.dirname(__file__), "files")


class EvaluateScriptCommandTest(SimpleTestCase):
    def evaluate(self, *args):
        out = StringIO()
        call_command("evaluate_script", *args, stdout=out)
        return out.getvalue().strip()

    def test_resource(self):
        output = self.evaluate(
            "--resource",
            "scripts/build.py",
            "--binding",
            "values=[1, 2]",
            "--binding",
            "factor=2",
        )
        self.assertEqual(output, "Result: 6")

    def test_resource_template(self):
        output = self.evaluate("--resource", "templates/greeting.j2", "-b", "name=ada")
        self.assertEqual(output, "Result: Hello ADA!")

    def test_engine_override(self):
        output = self.evaluate("--resource", "scripts/greet.txt", "--engine", "python")
        self.assertEqual(output, "Result: hi")

    def test_file(self):
        output = self.evaluate("--file", os.path.join(FILES_DIR, "scripts", "hello.js"), "-e", "python")
        self.assertEqual(output, "Result: 2")

    def test_script(self):
        output = self.evaluate("--script", "logger is not None", "--engine", "python")
        self.assertEqual(output, "Result: True")

    def test_script_without_engine(self):
        with self.assertRaisesRegex(CommandError, "engine name is required"):
            self.evaluate("--script", "1 + 1")

    def test_errors(self):
        with self.assertRaisesRegex(CommandError, "no engine for extension txt"):
            self.evaluate("--resource", "scripts/greet.txt")

        with self.assertRaisesRegex(CommandError, "scripts/absent.py"):
            self.evaluate("--resource", "scripts/absent.py")

        with self.assertRaisesRegex(CommandError, "broken build"):
            self.evaluate("--resource", "scripts/broken.py")

    def test_parse_binding(self):
        self.assertEqual(parse_binding("count=3"), ("count", 3))
        self.assertEqual(parse_binding("name=ada"), ("name", "ada"))
        self.assertEqual(parse_binding("expr=a=b"), ("expr", "a=b"))
        self.assertEqual(parse_binding("empty="), ("empty", ""))

        with self.assertRaises(CommandError):
            parse_binding("count")
        with self.assertRaises(CommandError):
            parse_binding("=3")
