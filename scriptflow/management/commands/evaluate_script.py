""".. Ignore pydocstyle D400.

===============
Evaluate script
===============

"""
import json
import logging

from django.core.management.base import BaseCommand, CommandError

from scriptflow.evaluators import FileScriptEvaluator, ResourceScriptEvaluator, StringScriptEvaluator
from scriptflow.exceptions import ScriptingError

logger = logging.getLogger("scriptflow.script")


def parse_binding(binding):
    """Split a ``KEY=VALUE`` binding.

    Values are decoded as JSON when possible and kept as text otherwise.
    """
    name, separator, value = binding.partition("=")
    if not separator or not name:
        raise CommandError("Binding '{}' is not of the form KEY=VALUE.".format(binding))

    try:
        value = json.loads(value)
    except ValueError:
        pass

    return name, value


class Command(BaseCommand):
    """Evaluate a script and print its result."""

    help = "Evaluate a script with a script engine and print its result."

    def add_arguments(self, parser):
        """Command arguments."""
        source = parser.add_mutually_exclusive_group(required=True)
        source.add_argument("--resource", help="Name of the resource holding the script.")
        source.add_argument("--file", dest="script_file", help="Path to the file holding the script.")
        source.add_argument("--script", help="The script text.")

        parser.add_argument(
            "-e",
            "--engine",
            dest="engine_name",
            help="Engine name, overrides the engine inferred from the script name.",
        )
        parser.add_argument(
            "-b",
            "--binding",
            action="append",
            dest="bindings",
            default=[],
            help="Variable visible to the script, in the form KEY=VALUE.",
        )

    def get_evaluator(self, options):
        """Return the evaluator for the given script source."""
        engine_name = options["engine_name"]
        if options["resource"]:
            return ResourceScriptEvaluator(engine_name, options["resource"])
        if options["script_file"]:
            return FileScriptEvaluator(engine_name, options["script_file"])

        try:
            return StringScriptEvaluator(engine_name, options["script"])
        except ValueError as error:
            raise CommandError(error)

    def handle(self, **options):
        """Evaluate the script."""
        evaluator = self.get_evaluator(options)

        bindings = {"logger": logger}
        bindings.update(parse_binding(binding) for binding in options["bindings"])

        try:
            result = evaluator.evaluate(bindings)
        except ScriptingError as error:
            raise CommandError(error) from error

        self.stdout.write("Result: {}".format(result))
