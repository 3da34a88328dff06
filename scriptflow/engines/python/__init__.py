"""A script engine evaluating Python source with asteval."""
import logging

import asteval

from scriptflow.engines.base import BaseScriptEngine
from scriptflow.exceptions import ScriptExecutionError
from scriptflow.utils import BraceMessage as __

logger = logging.getLogger(__name__)


class SafeEvaluator(asteval.Interpreter):
    """Safe evaluator of Python scripts."""

    def __init__(self, bindings=None, use_numpy=False):
        """Initialize the safe evaluator.

        The symbol table holds asteval's safe built-ins and ``bindings``.
        """
        super().__init__(usersyms=dict(bindings or {}), use_numpy=use_numpy, no_print=True)


class ScriptEngine(BaseScriptEngine):
    """Python script engine.

    The value of the last statement in the script is the result. Names the
    script assigns are written back into the context bindings and names it
    deletes are removed from them.
    """

    name = "python"
    extensions = ("py",)

    def evaluate(self, source, context):
        """Evaluate the Python source."""
        evaluator = SafeEvaluator(context.bindings, use_numpy=self.settings.get("USE_NUMPY", False))
        builtin_names = set(evaluator.symtable) - set(context.bindings)

        result = evaluator.eval(source, show_errors=False)

        if evaluator.error:
            error = evaluator.error[0]
            exc_name, message = error.get_error()
            logger.debug(__("Python script failed with {}: {}", exc_name, message))
            raise ScriptExecutionError(
                "{}: {}".format(exc_name, message),
                lineno=getattr(error, "lineno", None),
                column=getattr(error.node, "col_offset", None),
            )

        for name, value in evaluator.symtable.items():
            if name not in builtin_names:
                context.bindings[name] = value
        for name in list(context.bindings):
            if name not in evaluator.symtable:
                del context.bindings[name]

        return result
