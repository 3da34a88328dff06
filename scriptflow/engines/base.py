"""Script engines."""
from scriptflow.engine import BaseEngine


class BaseScriptEngine(BaseEngine):
    """A script engine."""

    #: File name extensions the engine is registered for.
    extensions = ()

    def get_extensions(self):
        """Return extensions the engine handles.

        The ``EXTENSIONS`` key of the engine settings overrides the
        extensions declared on the class.
        """
        return tuple(self.settings.get("EXTENSIONS", self.extensions))

    def evaluate(self, source, context):
        """Evaluate ``source`` against ``context`` and return the result.

        :raises ~scriptflow.exceptions.ScriptExecutionError: when the
            script fails
        """
        raise NotImplementedError
