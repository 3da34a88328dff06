""".. Ignore pydocstyle D400.

=====================
Scriptflow Exceptions
=====================

"""


class ScriptingError(Exception):
    """Base class for errors raised while evaluating scripts."""


class UnsupportedScriptEngineError(ScriptingError):
    """Raised when no engine can be resolved for a script."""

    def __init__(self, reason):
        """Construct the error."""
        super().__init__(reason)
        self.reason = reason


class ScriptLoadError(ScriptingError):
    """Raised when the source of a script cannot be opened or read."""

    def __init__(self, resource_name, cause=None):
        """Construct the error."""
        message = "{} caused: {}".format(resource_name, cause)
        super().__init__(message)
        self.resource_name = resource_name
        self.cause = cause


class ScriptExecutionError(ScriptingError):
    """Raised for errors reported by an engine while running a script.

    The engine's own diagnostic is kept in ``message``. When the engine
    knows where the error occurred, ``lineno`` and ``column`` are set.
    """

    def __init__(self, message, lineno=None, column=None):
        """Construct the error."""
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.column = column

    def __str__(self):
        """Include the position in the message when known."""
        if self.lineno is None:
            return self.message
        if self.column is None:
            return "{} (line {})".format(self.message, self.lineno)
        return "{} (line {}, column {})".format(self.message, self.lineno, self.column)
