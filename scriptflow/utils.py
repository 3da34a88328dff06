""".. Ignore pydocstyle D400.

====================
Scriptflow Utilities
====================

"""


class BraceMessage:
    """Log messages with the new {}-string formatting syntax.

    Formatting only happens when (and if) the logged message is actually
    outputted to a log by a handler.

    Example of usage:

        .. code-block:: python

            from scriptflow.utils import BraceMessage as __

            logger.debug(__("Resolved engine '{}' for '{}'.", name, resource))

    """

    def __init__(self, fmt, *args, **kwargs):
        """Initialize attributes."""
        self.fmt = fmt
        self.args = args
        self.kwargs = kwargs

    def __str__(self):
        """Define the object representation."""
        return self.fmt.format(*self.args, **self.kwargs)
