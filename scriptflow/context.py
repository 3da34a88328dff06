"""Evaluation context shared with script engines."""


class ScriptContext:
    """Variable bindings visible to a script during evaluation.

    Engines read from and may write into ``bindings``. The context is not
    synchronized; whoever shares it between threads must guard it.
    """

    def __init__(self, bindings=None):
        """Construct the context."""
        self.bindings = {} if bindings is None else bindings

    def get(self, name, default=None):
        """Return the value bound to ``name``."""
        return self.bindings.get(name, default)

    def __getitem__(self, name):
        """Return the value bound to ``name``."""
        return self.bindings[name]

    def __setitem__(self, name, value):
        """Bind ``value`` to ``name``."""
        self.bindings[name] = value

    def __contains__(self, name):
        """Check whether ``name`` is bound."""
        return name in self.bindings

    def __repr__(self):
        """Return the context representation."""
        return "<ScriptContext bindings={}>".format(sorted(self.bindings))
