""".. Ignore pydocstyle D400.

===============
Engine Registry
===============

.. data:: registry

    The global registry instance, populated from the
    ``SCRIPTFLOW_ENGINES`` setting on first use.

"""
import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from scriptflow.engine import load_engines
from scriptflow.utils import BraceMessage as __

logger = logging.getLogger(__name__)

DEFAULT_ENGINES = [
    "scriptflow.engines.python",
    "scriptflow.engines.jinja",
]


class EngineRegistry:
    """Lookup of script engines by name and by file name extension."""

    def __init__(self):
        """Construct an empty registry."""
        self._engines = None
        self._extensions = None

    def discover_engines(self):
        """Load engines configured in settings."""
        engines = getattr(settings, "SCRIPTFLOW_ENGINES", DEFAULT_ENGINES)
        names = {}
        extensions = {}
        for engine in load_engines(self, "ScriptEngine", "engines", engines).values():
            self._add_engine(engine, names, extensions)

        # Only a complete configuration is kept, a failed discovery is
        # retried on the next lookup.
        self._engines = names
        self._extensions = extensions

        logger.info(
            __(
                "Found {} script engines: {}",
                len(self._engines),
                ", ".join(self._engines.keys()),
            )
        )

    def _ensure_discovered(self):
        if self._engines is None:
            self.discover_engines()

    def register(self, engine):
        """Register an engine under its name and extensions."""
        self._ensure_discovered()
        self._add_engine(engine, self._engines, self._extensions)

    def _add_engine(self, engine, names, extensions):
        """Add ``engine`` to the given name and extension maps."""
        name = engine.get_name()
        if name in names:
            raise ImproperlyConfigured("Duplicated engine {}".format(name))

        engine_extensions = engine.get_extensions()
        for extension in engine_extensions:
            if extension in extensions:
                raise ImproperlyConfigured(
                    "Extension {} is claimed by engines {} and {}".format(
                        extension, extensions[extension].get_name(), name
                    )
                )

        names[name] = engine
        for extension in engine_extensions:
            extensions[extension] = engine

    def reset(self):
        """Forget all engines; they are rediscovered on the next lookup."""
        self._engines = None
        self._extensions = None

    def get_engine_names(self):
        """Return names of registered engines."""
        self._ensure_discovered()
        return list(self._engines.keys())

    def get_engine_by_name(self, name):
        """Return the engine registered under ``name`` or ``None``."""
        self._ensure_discovered()
        return self._engines.get(name)

    def get_engine_by_extension(self, extension):
        """Return the engine registered for ``extension`` or ``None``."""
        self._ensure_discovered()
        return self._extensions.get(extension)


registry = EngineRegistry()
