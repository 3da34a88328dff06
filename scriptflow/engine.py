"""Abstract script engine and engine loading."""
import os
import pkgutil
from importlib import import_module

from django.core.exceptions import ImproperlyConfigured


class BaseEngine:
    """Base class for all engines in Scriptflow."""

    name = None

    def __init__(self, registry, settings=None):
        """Construct a Scriptflow engine."""
        self.registry = registry
        self.settings = settings or {}

    def get_name(self):
        """Return the engine name."""
        return self.name


def get_builtin_modules(base_module):
    """Return module paths of engines shipped in ``scriptflow.<base_module>``."""
    engine_dir = os.path.join(os.path.dirname(__file__), base_module)
    return sorted(
        "scriptflow.{}.{}".format(base_module, name)
        for _, name, ispkg in pkgutil.iter_modules([engine_dir])
        if ispkg
    )


def load_engines(registry, class_name, base_module, engines, class_key="ENGINE", engine_type="engine"):
    """Load engines.

    Each entry of ``engines`` is either a module path or a dictionary with
    the module path under ``class_key`` and any engine specific settings.
    Return a dictionary mapping engine names to engine instances.
    """
    loaded_engines = {}

    for module_name_or_dict in engines:
        if not isinstance(module_name_or_dict, dict):
            module_name_or_dict = {class_key: module_name_or_dict}

        try:
            module_name = module_name_or_dict[class_key]
            engine_settings = module_name_or_dict
        except KeyError:
            raise ImproperlyConfigured(
                "If {} specification is a dictionary, it must define {}".format(engine_type, class_key)
            )

        try:
            engine_module = import_module(module_name)
        except ImportError as error:
            builtin_modules = get_builtin_modules(base_module)
            # Built-in engines only fail to import on missing dependencies.
            if module_name in builtin_modules:
                raise
            raise ImproperlyConfigured(
                "{} isn't an available script {}. Try one of: {}\nError was: {}".format(
                    module_name, engine_type, ", ".join(map(repr, builtin_modules)), error
                )
            ) from error

        try:
            engine_class = getattr(engine_module, class_name)
        except AttributeError:
            raise ImproperlyConfigured(
                "{} module {} is missing a {} class".format(engine_type.capitalize(), module_name, class_name)
            )

        engine = engine_class(registry=registry, settings=engine_settings)
        if not isinstance(engine, BaseEngine):
            raise ImproperlyConfigured(
                "{} module {} class {} must extend BaseEngine".format(
                    engine_type.capitalize(), module_name, class_name
                )
            )

        if engine.get_name() in loaded_engines:
            raise ImproperlyConfigured("Duplicated {} {}".format(engine_type, engine.get_name()))

        loaded_engines[engine.get_name()] = engine

    return loaded_engines
