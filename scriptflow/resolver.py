""".. Ignore pydocstyle D400.

===============
Engine Resolver
===============

Choose the engine for a script by explicit name or by the extension of
the script's name.

"""
import logging

from scriptflow.exceptions import UnsupportedScriptEngineError
from scriptflow.utils import BraceMessage as __

logger = logging.getLogger(__name__)


def get_extension(resource_name):
    """Return the extension used to pick an engine for ``resource_name``.

    The extension is everything after the first dot of the base name, so
    ``archive.tar.gz`` gives ``tar.gz``. A base name without a dot is its
    own extension.
    """
    name = resource_name.rsplit("/", 1)[-1]
    _, dot, extension = name.partition(".")
    if not dot:
        return name
    return extension


def resolve_engine(engine_name, resource_name, registry):
    """Return the engine that should evaluate ``resource_name``.

    A non-empty ``engine_name`` always wins and the extension is not
    consulted at all, even when no engine of that name exists.

    :raises ~scriptflow.exceptions.UnsupportedScriptEngineError: when no
        matching engine is registered
    """
    if engine_name:
        engine = registry.get_engine_by_name(engine_name)
        if engine is None:
            raise UnsupportedScriptEngineError("no engine named {}".format(engine_name))
    else:
        extension = get_extension(resource_name)
        engine = registry.get_engine_by_extension(extension)
        if engine is None:
            raise UnsupportedScriptEngineError("no engine for extension {}".format(extension))

    logger.debug(__("Resolved engine '{}' for '{}'.", engine.get_name(), resource_name))
    return engine
