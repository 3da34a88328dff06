""".. Ignore pydocstyle D400.

=================
Script Evaluators
=================

An evaluator knows where a script comes from. It resolves the engine for
the script and hands it the source together with an evaluation context.

"""
import io
import logging
import os

from scriptflow.context import ScriptContext
from scriptflow.exceptions import ScriptLoadError
from scriptflow.loaders import open_resource
from scriptflow.registry import registry as default_registry
from scriptflow.resolver import resolve_engine
from scriptflow.utils import BraceMessage as __

logger = logging.getLogger(__name__)


class AbstractScriptEvaluator:
    """Resolve an engine and evaluate a script with it."""

    def evaluate(self, bindings=None, registry=None):
        """Evaluate the script and return its result.

        :param bindings: a mapping of variables visible to the script or
            a :class:`~scriptflow.context.ScriptContext`, which is passed
            to the engine as is
        :param registry: engine registry, the global one by default
        """
        engine = self.get_engine(default_registry if registry is None else registry)

        if isinstance(bindings, ScriptContext):
            context = bindings
        else:
            context = ScriptContext(dict(bindings or {}))

        return self.eval(engine, context)

    def get_engine(self, registry):
        """Return the engine for the script."""
        raise NotImplementedError

    def eval(self, engine, context):
        """Evaluate the script with ``engine`` against ``context``."""
        raise NotImplementedError


class ResourceScriptEvaluator(AbstractScriptEvaluator):
    """Evaluate a script held in a resource.

    The engine is chosen by the extension of the resource name unless an
    engine name is given, which overrides the extension.
    """

    def __init__(self, engine_name, resource_name, loader=None):
        """Construct the evaluator.

        :param engine_name: optional engine name
        :param resource_name: ``/``-separated name of the resource
        :param loader: a :class:`~scriptflow.loaders.BaseResourceLoader`;
            loaders from settings are used when not given
        """
        self.engine_name = engine_name
        self.resource_name = resource_name
        self.loader = loader

    def get_engine(self, registry):
        """Return the engine by name, otherwise by the resource extension."""
        return resolve_engine(self.engine_name, self.resource_name, registry)

    def _open(self):
        """Open the resource as a binary stream."""
        if self.loader is None:
            return open_resource(self.resource_name)

        stream = self.loader.open(self.resource_name)
        if stream is None:
            raise FileNotFoundError("Resource '{}' not found.".format(self.resource_name))
        return stream

    def eval(self, engine, context):
        """Evaluate the resource script."""
        try:
            stream = self._open()
        except OSError as error:
            raise ScriptLoadError(self.resource_name, error) from error

        with stream, io.TextIOWrapper(stream) as reader:
            try:
                source = reader.read()
            except (OSError, UnicodeDecodeError) as error:
                raise ScriptLoadError(self.resource_name, error) from error

            logger.debug(__("Evaluating resource '{}' with '{}'.", self.resource_name, engine.get_name()))
            return engine.evaluate(source, context)


class FileScriptEvaluator(AbstractScriptEvaluator):
    """Evaluate a script held in a file."""

    def __init__(self, engine_name, script_file):
        """Construct the evaluator.

        :param engine_name: optional engine name
        :param script_file: path to an existing, readable file
        """
        self.engine_name = engine_name
        self.script_file = os.fspath(script_file)

    def get_engine(self, registry):
        """Return the engine by name, otherwise by the file extension."""
        return resolve_engine(self.engine_name, os.path.basename(self.script_file), registry)

    def eval(self, engine, context):
        """Evaluate the script file."""
        try:
            with open(self.script_file) as handle:
                source = handle.read()
        except (OSError, UnicodeDecodeError) as error:
            raise ScriptLoadError(self.script_file, error) from error

        logger.debug(__("Evaluating file '{}' with '{}'.", self.script_file, engine.get_name()))
        return engine.evaluate(source, context)


class StringScriptEvaluator(AbstractScriptEvaluator):
    """Evaluate a script given as text."""

    def __init__(self, engine_name, script):
        """Construct the evaluator.

        :param engine_name: name of the engine, required since inline
            text has no extension
        :param script: the script source
        """
        if not engine_name:
            raise ValueError("An engine name is required to evaluate an inline script.")

        self.engine_name = engine_name
        self.script = script

    def get_engine(self, registry):
        """Return the engine by name."""
        return resolve_engine(self.engine_name, "", registry)

    def eval(self, engine, context):
        """Evaluate the script text."""
        return engine.evaluate(self.script, context)
