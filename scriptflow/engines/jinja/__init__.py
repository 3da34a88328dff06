"""Jinja2-based script engine."""
import traceback
from importlib import import_module

import jinja2
from django.core.exceptions import ImproperlyConfigured

from scriptflow.engines.base import BaseScriptEngine
from scriptflow.exceptions import ScriptExecutionError


class NestedUndefined(jinja2.Undefined):
    """An undefined variable that can be nested."""

    def __str__(self):
        """Override."""
        return ""

    def __call__(self, *args, **kwargs):
        """Override."""
        return NestedUndefined()

    def __getattr__(self, *args, **kwargs):
        """Override."""
        return NestedUndefined()

    def __getitem__(self, *args, **kwargs):
        """Override."""
        return NestedUndefined()


class ScriptEngine(BaseScriptEngine):
    """Jinja2-based script engine.

    The script is a template and the result is the rendered text.
    """

    name = "jinja"
    extensions = ("j2", "jinja", "jinja2")

    def __init__(self, *args, **kwargs):
        """Construct the script engine."""
        super().__init__(*args, **kwargs)

        if self.settings.get("STRICT_UNDEFINED", False):
            undefined = jinja2.StrictUndefined
        else:
            undefined = NestedUndefined

        self._environment = jinja2.Environment(undefined=undefined, keep_trailing_newline=True)
        self._register_custom_filters()

    def _register_custom_filters(self):
        """Register any custom filter modules."""
        custom_filters = self.settings.get("CUSTOM_FILTERS", [])
        if not isinstance(custom_filters, list):
            raise ImproperlyConfigured("`CUSTOM_FILTERS` setting must be a list.")

        for filter_module_name in custom_filters:
            try:
                filter_module = import_module(filter_module_name)
            except ImportError as error:
                raise ImproperlyConfigured(
                    "Failed to load custom filter module '{}'.\n"
                    "Error was: {}".format(filter_module_name, error)
                )

            try:
                filter_map = getattr(filter_module, "filters")
                if not isinstance(filter_map, dict):
                    raise TypeError
            except (AttributeError, TypeError):
                raise ImproperlyConfigured(
                    "Filter module '{}' does not define a 'filters' dictionary".format(filter_module_name)
                )
            self._environment.filters.update(filter_map)

    def evaluate(self, source, context):
        """Render the template source."""
        try:
            template = self._environment.from_string(source)
            return template.render(**context.bindings)
        except jinja2.TemplateError as error:
            raise ScriptExecutionError(
                error.message or error.__class__.__name__,
                lineno=getattr(error, "lineno", None),
            ) from error
        except Exception as error:
            # Python errors raised while rendering are not wrapped by Jinja,
            # but their traceback carries frames rewritten to template lines.
            raise ScriptExecutionError(
                "{}: {}".format(type(error).__name__, error),
                lineno=self._get_template_lineno(error),
            ) from error

    def _get_template_lineno(self, error):
        """Return the innermost template line in the traceback of ``error``."""
        lineno = None
        for frame, frame_lineno in traceback.walk_tb(error.__traceback__):
            if frame.f_code.co_filename == "<template>":
                lineno = frame_lineno
        return lineno
