# pylint: disable=missing-docstring
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from scriptflow.engine import get_builtin_modules
from scriptflow.engines import BaseScriptEngine
from scriptflow.registry import EngineRegistry, registry


class TemplateEngine(BaseScriptEngine):
    name = "template"
    extensions = ("j2",)

    def evaluate(self, source, context):
        return source


class EngineRegistryTest(SimpleTestCase):
    def test_discover_from_settings(self):
        engines = EngineRegistry()

        self.assertEqual(engines.get_engine_names(), ["python", "jinja"])
        self.assertEqual(engines.get_engine_by_name("python").get_name(), "python")
        self.assertEqual(engines.get_engine_by_extension("py").get_name(), "python")
        self.assertEqual(engines.get_engine_by_extension("jinja2").get_name(), "jinja")
        self.assertIsNone(engines.get_engine_by_name("PYTHON"))
        self.assertIsNone(engines.get_engine_by_extension("js"))

    def test_engines_know_registry(self):
        engines = EngineRegistry()
        self.assertIs(engines.get_engine_by_name("python").registry, engines)

    @override_settings(SCRIPTFLOW_ENGINES=[{"ENGINE": "scriptflow.engines.python", "EXTENSIONS": ["js"]}])
    def test_extensions_override(self):
        engines = EngineRegistry()

        self.assertEqual(engines.get_engine_by_extension("js").get_name(), "python")
        self.assertIsNone(engines.get_engine_by_extension("py"))

    @override_settings(SCRIPTFLOW_ENGINES=["scriptflow.engines.python", "scriptflow.engines.python"])
    def test_duplicated_name(self):
        with self.assertRaises(ImproperlyConfigured):
            EngineRegistry().get_engine_names()

    @override_settings(SCRIPTFLOW_ENGINES=["scriptflow.engines.jinja"])
    def test_duplicated_extension(self):
        engines = EngineRegistry()

        with self.assertRaisesRegex(ImproperlyConfigured, "j2"):
            engines.register(TemplateEngine(registry=engines))

        self.assertIsNone(engines.get_engine_by_name("template"))

    @override_settings(SCRIPTFLOW_ENGINES=["scriptflow.engines.cobol"])
    def test_unknown_builtin_module(self):
        with self.assertRaisesRegex(ImproperlyConfigured, "'scriptflow.engines.jinja', 'scriptflow.engines.python'"):
            EngineRegistry().get_engine_names()

    @override_settings(SCRIPTFLOW_ENGINES=["scriptflow.engines.python", "scriptflow.engines.cobol"])
    def test_failed_discovery_is_not_kept(self):
        engines = EngineRegistry()

        for _ in range(2):
            with self.assertRaises(ImproperlyConfigured):
                engines.get_engine_by_name("python")

        with self.settings(SCRIPTFLOW_ENGINES=["scriptflow.engines.python"]):
            self.assertIsNotNone(engines.get_engine_by_name("python"))

    @override_settings(
        SCRIPTFLOW_ENGINES=[
            "scriptflow.engines.python",
            {"ENGINE": "scriptflow.engines.jinja", "EXTENSIONS": ["py"]},
        ]
    )
    def test_duplicated_extension_in_settings(self):
        engines = EngineRegistry()

        for _ in range(2):
            with self.assertRaisesRegex(ImproperlyConfigured, "Extension py"):
                engines.get_engine_names()

    def test_builtin_modules(self):
        self.assertEqual(
            get_builtin_modules("engines"),
            ["scriptflow.engines.jinja", "scriptflow.engines.python"],
        )

    @override_settings(SCRIPTFLOW_ENGINES=["scriptflow.tests.script_filters"])
    def test_module_without_engine(self):
        with self.assertRaisesRegex(ImproperlyConfigured, "missing a ScriptEngine class"):
            EngineRegistry().get_engine_names()

    @override_settings(SCRIPTFLOW_ENGINES=[{"EXTENSIONS": ["py"]}])
    def test_dictionary_without_engine(self):
        with self.assertRaisesRegex(ImproperlyConfigured, "must define ENGINE"):
            EngineRegistry().get_engine_names()

    @override_settings(SCRIPTFLOW_ENGINES=[])
    def test_register(self):
        engines = EngineRegistry()
        engine = TemplateEngine(registry=engines)

        engines.register(engine)

        self.assertIs(engines.get_engine_by_name("template"), engine)
        self.assertIs(engines.get_engine_by_extension("j2"), engine)

    def test_reset_on_setting_change(self):
        self.assertIsNotNone(registry.get_engine_by_name("jinja"))

        with self.settings(SCRIPTFLOW_ENGINES=["scriptflow.tests.js_engine"]):
            self.assertIsNone(registry.get_engine_by_name("jinja"))
            self.assertIsNotNone(registry.get_engine_by_name("js"))

        self.assertIsNotNone(registry.get_engine_by_name("jinja"))
