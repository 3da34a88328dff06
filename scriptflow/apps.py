""".. Ignore pydocstyle D400.

========================
Scriptflow Configuration
========================

"""
from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ScriptflowConfig(AppConfig):
    """Scriptflow AppConfig."""

    name = "scriptflow"
    verbose_name = _("Scriptflow")

    def ready(self):
        """Application initialization."""
        # Register signals handlers
        from . import signals  # noqa: F401
