""".. Ignore pydocstyle D400.

==================
Scriptflow Signals
==================

"""
from django.core.signals import setting_changed
from django.dispatch import receiver

from scriptflow.registry import registry


@receiver(setting_changed)
def reset_engine_registry(sender, setting, **kwargs):
    """Rediscover engines when the engines setting changes."""
    if setting == "SCRIPTFLOW_ENGINES":
        registry.reset()
