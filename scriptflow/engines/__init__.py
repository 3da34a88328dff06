""".. Ignore pydocstyle D400.

==============
Script Engines
==============

Engines are adapters exposing a single operation,
``evaluate(source, context)``, over a concrete scripting library.

.. automodule:: scriptflow.engines.python
.. automodule:: scriptflow.engines.jinja

"""
from .base import BaseScriptEngine

__all__ = ("BaseScriptEngine",)
