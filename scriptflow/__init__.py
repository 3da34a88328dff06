""".. Ignore pydocstyle D400.

==========
Scriptflow
==========

Evaluate scripts held in resources with pluggable engines.

.. automodule:: scriptflow.resolver
    :members:

.. automodule:: scriptflow.evaluators
    :members:

.. automodule:: scriptflow.registry
    :members:

.. automodule:: scriptflow.loaders
    :members:

"""
from scriptflow.__about__ import (  # noqa: F401
    __author__,
    __copyright__,
    __email__,
    __license__,
    __summary__,
    __title__,
    __url__,
    __version__,
)
