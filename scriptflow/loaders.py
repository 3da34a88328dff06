""".. Ignore pydocstyle D400.

================
Resource loaders
================

Resource names are ``/``-separated paths on every platform. Loaders are
tried in the order of the ``SCRIPTFLOW_RESOURCE_LOADERS`` setting and the
first one that finds the resource wins.

"""
import logging
import os

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured, SuspiciousFileOperation
from django.utils._os import safe_join
from django.utils.module_loading import import_string

from scriptflow.utils import BraceMessage as __

logger = logging.getLogger(__name__)

DEFAULT_LOADERS = (
    "scriptflow.loaders.FileSystemResourceLoader",
    "scriptflow.loaders.AppDirectoriesResourceLoader",
)


class BaseResourceLoader:
    """Abstract loader of script resources."""

    def open(self, resource_name):
        """Return a binary stream of the resource or ``None``."""
        raise NotImplementedError("subclasses of BaseResourceLoader must provide an open() method")


class DirectoryResourceLoader(BaseResourceLoader):
    """Load resources from a list of directories."""

    def get_directories(self):
        """Return directories to search, in order."""
        raise NotImplementedError("subclasses of DirectoryResourceLoader must provide a get_directories() method")

    def open(self, resource_name):
        """Open the resource from the first directory containing it."""
        for directory in self.get_directories():
            try:
                path = safe_join(directory, *resource_name.split("/"))
            except SuspiciousFileOperation:
                logger.warning(__("Resource '{}' is outside of '{}'.", resource_name, directory))
                continue

            if os.path.isfile(path):
                return open(path, "rb")

        return None


class FileSystemResourceLoader(DirectoryResourceLoader):
    """Find resources in directories listed in settings."""

    def get_directories(self):
        """Return the ``SCRIPTFLOW_RESOURCE_DIRS`` setting."""
        return getattr(settings, "SCRIPTFLOW_RESOURCE_DIRS", ())


class AppDirectoriesResourceLoader(DirectoryResourceLoader):
    """Find resources in ``scripts`` directories of Django apps."""

    folder_name = "scripts"

    def get_directories(self):
        """Return a list of script directories of installed apps."""
        found_folders = []
        for app_config in apps.get_app_configs():
            folder_path = os.path.join(app_config.path, self.folder_name)
            if os.path.isdir(folder_path):
                found_folders.append(folder_path)
        return found_folders


def get_loaders():
    """Get resource loaders."""
    for loader_path in getattr(settings, "SCRIPTFLOW_RESOURCE_LOADERS", DEFAULT_LOADERS):
        yield get_loader(loader_path)


def get_loader(import_path):
    """Get a resource loader."""
    loader_class = import_string(import_path)
    if not issubclass(loader_class, BaseResourceLoader):
        raise ImproperlyConfigured(
            'Loader "{}" is not a subclass of "{}"'.format(loader_class, BaseResourceLoader)
        )
    return loader_class()


def open_resource(resource_name):
    """Open the named resource as a binary stream.

    :raises FileNotFoundError: when no loader finds the resource
    """
    for loader in get_loaders():
        stream = loader.open(resource_name)
        if stream is not None:
            return stream

    raise FileNotFoundError("Resource '{}' not found.".format(resource_name))
