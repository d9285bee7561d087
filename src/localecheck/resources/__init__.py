"""Locale resource parsing and loading.

Python 3.13+. Zero external dependencies.
"""

from .loading import PropertiesResourceLoader, ResourceLoader, load_resources, resource_names
from .properties import parse_properties

__all__ = [
    "PropertiesResourceLoader",
    "ResourceLoader",
    "load_resources",
    "parse_properties",
    "resource_names",
]
