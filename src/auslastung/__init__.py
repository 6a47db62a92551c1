"""
Auslastung: workforce utilisation table normalizer.

This package turns loosely shaped employee and external worker records
into uniform, display-ready table rows and column descriptors.
"""

from importlib.metadata import version

__version__ = version("auslastung")

__all__ = ["__version__"]
