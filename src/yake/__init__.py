"""Yake - ``make`` with YAML files.

Targets are declared in a ``Yakefile`` and executed by name from the CLI.
"""

from __future__ import annotations

__version__ = "0.4.0"

__all__ = ["__version__"]
