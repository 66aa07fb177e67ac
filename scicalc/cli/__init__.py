"""SciCalc command-line interface package.

Supports ``python -m scicalc.cli`` as an alternative to the ``scicalc`` entry point.
"""

from scicalc.cli.main import cli, main

__all__ = ["cli", "main"]
