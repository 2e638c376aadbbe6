"""
Hill Output Module
===================

Console display for Hill matrix engine results.
"""

from hill.output.console import HillConsoleOutput

__all__ = ["HillConsoleOutput"]
