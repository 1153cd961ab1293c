"""
User interface implementations.

The algorithm layer never prints; everything user-facing goes through here.
"""

from .terminal import TerminalDisplay

__all__ = ["TerminalDisplay"]
