"""
bstack — Bounded, singly-linked string stack.

Fixed capacity, boolean push/pop results, depth-indexed peek.
"""

from bstack.core.stack import BoundedStack, PopResult

__version__ = "0.1.0"

__all__ = [
    "BoundedStack",
    "PopResult",
]
