"""
Interactive theme picker.
"""

from .state import SelectionState, SelectionStatus

__all__ = [
    "SelectionState",
    "SelectionStatus",
]
