"""
Selection state for the theme picker.
"""

from __future__ import annotations
import logging
from enum import Enum, auto
from typing import Optional, Sequence

from ..errors import EnvironmentConfigError
from ..manager.merge import ApplyResult, ConfigMerger
from ..theme.engine import ThemeEntry

logger = logging.getLogger(__name__)


class SelectionStatus(Enum):
    """Picker selection states."""
    NO_SELECTION = auto()
    SELECTED = auto()


class SelectionState:
    """
    Highlighted entry of the theme list.

    Owns the index; the list itself is never modified. Navigation wraps
    around at both ends.
    """

    def __init__(self, entries: Sequence[ThemeEntry], applier: ConfigMerger = None):
        if not entries:
            raise EnvironmentConfigError("No themes found")
        self.entries = list(entries)
        self.applier = applier
        self.selected: Optional[int] = None
        self.last_selected: Optional[int] = None

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def status(self) -> SelectionStatus:
        if self.selected is None:
            return SelectionStatus.NO_SELECTION
        return SelectionStatus.SELECTED

    @property
    def highlighted(self) -> Optional[ThemeEntry]:
        """Selected entry, None when nothing is selected."""
        if self.selected is None:
            return None
        return self.entries[self.selected]

    @property
    def preview_entry(self) -> ThemeEntry:
        """Entry to preview: the selection, or the first entry."""
        return self.entries[self.selected if self.selected is not None else 0]

    def _resume(self) -> int:
        return self.last_selected if self.last_selected is not None else 0

    def select(self, index: Optional[int]) -> None:
        if index is not None and not 0 <= index < len(self.entries):
            raise IndexError(f"selection {index} out of range 0..{len(self.entries) - 1}")
        self.selected = index

    def next(self) -> None:
        if self.selected is None:
            self.select(self._resume())
        else:
            self.select((self.selected + 1) % len(self.entries))

    def previous(self) -> None:
        if self.selected is None:
            self.select(self._resume())
        else:
            self.select((self.selected - 1) % len(self.entries))

    def go_top(self) -> None:
        self.select(0)

    def go_bottom(self) -> None:
        self.select(len(self.entries) - 1)

    def deselect(self) -> None:
        """Clear the selection, remembering it for the next move."""
        if self.selected is not None:
            self.last_selected = self.selected
        self.selected = None

    def apply(self) -> Optional[ApplyResult]:
        """
        Apply the highlighted theme.

        Returns:
            ApplyResult, or None when nothing is selected

        Raises:
            AlacrittyThemesError: Propagated from the applier
        """
        entry = self.highlighted
        if entry is None:
            logger.debug("Apply ignored: no theme selected")
            return None
        if self.applier is None:
            raise RuntimeError("SelectionState has no applier")
        return self.applier.apply(entry.path)
