"""
Selection Tracker
=================

Tracks the single component addressed for property editing.

The tracked selection is derived state: it must always resolve to a
component that exists at its path in the document. The editor calls
into this tracker from every mutation that could move, replace or drop
the addressed component.
"""

import logging
from typing import Optional

from ..models.template_models import Selection
from .document import TemplateDocument

logger = logging.getLogger(__name__)


class SelectionTracker:
    """Holds at most one Selection."""

    def __init__(self):
        self._selection: Optional[Selection] = None

    @property
    def current(self) -> Optional[Selection]:
        return self._selection

    def select(self, document: TemplateDocument, section_id: str, column_index: int, index: int) -> bool:
        """Select the component at the path; clears the selection if nothing is there."""
        component = document.get_component(section_id, column_index, index)
        if component is None:
            self.clear()
            return False

        self._selection = Selection(
            section_id=section_id,
            column_index=column_index,
            index=index,
            component=component.model_copy(deep=True),
        )
        return True

    def clear(self) -> None:
        if self._selection is not None:
            logger.debug(f"[SELECTION] Cleared selection of {self._selection.component.id}")
        self._selection = None

    def refresh(self, document: TemplateDocument) -> None:
        """Re-read the cached component view from the document."""
        if self._selection is None:
            return
        self.select(document, *self._selection.path)

    def addresses(self, section_id: str, column_index: int, index: int) -> bool:
        return self._selection is not None and self._selection.path == (section_id, column_index, index)

    def addresses_component(self, component_id: str) -> bool:
        return self._selection is not None and self._selection.component.id == component_id

    def points_into(self, section_id: str) -> bool:
        return self._selection is not None and self._selection.section_id == section_id

    def shift_for_insert(self, section_id: str, column_index: int, inserted_index: int) -> None:
        """Keep the selection on the same component after an insert into its column."""
        selection = self._selection
        if selection is None:
            return
        if (selection.section_id, selection.column_index) != (section_id, column_index):
            return
        if selection.index >= inserted_index:
            selection.index += 1

    def rename_section(self, old_id: str, new_id: str) -> None:
        if self._selection is not None and self._selection.section_id == old_id:
            self._selection.section_id = new_id
