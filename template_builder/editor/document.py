"""
Template Document
=================

Owns the template tree and the canvas dimensions, and resolves paths
(section id, column index, component index) and component ids into nodes.

No secondary index is kept: id lookups scan the whole tree, which is fine
for templates of a few dozen components.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..models.template_models import CanvasDimensions, Component, Section, Template
from .ids import generate_id

logger = logging.getLogger(__name__)

# (section_id, column_index, index)
ComponentPath = Tuple[str, int, int]


class TemplateDocument:
    """The canonical document tree being edited."""

    def __init__(
        self,
        template: Optional[Template] = None,
        canvas: Optional[CanvasDimensions] = None,
        name: str = "Untitled Template",
    ):
        self.template = template or Template(id=generate_id(), name=name)
        self.canvas = canvas or CanvasDimensions()
        self.selected_section_id: Optional[str] = None

    @property
    def sections(self) -> List[Section]:
        return self.template.sections

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def section_index(self, section_id: str) -> int:
        """Position of the section, or -1 if absent."""
        for i, section in enumerate(self.template.sections):
            if section.id == section_id:
                return i
        return -1

    def find_section(self, section_id: str) -> Optional[Section]:
        index = self.section_index(section_id)
        return self.template.sections[index] if index >= 0 else None

    # ------------------------------------------------------------------
    # Columns and components
    # ------------------------------------------------------------------

    def get_column(self, section_id: str, column_index: int) -> Optional[List[Component]]:
        """The column list itself (not a copy), or None if the path is invalid."""
        section = self.find_section(section_id)
        if section is None or not 0 <= column_index < len(section.components):
            return None
        return section.components[column_index]

    def get_component(self, section_id: str, column_index: int, index: int) -> Optional[Component]:
        column = self.get_column(section_id, column_index)
        if column is None or not 0 <= index < len(column):
            return None
        return column[index]

    def find_component(self, component_id: str) -> Optional[Tuple[ComponentPath, Component]]:
        """First component with ``component_id`` in document order, with its path."""
        for path, component in self.iter_components():
            if component.id == component_id:
                return path, component
        return None

    def iter_components(self) -> Iterator[Tuple[ComponentPath, Component]]:
        """Walk sections, then columns, then components, in order."""
        for section in self.template.sections:
            for column_index, column in enumerate(section.components):
                for index, component in enumerate(column):
                    yield (section.id, column_index, index), component

    def total_components(self) -> int:
        return sum(len(column) for section in self.template.sections for column in section.components)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready snapshot of the document."""
        return {
            "template": self.template.model_dump(mode="json", by_alias=True, exclude_none=True),
            "canvas": self.canvas.model_dump(),
            "selected_section_id": self.selected_section_id,
        }
