"""
Template Editor
===============

Invariant-preserving mutations of a TemplateDocument.

Every operation is fail-soft: a path or id that does not resolve leaves the
document untouched and the operation returns False (or None for the
operations that return the node they created). Nothing here raises for a
stale reference coming from the UI.

Invariants held after every call:
- ``len(section.components) == section.columns`` for every section
- a component lives in exactly one column
- the selection is either empty or resolves to the component at its path
"""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..models.template_models import (
    CanvasDimensions,
    Component,
    ComponentKind,
    Section,
    dump_properties,
)
from .component_defaults import get_component_defaults
from .document import TemplateDocument
from .drop_payload import parse_drag_payload
from .ids import generate_id
from .selection import SelectionTracker

logger = logging.getLogger(__name__)

# Fields a caller may change through update_component
COMPONENT_UPDATE_FIELDS = ("kind", "content", "style", "properties")


class TemplateEditor:
    """Applies editing operations to a document and keeps the selection in sync."""

    def __init__(self, document: TemplateDocument, selection: Optional[SelectionTracker] = None):
        self.document = document
        self.selection = selection or SelectionTracker()

    # ==================================================================
    # Sections
    # ==================================================================

    def add_section(self, columns: int) -> Section:
        """Append a section with ``columns`` empty columns."""
        section = Section(id=generate_id(), columns=columns, components=[[] for _ in range(columns)])
        self.document.sections.append(section)
        logger.info(f"[EDITOR] Added section {section.id} with {columns} column(s)")
        return section

    def remove_section(self, section_id: str) -> bool:
        """Delete a section with all of its columns and components."""
        index = self.document.section_index(section_id)
        if index < 0:
            logger.debug(f"[EDITOR] remove_section: {section_id} not found")
            return False

        del self.document.sections[index]
        if self.selection.points_into(section_id):
            self.selection.clear()
        if self.document.selected_section_id == section_id:
            self.document.selected_section_id = None

        logger.info(f"[EDITOR] Removed section {section_id}")
        return True

    def duplicate_section(self, section_id: str) -> Optional[Section]:
        """
        Append a deep copy of a section.

        Only the section gets a new id; the copied components keep theirs.
        """
        source = self.document.find_section(section_id)
        if source is None:
            logger.debug(f"[EDITOR] duplicate_section: {section_id} not found")
            return None

        copy = source.model_copy(deep=True, update={"id": generate_id()})
        self.document.sections.append(copy)
        logger.info(f"[EDITOR] Duplicated section {section_id} as {copy.id}")
        return copy

    def update_section(self, section_id: str, updates: Dict[str, Any]) -> bool:
        """
        Merge field updates into a section.

        ``id`` cannot be changed here (use rename_section) and ``components``
        only changes through the component operations. Changing ``columns``
        resizes the section: new columns start empty, and the components of
        dropped columns move to the end of the last remaining column.
        """
        section = self.document.find_section(section_id)
        if section is None:
            logger.debug(f"[EDITOR] update_section: {section_id} not found")
            return False

        updates = dict(updates)
        new_id = updates.pop("id", section_id)
        if new_id != section_id:
            logger.warning(f"[EDITOR] update_section cannot change id of {section_id}; use rename_section")
        updates.pop("components", None)

        changed = False
        if "columns" in updates:
            changed = self._resize_section(section, updates.pop("columns"))

        for key in updates:
            logger.warning(f"[EDITOR] update_section: ignoring unknown field {key!r}")

        return changed

    def _resize_section(self, section: Section, columns: Any) -> bool:
        if isinstance(columns, bool) or not isinstance(columns, int) or columns < 1:
            logger.warning(f"[EDITOR] Invalid column count {columns!r} for section {section.id}")
            return False
        if columns == section.columns:
            return False

        if columns > section.columns:
            section.components.extend([] for _ in range(columns - section.columns))
        else:
            overflow = [c for column in section.components[columns:] for c in column]
            del section.components[columns:]
            section.components[-1].extend(overflow)
            selection = self.selection.current
            if selection is not None and selection.section_id == section.id and selection.column_index >= columns:
                self.selection.clear()

        logger.info(f"[EDITOR] Resized section {section.id} from {section.columns} to {columns} columns")
        section.columns = columns
        return True

    def rename_section(self, section_id: str, new_id: str) -> bool:
        """Change a section's id and every reference that uses it."""
        section = self.document.find_section(section_id)
        if section is None or not new_id:
            return False
        if new_id == section_id:
            return False
        if self.document.find_section(new_id) is not None:
            logger.warning(f"[EDITOR] Cannot rename {section_id}: id {new_id} already in use")
            return False

        section.id = new_id
        self.selection.rename_section(section_id, new_id)
        if self.document.selected_section_id == section_id:
            self.document.selected_section_id = new_id

        logger.info(f"[EDITOR] Renamed section {section_id} to {new_id}")
        return True

    def reorder_sections(self, from_index: int, to_index: int) -> bool:
        """Move the section at ``from_index`` to ``to_index``."""
        sections = self.document.sections
        if from_index == to_index:
            return False
        if not 0 <= from_index < len(sections):
            logger.debug(f"[EDITOR] reorder_sections: no section at {from_index}")
            return False

        section = sections.pop(from_index)
        to_index = max(0, min(to_index, len(sections)))
        sections.insert(to_index, section)
        logger.info(f"[EDITOR] Moved section {section.id} from {from_index} to {to_index}")
        return True

    def set_selected_section(self, section_id: Optional[str]) -> bool:
        if section_id is not None and self.document.find_section(section_id) is None:
            return False
        self.document.selected_section_id = section_id
        return True

    # ==================================================================
    # Components
    # ==================================================================

    def add_component(
        self,
        section_id: str,
        column_index: int,
        kind: Union[ComponentKind, str],
    ) -> Optional[Component]:
        """Append a new component of ``kind``, built from its defaults, to a column."""
        column = self.document.get_column(section_id, column_index)
        if column is None:
            logger.debug(f"[EDITOR] add_component: no column {section_id}/{column_index}")
            return None
        try:
            kind = ComponentKind(kind)
        except ValueError:
            logger.warning(f"[EDITOR] add_component: unknown kind {kind!r}")
            return None

        component = Component(id=generate_id(), kind=kind, **get_component_defaults(kind))
        column.append(component)
        logger.info(f"[EDITOR] Added {kind.value} component {component.id} to {section_id}/{column_index}")
        return component

    def add_component_from_payload(
        self,
        section_id: str,
        column_index: int,
        raw_payload: Union[str, bytes, None],
    ) -> Optional[Component]:
        """Handle a palette drop; malformed payloads are ignored."""
        kind = parse_drag_payload(raw_payload)
        if kind is None:
            return None
        return self.add_component(section_id, column_index, kind)

    def remove_component(self, section_id: str, column_index: int, index: int) -> bool:
        """
        Remove the component at a path.

        The selection is cleared whenever a component is removed, even when
        a different component was selected.
        """
        column = self.document.get_column(section_id, column_index)
        if column is None or not 0 <= index < len(column):
            logger.debug(f"[EDITOR] remove_component: nothing at {section_id}/{column_index}/{index}")
            return False

        removed = column.pop(index)
        self.selection.clear()
        logger.info(f"[EDITOR] Removed component {removed.id}")
        return True

    def duplicate_component(self, section_id: str, column_index: int, index: int) -> Optional[Component]:
        """Insert a copy with a fresh id directly after the source component."""
        source = self.document.get_component(section_id, column_index, index)
        if source is None:
            logger.debug(f"[EDITOR] duplicate_component: nothing at {section_id}/{column_index}/{index}")
            return None

        copy = source.model_copy(deep=True, update={"id": generate_id()})
        self.document.get_column(section_id, column_index).insert(index + 1, copy)
        self.selection.shift_for_insert(section_id, column_index, index + 1)
        logger.info(f"[EDITOR] Duplicated component {source.id} as {copy.id}")
        return copy

    def move_component(
        self,
        src_section_id: str,
        src_column_index: int,
        src_index: int,
        dst_section_id: str,
        dst_column_index: int,
        dst_index: int,
    ) -> bool:
        """
        Move a component to another position, column or section.

        ``dst_index`` is read after the source is removed and is clamped to
        the destination column's bounds. The selection is cleared after
        every move.
        """
        if self.document.find_section(src_section_id) is None or self.document.find_section(dst_section_id) is None:
            logger.debug(f"[EDITOR] move_component: unknown section {src_section_id} or {dst_section_id}")
            return False

        src_column = self.document.get_column(src_section_id, src_column_index)
        dst_column = self.document.get_column(dst_section_id, dst_column_index)
        if src_column is None or dst_column is None or not 0 <= src_index < len(src_column):
            logger.debug(
                f"[EDITOR] move_component: invalid path "
                f"{src_section_id}/{src_column_index}/{src_index} -> {dst_section_id}/{dst_column_index}"
            )
            return False

        component = src_column.pop(src_index)
        dst_index = max(0, min(dst_index, len(dst_column)))
        dst_column.insert(dst_index, component)
        self.selection.clear()

        logger.info(
            f"[EDITOR] Moved component {component.id} to "
            f"{dst_section_id}/{dst_column_index}/{dst_index}"
        )
        return True

    def update_component(self, component_id: str, updates: Dict[str, Any]) -> bool:
        """
        Merge top-level field updates into every component with ``component_id``.

        ``style`` and ``properties`` are replaced as a whole when given. The
        update is validated before anything is written; an invalid update
        changes nothing.
        """
        updates = {k: v for k, v in updates.items() if k != "id"}
        for key in updates:
            if key not in COMPONENT_UPDATE_FIELDS:
                logger.warning(f"[EDITOR] update_component: ignoring unknown field {key!r}")
        updates = {k: v for k, v in updates.items() if k in COMPONENT_UPDATE_FIELDS}

        targets = [(path, c) for path, c in self.document.iter_components() if c.id == component_id]
        if not targets:
            logger.debug(f"[EDITOR] update_component: {component_id} not found")
            return False

        replacements = []
        for path, component in targets:
            data = {
                "id": component.id,
                "kind": component.kind,
                "content": component.content,
                "style": dict(component.style),
                "properties": dump_properties(component.properties),
            }
            data.update(updates)
            try:
                replacements.append((path, Component.model_validate(data)))
            except ValidationError as e:
                logger.warning(f"[EDITOR] Rejected update for component {component_id}: {e}")
                return False

        for (section_id, column_index, index), updated in replacements:
            self.document.get_column(section_id, column_index)[index] = updated

        if self.selection.addresses_component(component_id):
            self.selection.refresh(self.document)

        logger.info(f"[EDITOR] Updated component {component_id}: {sorted(updates)}")
        return True

    def update_component_style(
        self,
        section_id: str,
        column_index: int,
        index: int,
        property_name: str,
        property_value: str,
    ) -> bool:
        """Set one style property on the component at a path."""
        if not property_name:
            logger.debug(f"[EDITOR] update_component_style: empty property name at {section_id}/{column_index}/{index}")
            return False
        component = self.document.get_component(section_id, column_index, index)
        if component is None:
            logger.debug(f"[EDITOR] update_component_style: nothing at {section_id}/{column_index}/{index}")
            return False

        component.style = {**component.style, property_name: str(property_value)}
        if self.selection.addresses(section_id, column_index, index):
            self.selection.refresh(self.document)

        logger.debug(f"[EDITOR] Set {property_name}={property_value} on {component.id}")
        return True

    # ==================================================================
    # Selection
    # ==================================================================

    def select_component(self, section_id: str, column_index: int, index: int) -> bool:
        return self.selection.select(self.document, section_id, column_index, index)

    def clear_selection(self) -> None:
        self.selection.clear()

    # ==================================================================
    # Template
    # ==================================================================

    def update_canvas_dimensions(self, width: Optional[str] = None, height: Optional[str] = None) -> bool:
        """Replace whichever of width/height is given (empty values count as not given)."""
        canvas = self.document.canvas
        new_canvas = CanvasDimensions(width=width or canvas.width, height=height or canvas.height)
        if new_canvas == canvas:
            return False
        self.document.canvas = new_canvas
        logger.info(f"[EDITOR] Canvas dimensions set to {new_canvas.width} x {new_canvas.height}")
        return True

    def update_template_name(self, name: str) -> bool:
        self.document.template.name = name
        logger.info(f"[EDITOR] Template renamed to {name!r}")
        return True
