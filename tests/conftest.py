"""Shared fixtures for template builder tests."""

import pytest

from template_builder.editor.document import TemplateDocument
from template_builder.editor.mutation_engine import TemplateEditor
from template_builder.editor.selection import SelectionTracker


@pytest.fixture
def document():
    """An empty document."""
    return TemplateDocument(name="Spring Newsletter")


@pytest.fixture
def editor(document):
    """Editor over the empty document with its own selection tracker."""
    return TemplateEditor(document, SelectionTracker())


@pytest.fixture
def two_column_section(editor):
    """A two-column section: heading + paragraph in column 0, button in column 1."""
    section = editor.add_section(2)
    editor.add_component(section.id, 0, "heading")
    editor.add_component(section.id, 0, "paragraph")
    editor.add_component(section.id, 1, "button")
    return section


def column_ids(document, section_id, column_index):
    """Component ids in a column, in order."""
    return [c.id for c in document.get_column(section_id, column_index)]


def tree_shape(document):
    """Nested ids of the whole tree, for comparing before/after states."""
    return [
        (section.id, [[c.id for c in column] for column in section.components])
        for section in document.sections
    ]
