"""
Component Routes
================

API routes for component editing. Property editors write back only through
these routes; they never touch the document directly.
"""

from fastapi import APIRouter

from ..editor.session_manager import EditorSession
from ..models.api_models import (
    AddComponentRequest,
    DropComponentRequest,
    FieldUpdatesRequest,
    MoveComponentRequest,
    OperationResponse,
    StyleUpdateRequest,
)
from .template_routes import get_session

router = APIRouter(prefix="/api/components", tags=["components"])


def _respond(session: EditorSession, applied: bool, message: str, data=None) -> OperationResponse:
    selection = session.selection.current
    return OperationResponse(
        applied=applied,
        message=message,
        data=data,
        selection=selection.model_dump(mode="json", by_alias=True, exclude_none=True) if selection else None,
    )


@router.post("/{session_id}")
async def add_component(session_id: str, request: AddComponentRequest) -> OperationResponse:
    """Add a component of the given kind to the end of a column."""
    session = get_session(session_id)
    component = session.editor.add_component(request.section_id, request.column_index, request.kind)
    if component is None:
        return _respond(session, False, "Column not found")
    return _respond(session, True, "Component added", component.to_dict())


@router.post("/{session_id}/drop")
async def drop_component(session_id: str, request: DropComponentRequest) -> OperationResponse:
    """Handle a palette drop; unusable payloads are ignored."""
    session = get_session(session_id)
    component = session.editor.add_component_from_payload(
        request.section_id, request.column_index, request.payload
    )
    if component is None:
        return _respond(session, False, "Drop ignored")
    return _respond(session, True, "Component added", component.to_dict())


@router.post("/{session_id}/move")
async def move_component(session_id: str, request: MoveComponentRequest) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.move_component(
        request.src_section_id,
        request.src_column_index,
        request.src_index,
        request.dst_section_id,
        request.dst_column_index,
        request.dst_index,
    )
    return _respond(session, applied, "Component moved" if applied else "Component not moved")


@router.patch("/{session_id}/by-id/{component_id}")
async def update_component(session_id: str, component_id: str, request: FieldUpdatesRequest) -> OperationResponse:
    """Merge field updates (content, style, properties, kind) into a component."""
    session = get_session(session_id)
    applied = session.editor.update_component(component_id, request.updates)
    found = session.document.find_component(component_id)
    data = found[1].to_dict() if found else None
    return _respond(session, applied, "Component updated" if applied else "Component unchanged", data)


@router.delete("/{session_id}/{section_id}/{column_index}/{index}")
async def remove_component(session_id: str, section_id: str, column_index: int, index: int) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.remove_component(section_id, column_index, index)
    return _respond(session, applied, "Component removed" if applied else "Component not found")


@router.post("/{session_id}/{section_id}/{column_index}/{index}/duplicate")
async def duplicate_component(session_id: str, section_id: str, column_index: int, index: int) -> OperationResponse:
    session = get_session(session_id)
    copy = session.editor.duplicate_component(section_id, column_index, index)
    if copy is None:
        return _respond(session, False, "Component not found")
    return _respond(session, True, "Component duplicated", copy.to_dict())


@router.post("/{session_id}/{section_id}/{column_index}/{index}/select")
async def select_component(session_id: str, section_id: str, column_index: int, index: int) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.select_component(section_id, column_index, index)
    return _respond(session, applied, "Component selected" if applied else "Selection cleared")


@router.put("/{session_id}/{section_id}/{column_index}/{index}/style")
async def update_component_style(
    session_id: str,
    section_id: str,
    column_index: int,
    index: int,
    request: StyleUpdateRequest,
) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.update_component_style(
        section_id, column_index, index, request.property, request.value
    )
    return _respond(session, applied, "Style updated" if applied else "Component not found")
