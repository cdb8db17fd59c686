"""
Template Routes
===============

API routes for editing sessions, template-level settings and export.
"""

import logging
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, Response

from ..config import settings
from ..editor.session_manager import EditorSession, SessionManager
from ..models.api_models import (
    CanvasDimensionsRequest,
    OperationResponse,
    SelectedSectionRequest,
    TemplateNameRequest,
)
from ..services.html_serializer import export_filename, serialize_template

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/templates", tags=["templates"])

# Injected by server
session_manager: Optional[SessionManager] = None


def get_session(session_id: str) -> EditorSession:
    """Resolve a session or fail with the matching HTTP error."""
    if session_manager is None:
        raise HTTPException(status_code=500, detail="Session manager not initialized")
    session = session_manager.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _content_disposition(filename: str) -> str:
    """Attachment header that survives non-ASCII template names."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace("?", "_").replace('"', "_")
    return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename)}'


def _selection(session: EditorSession):
    selection = session.selection.current
    return selection.model_dump(mode="json", by_alias=True, exclude_none=True) if selection else None


@router.post("/session")
async def create_session():
    """Create a new editing session with an empty template."""
    if session_manager is None:
        raise HTTPException(status_code=500, detail="Session manager not initialized")

    session = session_manager.create_session()
    return {
        "session_id": session.session_id,
        "template_id": session.document.template.id,
        "message": "Session created",
    }


@router.get("/{session_id}")
async def get_state(session_id: str):
    """Get the document and selection for a session."""
    return get_session(session_id).snapshot()


@router.delete("/{session_id}")
async def delete_session(session_id: str):
    get_session(session_id)
    session_manager.delete_session(session_id)
    return {"message": "Session deleted", "session_id": session_id}


@router.put("/{session_id}/name")
async def update_template_name(session_id: str, request: TemplateNameRequest) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.update_template_name(request.name)
    return OperationResponse(applied=applied, message="Template renamed")


@router.put("/{session_id}/canvas")
async def update_canvas(session_id: str, request: CanvasDimensionsRequest) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.update_canvas_dimensions(request.width, request.height)
    return OperationResponse(
        applied=applied,
        message="Canvas updated" if applied else "Canvas unchanged",
        data=session.document.canvas.model_dump(),
    )


@router.put("/{session_id}/selected-section")
async def set_selected_section(session_id: str, request: SelectedSectionRequest) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.set_selected_section(request.section_id)
    return OperationResponse(
        applied=applied,
        message="Section selected" if applied else "Section not found",
        data={"selected_section_id": session.document.selected_section_id},
    )


@router.delete("/{session_id}/selection")
async def clear_selection(session_id: str) -> OperationResponse:
    session = get_session(session_id)
    session.editor.clear_selection()
    return OperationResponse(applied=True, message="Selection cleared", selection=_selection(session))


@router.get("/{session_id}/preview", response_class=HTMLResponse)
async def preview_template(session_id: str):
    """Render the template inline."""
    session = get_session(session_id)
    return HTMLResponse(serialize_template(session.document))


@router.get("/{session_id}/export")
async def export_template(session_id: str):
    """Render the template as a downloadable HTML file."""
    session = get_session(session_id)
    filename = export_filename(session.document.template.name, settings.export_extension)
    logger.info(f"[EXPORT] Exporting session {session_id} as {filename}")
    return Response(
        content=serialize_template(session.document),
        media_type="text/html",
        headers={"Content-Disposition": _content_disposition(filename)},
    )
