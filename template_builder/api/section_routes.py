"""
Section Routes
==============

API routes for adding, removing, duplicating, updating and reordering sections.
"""

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..models.api_models import (
    AddSectionRequest,
    FieldUpdatesRequest,
    OperationResponse,
    RenameSectionRequest,
    ReorderSectionsRequest,
)
from .template_routes import get_session

router = APIRouter(prefix="/api/sections", tags=["sections"])


@router.post("/{session_id}")
async def add_section(session_id: str, request: AddSectionRequest) -> OperationResponse:
    """Append a section with the requested number of columns."""
    session = get_session(session_id)
    if request.columns > settings.max_section_columns:
        raise HTTPException(
            status_code=422,
            detail=f"columns must be between 1 and {settings.max_section_columns}",
        )

    section = session.editor.add_section(request.columns)
    return OperationResponse(applied=True, message="Section added", data=section.model_dump(mode="json"))


@router.delete("/{session_id}/{section_id}")
async def remove_section(session_id: str, section_id: str) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.remove_section(section_id)
    return OperationResponse(applied=applied, message="Section removed" if applied else "Section not found")


@router.post("/{session_id}/{section_id}/duplicate")
async def duplicate_section(session_id: str, section_id: str) -> OperationResponse:
    session = get_session(session_id)
    copy = session.editor.duplicate_section(section_id)
    if copy is None:
        return OperationResponse(applied=False, message="Section not found")
    return OperationResponse(
        applied=True,
        message="Section duplicated",
        data=copy.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


@router.patch("/{session_id}/{section_id}")
async def update_section(session_id: str, section_id: str, request: FieldUpdatesRequest) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.update_section(section_id, request.updates)
    return OperationResponse(applied=applied, message="Section updated" if applied else "Section unchanged")


@router.put("/{session_id}/{section_id}/rename")
async def rename_section(session_id: str, section_id: str, request: RenameSectionRequest) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.rename_section(section_id, request.new_id)
    return OperationResponse(
        applied=applied,
        message="Section renamed" if applied else "Section not renamed",
        data={"section_id": request.new_id if applied else section_id},
    )


@router.post("/{session_id}/reorder")
async def reorder_sections(session_id: str, request: ReorderSectionsRequest) -> OperationResponse:
    session = get_session(session_id)
    applied = session.editor.reorder_sections(request.from_index, request.to_index)
    return OperationResponse(
        applied=applied,
        message="Sections reordered" if applied else "Sections unchanged",
        data={"order": [s.id for s in session.document.sections]},
    )
