"""
API Models for Template Builder
===============================

Request and response bodies shared by the HTTP routes.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from .template_models import ComponentKind


class OperationResponse(BaseModel):
    """Result of an editing operation.

    ``applied`` is False when the operation was a no-op (stale path or id);
    that is not an error.
    """
    applied: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    selection: Optional[Dict[str, Any]] = None


class TemplateNameRequest(BaseModel):
    name: str


class CanvasDimensionsRequest(BaseModel):
    width: Optional[str] = None
    height: Optional[str] = None


class SelectedSectionRequest(BaseModel):
    section_id: Optional[str] = None


class AddSectionRequest(BaseModel):
    columns: int = Field(default=1, ge=1, description="Number of columns")


class RenameSectionRequest(BaseModel):
    new_id: str = Field(min_length=1)


class ReorderSectionsRequest(BaseModel):
    from_index: int
    to_index: int


class FieldUpdatesRequest(BaseModel):
    """Partial updates for a section or component."""
    updates: Dict[str, Any] = Field(default_factory=dict)


class AddComponentRequest(BaseModel):
    section_id: str
    column_index: int = Field(ge=0)
    kind: ComponentKind


class DropComponentRequest(BaseModel):
    """A palette drop: the raw drag payload as attached by the palette."""
    section_id: str
    column_index: int = Field(ge=0)
    payload: str = ""


class MoveComponentRequest(BaseModel):
    src_section_id: str
    src_column_index: int
    src_index: int
    dst_section_id: str
    dst_column_index: int
    dst_index: int


class StyleUpdateRequest(BaseModel):
    property: str = Field(min_length=1)
    value: str
