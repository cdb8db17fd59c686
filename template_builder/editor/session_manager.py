"""
Editor Session Manager
======================

Keeps one editing session (document, selection, editor) per session id.
Sessions live in memory only; saving and loading templates belongs to an
external storage collaborator.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from ..models.template_models import CanvasDimensions
from .document import TemplateDocument
from .ids import generate_id
from .mutation_engine import TemplateEditor
from .selection import SelectionTracker

logger = logging.getLogger(__name__)


@dataclass
class EditorSession:
    """One template being edited."""
    session_id: str
    document: TemplateDocument
    editor: TemplateEditor
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def selection(self) -> SelectionTracker:
        return self.editor.selection

    def snapshot(self) -> Dict:
        """Document state plus the current selection, ready for JSON."""
        selection = self.selection.current
        return {
            "session_id": self.session_id,
            "created_at": self.created_at.isoformat(),
            **self.document.to_dict(),
            "selection": selection.model_dump(mode="json", by_alias=True, exclude_none=True) if selection else None,
        }


class SessionManager:
    """Manages editing sessions."""

    def __init__(
        self,
        default_template_name: str = "Untitled Template",
        default_canvas: Optional[CanvasDimensions] = None,
    ):
        self.default_template_name = default_template_name
        self.default_canvas = default_canvas or CanvasDimensions()
        self._sessions: Dict[str, EditorSession] = {}
        logger.info(f"[SESSIONS] Initialized with default name={default_template_name!r}")

    def create_session(self, session_id: Optional[str] = None) -> EditorSession:
        """Create a session with a fresh document; an existing id is returned as-is."""
        if session_id is None:
            session_id = generate_id()

        if session_id in self._sessions:
            return self._sessions[session_id]

        document = TemplateDocument(
            name=self.default_template_name,
            canvas=self.default_canvas.model_copy(),
        )
        session = EditorSession(
            session_id=session_id,
            document=document,
            editor=TemplateEditor(document, SelectionTracker()),
        )
        self._sessions[session_id] = session
        logger.info(f"[SESSIONS] Created session {session_id} (template {document.template.id})")
        return session

    def get_session(self, session_id: str) -> Optional[EditorSession]:
        return self._sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        if self._sessions.pop(session_id, None) is None:
            return False
        logger.info(f"[SESSIONS] Deleted session {session_id}")
        return True

    def list_sessions(self) -> List[str]:
        return list(self._sessions)
