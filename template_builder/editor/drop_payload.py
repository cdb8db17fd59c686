"""
Drag Payloads
=============

The palette attaches a small JSON record to every drag:
``{"type": <kind>, "content": ..., "style": ..., "properties": ...}``.
On drop only the kind is used; the editor rebuilds the component from the
defaults table.
"""

import json
import logging
from typing import Optional, Union

from ..models.template_models import ComponentKind
from .component_defaults import get_component_defaults

logger = logging.getLogger(__name__)


def build_drag_payload(kind: Union[ComponentKind, str]) -> str:
    """Serialize the drag record for a palette entry."""
    kind = ComponentKind(kind)
    return json.dumps({"type": kind.value, **get_component_defaults(kind)})


def parse_drag_payload(raw: Union[str, bytes, None]) -> Optional[ComponentKind]:
    """
    Extract the component kind from a drag record.

    Args:
        raw: JSON text attached to the drag

    Returns:
        The kind, or None when the payload is unusable (the drop is ignored)
    """
    if not raw:
        logger.warning("[DROP] Empty drag payload ignored")
        return None

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"[DROP] Failed to parse component data: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"[DROP] Drag payload is not an object: {type(data).__name__}")
        return None

    kind = data.get("type", data.get("kind"))
    try:
        return ComponentKind(kind)
    except (TypeError, ValueError):
        logger.warning(f"[DROP] Unknown component kind in drag payload: {kind!r}")
        return None
