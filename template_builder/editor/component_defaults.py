"""
Component Defaults
==================

Initial content, style and properties for every component kind, plus the
palette catalog shown by the sidebar.
"""

import copy
from datetime import datetime, timezone
from typing import Any, Dict, List

from ..models.template_models import ComponentKind


PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/600x300"

# style/properties use the editor's wire names (camelCase style keys)
COMPONENT_DEFAULTS: Dict[ComponentKind, Dict[str, Any]] = {
    ComponentKind.HEADER: {
        "content": "Header",
        "style": {},
    },
    ComponentKind.FOOTER: {
        "content": "Footer",
        "style": {},
    },
    ComponentKind.SPACER: {
        "content": "",
        "style": {"height": "40px"},
    },
    ComponentKind.DIVIDER: {
        "content": "",
        "style": {},
    },
    ComponentKind.TEXT: {
        "content": "Add your text here",
        "style": {
            "fontSize": "16px",
            "fontWeight": "normal",
            "color": "#333333",
            "lineHeight": "1.5",
        },
    },
    ComponentKind.HEADING: {
        "content": "Heading",
        "style": {
            "fontSize": "24px",
            "fontWeight": "bold",
            "color": "#222222",
        },
    },
    ComponentKind.PARAGRAPH: {
        "content": "Add your paragraph text here",
        "style": {
            "fontSize": "16px",
            "fontWeight": "normal",
            "color": "#333333",
            "lineHeight": "1.5",
        },
    },
    ComponentKind.IMAGE: {
        "content": PLACEHOLDER_IMAGE_URL,
        "style": {"width": "100%", "height": "100%"},
        "properties": {
            "altText": "Image description",
            "responsive": "true",
            "src": PLACEHOLDER_IMAGE_URL,
        },
    },
    ComponentKind.BUTTON: {
        "content": "Click Me",
        "style": {
            "padding": "8px 16px",
            "backgroundColor": "#1976d2",
            "color": "#ffffff",
            "borderRadius": "4px",
        },
    },
    ComponentKind.VIDEO: {
        "content": "",
        "style": {
            "width": "100%",
            "height": "100%",
            "objectFit": "cover",
            "display": "block",
        },
        "properties": {
            "controls": True,
            "autoplay": False,
            "loop": False,
            "src": PLACEHOLDER_IMAGE_URL,
        },
    },
    ComponentKind.HTML: {
        "content": "",
        "style": {},
    },
    ComponentKind.TIMER: {
        "content": "",
        "style": {},
        # endDate is filled in at creation time
        "properties": {"format": "dd:hh:mm:ss"},
    },
    ComponentKind.SOCIAL: {
        "content": "",
        "style": {},
        "properties": {
            "socialMedia": [
                {"type": "facebook", "url": "#", "enabled": True},
                {"type": "twitter", "url": "#", "enabled": True},
                {"type": "instagram", "url": "#", "enabled": True},
            ]
        },
    },
    ComponentKind.SOCIAL_SHARE: {
        "content": "",
        "style": {},
    },
    ComponentKind.MENU: {
        "content": "",
        "style": {},
        "properties": {
            "menuItems": [
                {"text": "Home", "url": "#"},
                {"text": "About", "url": "#"},
                {"text": "Contact", "url": "#"},
            ]
        },
    },
}


# Sidebar palette, in display order
COMPONENT_CATALOG: List[Dict[str, str]] = [
    {"kind": ComponentKind.TEXT.value, "label": "Text", "category": "Content"},
    {"kind": ComponentKind.HEADING.value, "label": "Heading", "category": "Content"},
    {"kind": ComponentKind.PARAGRAPH.value, "label": "Paragraph", "category": "Content"},
    {"kind": ComponentKind.IMAGE.value, "label": "Image", "category": "Content"},
    {"kind": ComponentKind.BUTTON.value, "label": "Button", "category": "Content"},
    {"kind": ComponentKind.VIDEO.value, "label": "Video", "category": "Content"},
    {"kind": ComponentKind.TIMER.value, "label": "Timer", "category": "Content"},
    {"kind": ComponentKind.SOCIAL.value, "label": "Social", "category": "Content"},
    {"kind": ComponentKind.MENU.value, "label": "Menu", "category": "Content"},
]


def get_component_defaults(kind: ComponentKind) -> Dict[str, Any]:
    """
    Return a fresh copy of the defaults for ``kind``.

    Every call returns new style/properties mappings, so components built
    from the same defaults never share state.

    Returns:
        Dict with ``content``, ``style`` and ``properties`` keys
    """
    kind = ComponentKind(kind)
    defaults = copy.deepcopy(COMPONENT_DEFAULTS.get(kind, {}))
    defaults.setdefault("content", "")
    defaults.setdefault("style", {})
    defaults.setdefault("properties", {})

    if kind == ComponentKind.TIMER:
        defaults["properties"]["endDate"] = datetime.now(timezone.utc).isoformat()

    return defaults
