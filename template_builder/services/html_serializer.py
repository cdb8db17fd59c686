"""
Template HTML Serializer
========================

Renders a TemplateDocument to a standalone HTML document.

Output is deterministic: the same document state always produces the same
bytes. The serializer only reads the document, and missing optional
properties degrade to empty text or absent attributes instead of errors.
"""

import html
import logging
import re
from typing import Dict, List, Optional

from ..editor.document import TemplateDocument
from ..models.template_models import (
    Component,
    ComponentKind,
    Section,
    SocialLink,
)

logger = logging.getLogger(__name__)


DEFAULT_HEADING_TAG = "h2"
DEFAULT_SOCIAL_COLOR = "#1976d2"

# Accent color and glyph per social network
SOCIAL_PLATFORMS: Dict[str, Dict[str, str]] = {
    "facebook": {"color": "#1877F2", "glyph": "f"},
    "twitter": {"color": "#1DA1F2", "glyph": "t"},
    "instagram": {"color": "#E4405F", "glyph": "ig"},
    "linkedin": {"color": "#0A66C2", "glyph": "in"},
    "youtube": {"color": "#FF0000", "glyph": "yt"},
    "pinterest": {"color": "#BD081C", "glyph": "p"},
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_WHITESPACE = re.compile(r"\s+")

# React spells vendor keys WebkitTransform / msTransform
_VENDOR_PREFIXES = ("webkit-", "moz-", "ms-", "o-")


def _escape(value: object) -> str:
    return html.escape(str(value), quote=True)


def _attr(name: str, value: Optional[object]) -> str:
    """Render ` name="value"`, or nothing when value is None."""
    if value is None:
        return ""
    return f' {name}="{_escape(value)}"'


def css_property_name(key: str) -> str:
    """Convert a camelCase style key (fontSize) to its CSS name (font-size)."""
    if "-" in key or key.islower():
        return key
    name = _CAMEL_BOUNDARY.sub("-", key).lower()
    if name.startswith(_VENDOR_PREFIXES):
        name = "-" + name
    return name


def flatten_style(style: Dict[str, str]) -> str:
    """Join style entries as `name: value` pairs with `; `, keeping insertion order."""
    return "; ".join(
        f"{css_property_name(key)}: {value}"
        for key, value in style.items()
        if value is not None and str(value) != ""
    )


def column_width(columns: int) -> str:
    """Percentage width of one column, e.g. 50 or 33.3333."""
    return f"{100 / columns:.4f}".rstrip("0").rstrip(".")


def export_filename(name: str, extension: str = ".html") -> str:
    """Download name for a template: lower-cased, whitespace hyphenated."""
    slug = _WHITESPACE.sub("-", name.strip().lower())
    return f"{slug or 'untitled-template'}{extension}"


class TemplateSerializer:
    """Generates HTML for a template document."""

    def __init__(self):
        self.social_platforms = SOCIAL_PLATFORMS

    def serialize(self, document: TemplateDocument) -> str:
        """
        Render the whole document.

        Args:
            document: Document to render (not modified)

        Returns:
            Complete HTML document string
        """
        template = document.template
        logger.info(f"[SERIALIZER] Rendering template {template.id} with {len(template.sections)} section(s)")

        sections_html = [self._render_section(section) for section in template.sections]
        body = "\n" + "\n".join(sections_html) + "\n" if sections_html else ""

        container_style = f"max-width: {document.canvas.width}; margin: 0 auto;"
        lines = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="utf-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1">',
            f"<title>{_escape(template.name)}</title>",
            "</head>",
            '<body style="margin: 0; padding: 0;">',
            f"<!-- Template ID: {template.id.replace('--', '- -')} -->",
            f'<div class="template-container"{_attr("style", container_style)}>{body}</div>',
            "</body>",
            "</html>",
        ]
        return "\n".join(lines) + "\n"

    def _render_section(self, section: Section) -> str:
        width = column_width(section.columns)
        columns_html = []
        for column_index, column in enumerate(section.components):
            components_html = "".join(self._render_component(c) for c in column)
            columns_html.append(
                f'<div class="column" data-column-index="{column_index}" '
                f'style="width: {width}%; box-sizing: border-box;">{components_html}</div>'
            )
        return (
            f'<div class="section"{_attr("data-section-id", section.id)} '
            f'style="display: flex; width: 100%;">{"".join(columns_html)}</div>'
        )

    def _render_component(self, component: Component) -> str:
        """Render one component; the tag is chosen by its kind."""
        attrs = self._common_attrs(component)
        content = _escape(component.content)
        kind = component.kind

        if kind == ComponentKind.HEADING:
            tag = getattr(component.properties, "level", None) or DEFAULT_HEADING_TAG
            return f"<{tag}{attrs}>{content}</{tag}>"
        if kind == ComponentKind.PARAGRAPH:
            return f"<p{attrs}>{content}</p>"
        if kind == ComponentKind.IMAGE:
            return self._render_image(component, attrs)
        if kind == ComponentKind.BUTTON:
            return f'<button{attrs} type="button">{content}</button>'
        if kind == ComponentKind.VIDEO:
            return self._render_video(component, attrs)
        if kind == ComponentKind.TIMER:
            end_date = getattr(component.properties, "end_date", None) or ""
            return f'<div{attrs} class="timer">{_escape(end_date)}</div>'
        if kind == ComponentKind.MENU:
            return self._render_menu(component, attrs)
        if kind == ComponentKind.SOCIAL:
            return self._render_social(component, attrs)
        if kind == ComponentKind.HTML:
            # Raw markup by definition
            return f"<div{attrs}>{component.content}</div>"
        if kind == ComponentKind.DIVIDER:
            return f"<hr{attrs}>"
        if kind == ComponentKind.SPACER:
            return f"<div{attrs}></div>"
        if kind == ComponentKind.HEADER:
            return f"<header{attrs}>{content}</header>"
        if kind == ComponentKind.FOOTER:
            return f"<footer{attrs}>{content}</footer>"

        return f"<div{attrs}>{content}</div>"

    def _common_attrs(self, component: Component) -> str:
        style = flatten_style(component.style)
        return (
            _attr("data-component-id", component.id)
            + _attr("data-component-type", component.kind.value)
            + _attr("style", style or None)
        )

    def _render_image(self, component: Component, attrs: str) -> str:
        props = component.properties
        src = getattr(props, "src", None) or component.content or None
        alt = getattr(props, "alt_text", None)
        return f"<img{attrs}{_attr('src', src)}{_attr('alt', alt)}>"

    def _render_video(self, component: Component, attrs: str) -> str:
        props = component.properties
        flags = "".join(
            f" {name}" for name in ("controls", "autoplay", "loop") if getattr(props, name, None)
        )
        return f"<video{attrs}{_attr('src', getattr(props, 'src', None) or None)}{flags}></video>"

    def _render_menu(self, component: Component, attrs: str) -> str:
        items = getattr(component.properties, "menu_items", None) or []
        items_html = "".join(
            f'<li><a href="{_escape(item.url)}">{_escape(item.text)}</a></li>' for item in items
        )
        return f"<ul{attrs}>{items_html}</ul>"

    def _render_social(self, component: Component, attrs: str) -> str:
        links = getattr(component.properties, "social_media", None) or []
        links_html = "".join(self._render_social_link(link) for link in links if link.enabled)
        return f"<div{attrs}>{links_html}</div>"

    def _render_social_link(self, link: SocialLink) -> str:
        platform = link.platform.lower()
        info = self.social_platforms.get(platform, {})
        color = info.get("color", DEFAULT_SOCIAL_COLOR)
        glyph = info.get("glyph", platform[:1])
        icon = (
            '<svg width="24" height="24" viewBox="0 0 24 24" aria-hidden="true">'
            '<circle cx="12" cy="12" r="12" fill="currentColor"/>'
            '<text x="12" y="16" text-anchor="middle" font-size="11" '
            f'font-family="Arial, sans-serif" fill="#ffffff">{_escape(glyph)}</text>'
            "</svg>"
        )
        return (
            f'<a href="{_escape(link.url)}" target="_blank" rel="noopener noreferrer"'
            f'{_attr("aria-label", link.platform)} class="social-link"'
            f' style="color: {color}; display: inline-block; margin: 0 6px;">{icon}</a>'
        )


# Singleton instance
_serializer = None


def get_template_serializer() -> TemplateSerializer:
    """Get singleton TemplateSerializer instance."""
    global _serializer
    if _serializer is None:
        _serializer = TemplateSerializer()
    return _serializer


def serialize_template(document: TemplateDocument) -> str:
    """
    Convenience function to render a document to HTML.

    Args:
        document: Document to render

    Returns:
        HTML string
    """
    return get_template_serializer().serialize(document)
