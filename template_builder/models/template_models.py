"""
Template Models for Template Builder
====================================

Models for the document tree: template, sections, columns and components.

A column has no model of its own: it is a plain list of components,
addressed by its index inside the owning section.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Type, Union

from pydantic import BaseModel, Field, SerializeAsAny, field_validator, model_validator


class ComponentKind(str, Enum):
    """Content block types offered by the palette."""
    TEXT = "text"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    IMAGE = "image"
    BUTTON = "button"
    VIDEO = "video"
    TIMER = "timer"
    SOCIAL = "social"
    MENU = "menu"
    # Declared by the palette but rendered by the generic fallbacks
    HTML = "html"
    HEADER = "header"
    FOOTER = "footer"
    SPACER = "spacer"
    DIVIDER = "divider"
    SOCIAL_SHARE = "socialShare"


# ============================================================================
# Kind-specific properties
# ============================================================================

class ComponentProperties(BaseModel):
    """
    Properties shared by every kind.

    Unknown fields are kept in pydantic's extra map so custom fields
    survive a round-trip; see ``extra``.
    """

    class Config:
        extra = "allow"
        populate_by_name = True

    @property
    def extra(self) -> Dict[str, Any]:
        """Fields with no typed counterpart on this kind."""
        return dict(self.model_extra or {})


HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")


class HeadingProperties(ComponentProperties):
    """Heading level, stored as a tag name (h1..h6)."""
    level: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Optional[str]:
        # Accepts 3, "3", "h3", "H3"; anything else falls back to the default tag
        if value is None or isinstance(value, bool):
            return None
        text = str(value).strip().lower()
        if not text.startswith("h"):
            text = f"h{text}"
        return text if text in HEADING_LEVELS else None


class ImageProperties(ComponentProperties):
    src: Optional[str] = None
    alt_text: Optional[str] = Field(default=None, alias="altText")
    responsive: Optional[str] = None


class ButtonProperties(ComponentProperties):
    url: Optional[str] = None
    button_type: Optional[str] = Field(default=None, alias="buttonType")
    size: Optional[str] = None


class VideoProperties(ComponentProperties):
    src: Optional[str] = None
    controls: Optional[bool] = None
    autoplay: Optional[bool] = None
    loop: Optional[bool] = None


class TimerProperties(ComponentProperties):
    end_date: Optional[str] = Field(default=None, alias="endDate")
    format: Optional[str] = None


class MenuItem(BaseModel):
    """A single menu link."""
    text: str = ""
    url: str = "#"


class MenuProperties(ComponentProperties):
    menu_items: List[MenuItem] = Field(default_factory=list, alias="menuItems")


class SocialLink(BaseModel):
    """A social network entry; only enabled entries are rendered."""
    platform: str = Field(alias="type")
    url: str = "#"
    enabled: bool = True

    class Config:
        populate_by_name = True


class SocialProperties(ComponentProperties):
    social_media: List[SocialLink] = Field(default_factory=list, alias="socialMedia")


PROPERTIES_BY_KIND: Dict[ComponentKind, Type[ComponentProperties]] = {
    ComponentKind.HEADING: HeadingProperties,
    ComponentKind.IMAGE: ImageProperties,
    ComponentKind.BUTTON: ButtonProperties,
    ComponentKind.VIDEO: VideoProperties,
    ComponentKind.TIMER: TimerProperties,
    ComponentKind.MENU: MenuProperties,
    ComponentKind.SOCIAL: SocialProperties,
}


def properties_model_for(kind: Union[ComponentKind, str, None]) -> Type[ComponentProperties]:
    """Return the properties model for a component kind."""
    try:
        return PROPERTIES_BY_KIND.get(ComponentKind(kind), ComponentProperties)
    except ValueError:
        return ComponentProperties


def dump_properties(properties: ComponentProperties) -> Dict[str, Any]:
    """Wire form of a properties model (camelCase keys, unset fields dropped)."""
    return properties.model_dump(mode="json", by_alias=True, exclude_none=True)


# ============================================================================
# Document tree
# ============================================================================

class Component(BaseModel):
    """A content block owned by exactly one column."""
    id: str
    kind: ComponentKind
    content: str = ""
    style: Dict[str, str] = Field(default_factory=dict)
    properties: SerializeAsAny[ComponentProperties] = Field(default_factory=ComponentProperties)

    @model_validator(mode="before")
    @classmethod
    def _coerce_properties(cls, data: Any) -> Any:
        """Validate ``properties`` against the model matching ``kind``."""
        if not isinstance(data, dict):
            return data
        model = properties_model_for(data.get("kind"))
        raw = data.get("properties")
        if raw is None:
            return {**data, "properties": model()}
        if type(raw) is model:
            return data
        if isinstance(raw, BaseModel):
            raw = dump_properties(raw)
        return {**data, "properties": model.model_validate(raw)}

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Section(BaseModel):
    """A row of ``columns`` columns; ``components[i]`` is column ``i``."""
    id: str
    columns: int = Field(ge=1)
    components: List[List[Component]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_column_count(self) -> "Section":
        if len(self.components) > self.columns:
            raise ValueError(
                f"Section {self.id} has {len(self.components)} columns of components "
                f"but declares {self.columns}"
            )
        while len(self.components) < self.columns:
            self.components.append([])
        return self


class Template(BaseModel):
    """Root of the document tree."""
    id: str
    name: str = "Untitled Template"
    sections: List[Section] = Field(default_factory=list)


class CanvasDimensions(BaseModel):
    """Free-form sizing tokens for the editing canvas (e.g. "600px", "auto")."""
    width: str = Field(default="600px", min_length=1)
    height: str = Field(default="auto", min_length=1)


class Selection(BaseModel):
    """The component currently addressed for editing, with a cached view of it."""
    section_id: str
    column_index: int
    index: int
    component: Component

    @property
    def path(self):
        return self.section_id, self.column_index, self.index
