from __future__ import annotations

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from ..domain.models import ProjectRecord

PLACEHOLDER_GLYPH = "</>"
FEATURED_BADGE = "Featured"


class CardAction(BaseModel):
    kind: str  # "live" or "source"
    label: str
    url: str
    target: str = "_blank"


class ProjectCard(BaseModel):
    project_id: str
    index: int = 0
    title: str
    description: str
    technologies: List[str] = Field(default_factory=list)
    featured: bool = False
    badge: Optional[str] = None
    image: Optional[str] = None
    placeholder: Optional[str] = None
    actions: List[CardAction] = Field(default_factory=list)


def _actions(record: ProjectRecord) -> List[CardAction]:
    actions: List[CardAction] = []
    if record.live_url:
        actions.append(CardAction(kind="live", label="Live Demo", url=record.live_url))
    if record.source_url:
        actions.append(CardAction(kind="source", label="Code", url=record.source_url))
    return actions


def render_card(record: ProjectRecord, index: int = 0) -> ProjectCard:
    """Map one project record to its card; reads nothing but ``record``."""
    image = record.image.strip() if record.image else ""
    return ProjectCard(
        project_id=record.project_id,
        index=index,
        title=record.title,
        description=record.description,
        technologies=list(record.technologies),
        featured=record.featured,
        badge=FEATURED_BADGE if record.featured else None,
        image=image or None,
        placeholder=None if image else PLACEHOLDER_GLYPH,
        actions=_actions(record),
    )


def render_cards(records: Iterable[ProjectRecord]) -> List[ProjectCard]:
    return [render_card(record, index=i) for i, record in enumerate(records)]
