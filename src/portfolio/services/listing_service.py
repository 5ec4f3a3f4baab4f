from __future__ import annotations

"""View bindings for the landing-page teaser and the full project listing.

Both read the same immutable catalog. The teaser never filters; the full
listing recomputes from the whole catalog on every call.
"""

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from ..domain.filters import FilterState, ProjectCounts, Scope, apply_filter, count_projects
from ..domain.models import ProjectRecord
from .card_renderer import ProjectCard, render_cards

TEASER_LIMIT = 3
LISTING_HREF = "/projects"
EMPTY_MESSAGE = "No projects found matching your criteria."
EMPTY_HINT = "Try adjusting your search or filter settings."


class TeaserView(BaseModel):
    cards: List[ProjectCard] = Field(default_factory=list)
    total: int
    show_view_all: bool
    view_all_href: Optional[str] = None


class CountsView(BaseModel):
    total: int
    featured: int

    @classmethod
    def from_counts(cls, counts: ProjectCounts) -> "CountsView":
        return cls(total=counts.total, featured=counts.featured)


class ScopeToggle(BaseModel):
    scope: Scope
    label: str
    count: int
    active: bool


class ListingView(BaseModel):
    query: str = ""
    scope: Scope = Scope.ALL
    cards: List[ProjectCard] = Field(default_factory=list)
    shown: int
    total: int
    summary: str
    counts: CountsView
    toggles: List[ScopeToggle] = Field(default_factory=list)
    is_empty: bool = False
    empty_message: Optional[str] = None
    empty_hint: Optional[str] = None


def build_teaser(catalog: Sequence[ProjectRecord], limit: int = TEASER_LIMIT) -> TeaserView:
    show_view_all = len(catalog) > limit
    return TeaserView(
        cards=render_cards(catalog[:limit]),
        total=len(catalog),
        show_view_all=show_view_all,
        view_all_href=LISTING_HREF if show_view_all else None,
    )


def _toggles(counts: ProjectCounts, active: Scope) -> List[ScopeToggle]:
    return [
        ScopeToggle(scope=Scope.ALL, label="All", count=counts.total, active=active == Scope.ALL),
        ScopeToggle(scope=Scope.FEATURED, label="Featured", count=counts.featured, active=active == Scope.FEATURED),
    ]


def build_listing(catalog: Sequence[ProjectRecord], state: Optional[FilterState] = None) -> ListingView:
    state = state or FilterState()
    filtered = apply_filter(catalog, state)
    counts = count_projects(catalog)
    is_empty = not filtered
    return ListingView(
        query=state.query,
        scope=state.scope,
        cards=render_cards(filtered),
        shown=len(filtered),
        total=len(catalog),
        summary=f"Showing {len(filtered)} of {len(catalog)} projects",
        counts=CountsView.from_counts(counts),
        toggles=_toggles(counts, state.scope),
        is_empty=is_empty,
        empty_message=EMPTY_MESSAGE if is_empty else None,
        empty_hint=EMPTY_HINT if is_empty else None,
    )
