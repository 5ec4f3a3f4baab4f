from __future__ import annotations

"""Project catalog filtering shared by the teaser and full listing views.

``filter_projects`` never reorders: the result is always a subsequence of the
catalog it was given.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from .models import ProjectRecord


class Scope(str, Enum):
    ALL = "all"
    FEATURED = "featured"


@dataclass(frozen=True)
class FilterState:
    query: str = ""
    scope: Scope = Scope.ALL


@dataclass(frozen=True)
class ProjectCounts:
    total: int
    featured: int


def parse_scope(value: str) -> Scope:
    """Parse a scope name case-insensitively; unknown names raise ValueError."""
    return Scope((value or "").strip().lower())


def matches_query(record: ProjectRecord, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    if needle in record.title.lower():
        return True
    if needle in record.description.lower():
        return True
    return any(needle in tech.lower() for tech in record.technologies)


def matches_scope(record: ProjectRecord, scope: Scope) -> bool:
    if scope == Scope.FEATURED:
        return record.featured
    return True


def filter_projects(
    catalog: Iterable[ProjectRecord],
    query: str = "",
    scope: Scope = Scope.ALL,
) -> List[ProjectRecord]:
    return [record for record in catalog if matches_query(record, query) and matches_scope(record, scope)]


def apply_filter(catalog: Iterable[ProjectRecord], state: FilterState) -> List[ProjectRecord]:
    return filter_projects(catalog, query=state.query, scope=state.scope)


def count_projects(catalog: Iterable[ProjectRecord]) -> ProjectCounts:
    records = list(catalog)
    return ProjectCounts(total=len(records), featured=sum(1 for r in records if r.featured))
