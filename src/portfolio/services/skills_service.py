from __future__ import annotations

from typing import Dict, Iterable, List

from pydantic import BaseModel

from ..domain.models import SkillCategory, SkillLevel

_STAR = "⭐"

_LEVEL_STARS: Dict[SkillLevel, int] = {
    SkillLevel.BEGINNER: 1,
    SkillLevel.INTERMEDIATE: 2,
    SkillLevel.ADVANCED: 3,
}

LEVEL_LEGEND: Dict[SkillLevel, str] = {
    SkillLevel.BEGINNER: "Learning & exploring",
    SkillLevel.INTERMEDIATE: "Comfortable & productive",
    SkillLevel.ADVANCED: "Expert level proficiency",
}


class SkillView(BaseModel):
    name: str
    level: SkillLevel
    stars: str
    icon: str | None = None


class SkillCategoryView(BaseModel):
    name: str
    skills: List[SkillView]


class SkillsSummary(BaseModel):
    total_skills: int
    advanced_skills: int
    category_count: int


class LegendEntry(BaseModel):
    level: SkillLevel
    label: str
    stars: str
    description: str


class SkillsMatrix(BaseModel):
    categories: List[SkillCategoryView]
    summary: SkillsSummary
    legend: List[LegendEntry]


def level_stars(level: SkillLevel) -> str:
    return _STAR * _LEVEL_STARS[SkillLevel(level)]


def summarize_skills(categories: Iterable[SkillCategory]) -> SkillsSummary:
    cats = list(categories)
    return SkillsSummary(
        total_skills=sum(len(c.skills) for c in cats),
        advanced_skills=sum(1 for c in cats for s in c.skills if s.level == SkillLevel.ADVANCED),
        category_count=len(cats),
    )


def build_skills_matrix(categories: Iterable[SkillCategory]) -> SkillsMatrix:
    cats = list(categories)
    views = [
        SkillCategoryView(
            name=c.name,
            skills=[SkillView(name=s.name, level=s.level, stars=level_stars(s.level), icon=s.icon) for s in c.skills],
        )
        for c in cats
    ]
    legend = [
        LegendEntry(level=level, label=level.value.capitalize(), stars=level_stars(level), description=desc)
        for level, desc in LEVEL_LEGEND.items()
    ]
    return SkillsMatrix(categories=views, summary=summarize_skills(cats), legend=legend)
