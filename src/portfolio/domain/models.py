from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class ProjectRecord:
    project_id: str
    title: str
    description: str
    image: Optional[str] = None
    technologies: Tuple[str, ...] = field(default_factory=tuple)
    live_url: Optional[str] = None
    source_url: Optional[str] = None
    featured: bool = False


Catalog = Tuple[ProjectRecord, ...]


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class Skill:
    name: str
    level: SkillLevel
    icon: Optional[str] = None


@dataclass(frozen=True)
class SkillCategory:
    name: str
    skills: Tuple[Skill, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PersonalInfo:
    name: str
    title: str
    description: str
    avatar: Optional[str] = None


@dataclass(frozen=True)
class AboutContent:
    summary: str
    experience: Tuple[str, ...] = field(default_factory=tuple)
    interests: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SocialLink:
    platform: str
    url: str
    icon: str


@dataclass(frozen=True)
class ContactInfo:
    email: str
    location: str
    phone: Optional[str] = None
    social: Tuple[SocialLink, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PortfolioData:
    personal: PersonalInfo
    about: AboutContent
    projects: Catalog
    skills: Tuple[SkillCategory, ...]
    contact: ContactInfo
