from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

from ..domain.models import (
    AboutContent,
    Catalog,
    ContactInfo,
    PersonalInfo,
    PortfolioData,
    ProjectRecord,
    Skill,
    SkillCategory,
    SkillLevel,
    SocialLink,
)

logger = logging.getLogger("portfolio.catalog")


# NOTE: Site content is hardcoded on purpose. Editing this module is how the
# portfolio gets updated; there is no runtime mutation.
_PERSONAL = PersonalInfo(
    name="Carl Jefferson",
    title="Full Stack Developer",
    description=(
        "I'm a passionate developer who loves creating beautiful, functional, and user-friendly "
        "applications. With expertise in modern web technologies, I bring ideas to life through clean code."
    ),
)

_ABOUT = AboutContent(
    summary=(
        "As a recent BSIT graduate, I focus on building scalable web applications and intuitive user "
        "interfaces. I'm passionate about writing clean, maintainable code and continuously learning new "
        "technologies. My goal is to grow as a full-stack developer while creating solutions that balance "
        "technical functionality with great user experiences."
    ),
    experience=(
        "Completed multiple academic and personal projects using React.js, Node.js, and MongoDB",
        "Built full-stack web applications from planning to deployment as part of capstone and personal work",
        "Collaborated with classmates and project teams to deliver functional, user-friendly software",
        "Participated in code reviews and applied best practices learned in coursework and internships",
        "Adapted quickly to new tools and frameworks during internships and volunteer projects",
    ),
    interests=(
        "Coding / Programming",
        "Open Source Contributions",
        "Machine Learning",
        "Mobile Development",
        "Gaming",
        "Reading Tech Blogs",
        "Watching TV Shows",
    ),
)

_PROJECTS: Catalog = (
    ProjectRecord(
        project_id="1",
        title="E-Commerce Platform",
        description=(
            "A modern e-commerce platform built with React, Node.js, and PostgreSQL. Features include user "
            "authentication, payment processing, inventory management, and admin dashboard."
        ),
        technologies=("React", "Node.js", "PostgreSQL", "Stripe", "Redux", "Express"),
        live_url="https://demo-ecommerce.com",
        source_url="https://github.com/carlj/ecommerce-platform",
        featured=True,
    ),
    ProjectRecord(
        project_id="2",
        title="Task Management App",
        description=(
            "A collaborative task management application with real-time updates, team collaboration "
            "features, and intuitive drag-and-drop interface."
        ),
        technologies=("Vue.js", "Firebase", "Vuex", "Socket.io", "Tailwind CSS"),
        live_url="https://demo-taskapp.com",
        source_url="https://github.com/carlj/task-management",
        featured=True,
    ),
    ProjectRecord(
        project_id="3",
        title="Weather Dashboard",
        description=(
            "A responsive weather dashboard that provides current conditions, forecasts, and weather maps "
            "with geolocation support and favorite locations."
        ),
        technologies=("React", "TypeScript", "OpenWeather API", "Recharts", "Styled Components"),
        live_url="https://demo-weather.com",
        source_url="https://github.com/carlj/weather-dashboard",
        featured=False,
    ),
    ProjectRecord(
        project_id="4",
        title="Portfolio Website",
        description=(
            "A responsive portfolio website built with modern web technologies, featuring dark mode, smooth "
            "animations, and contact form integration."
        ),
        technologies=("React", "TypeScript", "Tailwind CSS", "Framer Motion", "shadcn/ui"),
        live_url="https://carlj-portfolio.com",
        source_url="https://github.com/carlj/portfolio",
        featured=True,
    ),
    ProjectRecord(
        project_id="5",
        title="Blog Platform",
        description=(
            "A full-featured blog platform with content management, user authentication, commenting "
            "system, and SEO optimization."
        ),
        technologies=("Next.js", "Prisma", "PostgreSQL", "NextAuth", "MDX"),
        live_url="https://demo-blog.com",
        source_url="https://github.com/carlj/blog-platform",
        featured=False,
    ),
    ProjectRecord(
        project_id="6",
        title="Chat Application",
        description="Real-time chat application with rooms, private messaging, file sharing, and emoji support.",
        technologies=("React", "Socket.io", "Node.js", "MongoDB", "Express"),
        live_url="https://demo-chat.com",
        source_url="https://github.com/carlj/chat-app",
        featured=False,
    ),
)


def _skills(*pairs: tuple) -> tuple:
    return tuple(Skill(name=name, level=SkillLevel(level)) for name, level in pairs)


_SKILLS = (
    SkillCategory(
        name="Frontend",
        skills=_skills(
            ("React", "intermediate"),
            ("TypeScript", "intermediate"),
            ("Vue.js", "beginner"),
            ("Next.js", "intermediate"),
            ("Tailwind CSS", "intermediate"),
            ("Styled Components", "beginner"),
            ("Flutter", "beginner"),
        ),
    ),
    SkillCategory(
        name="Backend",
        skills=_skills(
            ("Node.js", "intermediate"),
            ("Express.js", "beginner"),
            ("Python", "beginner"),
            ("PostgreSQL", "beginner"),
            ("MongoDB", "intermediate"),
            ("GraphQL", "intermediate"),
            ("REST APIs", "advanced"),
        ),
    ),
    SkillCategory(
        name="Tools",
        skills=_skills(
            ("Git", "beginner"),
            ("Vercel", "intermediate"),
            ("Figma", "beginner"),
            ("VS Code", "advanced"),
            ("Postman", "intermediate"),
            ("Jest", "beginner"),
            ("Electron", "beginner"),
        ),
    ),
)

_CONTACT = ContactInfo(
    email="carlj@example.com",
    phone="+1 (555) 123-4567",
    location="San Francisco, CA",
    social=(
        SocialLink(platform="GitHub", url="https://github.com/carlj", icon="github"),
        SocialLink(platform="LinkedIn", url="https://linkedin.com/in/carlj", icon="linkedin"),
        SocialLink(platform="Twitter", url="https://twitter.com/carlj", icon="twitter"),
        SocialLink(platform="Email", url="mailto:carlj@example.com", icon="mail"),
    ),
)


def load_portfolio() -> PortfolioData:
    return PortfolioData(
        personal=_PERSONAL,
        about=_ABOUT,
        projects=_PROJECTS,
        skills=_SKILLS,
        contact=_CONTACT,
    )


@lru_cache(maxsize=1)
def get_portfolio() -> PortfolioData:
    data = load_portfolio()
    logger.info(
        "portfolio_loaded",
        extra={"projects": len(data.projects), "skill_categories": len(data.skills)},
    )
    return data


def list_projects(portfolio: Optional[PortfolioData] = None) -> List[ProjectRecord]:
    data = portfolio or get_portfolio()
    return list(data.projects)


def get_project(project_id: str, portfolio: Optional[PortfolioData] = None) -> Optional[ProjectRecord]:
    data = portfolio or get_portfolio()
    for project in data.projects:
        if project.project_id == project_id:
            return project
    return None
