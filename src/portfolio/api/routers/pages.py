from __future__ import annotations

from datetime import datetime
from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ...domain.filters import FilterState, Scope
from ...domain.models import PortfolioData
from ...services.listing_service import build_listing, build_teaser
from ...services.skills_service import build_skills_matrix
from ..dependencies import get_portfolio_data

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

NAV_ITEMS = [
    {"href": "#home", "label": "Home"},
    {"href": "#about", "label": "About"},
    {"href": "#projects", "label": "Projects"},
    {"href": "#skills", "label": "Skills"},
    {"href": "#contact", "label": "Contact"},
]

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
def home_page(request: Request, data: PortfolioData = Depends(get_portfolio_data)):
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "nav_items": NAV_ITEMS,
            "personal": data.personal,
            "about": data.about,
            "teaser": build_teaser(data.projects),
            "skills": build_skills_matrix(data.skills),
            "contact": data.contact,
            "year": datetime.now().year,
        },
    )


@router.get("/projects", response_class=HTMLResponse)
def projects_page(
    request: Request,
    q: str = Query(default=""),
    scope: Scope = Query(default=Scope.ALL),
    data: PortfolioData = Depends(get_portfolio_data),
):
    return templates.TemplateResponse(
        request,
        "projects.html",
        {
            "personal": data.personal,
            "contact": data.contact,
            "year": datetime.now().year,
            "listing": build_listing(data.projects, FilterState(query=q, scope=scope)),
        },
    )
