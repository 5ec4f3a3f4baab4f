from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...domain.filters import FilterState, Scope
from ...domain.models import PortfolioData
from ...services.card_renderer import ProjectCard, render_card
from ...services.catalog_service import get_project
from ...services.listing_service import ListingView, TeaserView, build_listing, build_teaser
from ..dependencies import get_portfolio_data

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ListingView)
def list_projects(
    q: str = Query(default="", description="Case-insensitive match on title, description or technology"),
    scope: Scope = Query(default=Scope.ALL, description="all or featured"),
    data: PortfolioData = Depends(get_portfolio_data),
) -> ListingView:
    return build_listing(data.projects, FilterState(query=q, scope=scope))


@router.get("/teaser", response_model=TeaserView)
def project_teaser(data: PortfolioData = Depends(get_portfolio_data)) -> TeaserView:
    return build_teaser(data.projects)


@router.get("/{project_id}", response_model=ProjectCard)
def project_detail(project_id: str, data: PortfolioData = Depends(get_portfolio_data)) -> ProjectCard:
    record = get_project(project_id, portfolio=data)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return render_card(record, index=data.projects.index(record))
