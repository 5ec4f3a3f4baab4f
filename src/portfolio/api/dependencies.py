from __future__ import annotations

"""FastAPI dependencies shared by the routers.

Routers never import the catalog singleton directly; tests swap the data in
with ``app.dependency_overrides[get_portfolio_data]``.
"""

from ..domain.models import PortfolioData
from ..services.catalog_service import get_portfolio
from ..services.email_delivery import EmailDeliveryClient, get_delivery_client


def get_portfolio_data() -> PortfolioData:
    return get_portfolio()


def get_email_client() -> EmailDeliveryClient:
    return get_delivery_client()
