from __future__ import annotations

from src.portfolio.domain.contact_models import ContactMessage
from src.portfolio.domain.models import Catalog, PortfolioData
from src.portfolio.services.catalog_service import load_portfolio
from src.portfolio.services.email_delivery import DeliveryResult


class FakeEmailClient:
    def __init__(self, ok: bool = True) -> None:
        self.ok = ok
        self.sent: list[ContactMessage] = []

    def send(self, message: ContactMessage) -> DeliveryResult:
        self.sent.append(message)
        if self.ok:
            return DeliveryResult(ok=True, status_code=200)
        return DeliveryResult(ok=False, detail="email delivery rejected", status_code=400)


def portfolio_with(projects: Catalog) -> PortfolioData:
    base = load_portfolio()
    return PortfolioData(
        personal=base.personal,
        about=base.about,
        projects=projects,
        skills=base.skills,
        contact=base.contact,
    )


VALID_MESSAGE = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "subject": "Project inquiry",
    "message": "I would like to talk about a new project.",
}
