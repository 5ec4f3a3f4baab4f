import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Start every test with empty contact-form rate limit counters."""
    from src.portfolio.security.rate_limit import reset_rate_limits

    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def game_hub():
    from src.portfolio.domain.models import ProjectRecord

    return ProjectRecord(
        project_id="gh",
        title="Game Hub",
        description="A discovery site built with Mantine UI",
        technologies=("React", "TypeScript"),
        live_url="https://gamehub.example.com",
        featured=True,
    )


@pytest.fixture
def make_catalog():
    from src.portfolio.domain.models import ProjectRecord

    def _make(count: int, featured_ids=()):
        return tuple(
            ProjectRecord(
                project_id=str(i),
                title=f"Project {i}",
                description=f"Description for project {i}",
                technologies=("Python",) if i % 2 else ("Go", "Python"),
                featured=str(i) in {str(f) for f in featured_ids},
            )
            for i in range(count)
        )

    return _make


@pytest.fixture
def client_with():
    """Build a TestClient with the portfolio data and/or email client overridden."""
    from fastapi.testclient import TestClient

    from src.portfolio.api.dependencies import get_email_client, get_portfolio_data
    from src.portfolio.api.main import app

    def _build(data=None, email=None) -> TestClient:
        if data is not None:
            app.dependency_overrides[get_portfolio_data] = lambda: data
        if email is not None:
            app.dependency_overrides[get_email_client] = lambda: email
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()
