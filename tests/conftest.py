"""Test configuration and fixtures."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.dependencies import get_copilot
from app.main import app
from app.services import AIService, ContentGeneratorService, SalesCopilot
from tests.stubs import TEST_AUTOSAVE_DELAY, StubProvider


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def ai(stub_provider: StubProvider) -> AIService:
    return AIService(providers=[stub_provider])


@pytest.fixture
def copilot(ai: AIService):
    """Fresh copilot session backed by the stub provider."""
    copilot = SalesCopilot(
        generator=ContentGeneratorService(ai),
        autosave_delay=TEST_AUTOSAVE_DELAY,
    )
    yield copilot
    copilot.autosaver.cancel()


@pytest_asyncio.fixture
async def drafted_copilot(copilot: SalesCopilot) -> SalesCopilot:
    """Copilot with the sample lead ingested and a draft generated."""
    copilot.ingest_lead()
    await copilot.generate_draft()
    return copilot


@pytest_asyncio.fixture
async def client(copilot: SalesCopilot):
    """Create test client bound to the fixture copilot."""
    app.dependency_overrides[get_copilot] = lambda: copilot

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
