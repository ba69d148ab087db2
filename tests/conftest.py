"""
Общие фикстуры для всех тестов FitTrack.

Стратегия:
- Тестовое FastAPI-приложение создаётся без startup-событий и CORS,
  но с теми же обработчиками исключений, что и основное.
- AIService заменяется на AsyncMock (mock_ai), чтобы тесты не ходили в Gemini/OpenRouter.
"""

import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from typing import AsyncGenerator

from fittrack.api.router import api_router
from fittrack.core.dependencies import get_ai_service
from fittrack.core.exception_handlers import register_exception_handlers
from fittrack.services.ai_service import AIService


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    test_app = FastAPI(title="FitTrack Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router, prefix="/api/v1")
    return test_app


# ---------------------------------------------------------------------------
# Фикстуры для зависимостей
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_ai() -> AsyncMock:
    """Мокированный AIService для эндпоинтов food и assistant."""
    return AsyncMock(spec=AIService)


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(mock_ai) -> AsyncGenerator[AsyncClient, None]:
    """Клиент тестового приложения: get_ai_service -> mock_ai."""
    app = create_test_app()
    app.dependency_overrides[get_ai_service] = lambda: mock_ai
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
