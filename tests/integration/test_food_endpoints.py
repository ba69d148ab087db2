"""
Интеграционные тесты эндпоинта POST /api/v1/food/analyze.

Покрываемые сценарии:
- Еда найдена: оценка калорий и БЖУ из ответа AI
- Еда не найдена: food_detected=False без оценки
- Неподдерживаемый тип файла -> 415, пустой файл -> 400
- Ошибка AI сервиса -> 502
"""

import pytest

from fittrack.core.exceptions import AIServiceError
from fittrack.schemas.meal import FoodEstimate

pytestmark = pytest.mark.integration


def image_upload(content_type: str = "image/jpeg", content: bytes = b"\xff\xd8fake-jpeg") -> dict:
    return {"file": ("meal.jpg", content, content_type)}


async def test_analyze_food_returns_estimate(client, mock_ai):
    mock_ai.analyze_food_image.return_value = FoodEstimate(
        meal_name="Corn dogs", calories=1040, protein=32, carbs=112, fats=52
    )

    response = await client.post("/api/v1/food/analyze", files=image_upload())

    assert response.status_code == 200
    data = response.json()
    assert data["food_detected"] is True
    assert data["estimate"]["meal_name"] == "Corn dogs"
    assert data["estimate"]["calories"] == 1040
    mock_ai.analyze_food_image.assert_awaited_once_with(b"\xff\xd8fake-jpeg", "image/jpeg")


async def test_analyze_food_without_food_in_image(client, mock_ai):
    mock_ai.analyze_food_image.return_value = None

    response = await client.post("/api/v1/food/analyze", files=image_upload(content_type="image/png"))

    assert response.status_code == 200
    assert response.json() == {"food_detected": False, "estimate": None}


async def test_analyze_food_unsupported_type_returns_415(client, mock_ai):
    response = await client.post("/api/v1/food/analyze", files=image_upload(content_type="application/pdf"))

    assert response.status_code == 415
    mock_ai.analyze_food_image.assert_not_awaited()


async def test_analyze_food_empty_file_returns_400(client, mock_ai):
    response = await client.post("/api/v1/food/analyze", files=image_upload(content=b""))

    assert response.status_code == 400
    mock_ai.analyze_food_image.assert_not_awaited()


async def test_analyze_food_ai_failure_returns_502(client, mock_ai):
    mock_ai.analyze_food_image.side_effect = AIServiceError("Ошибка AI API: 500")

    response = await client.post("/api/v1/food/analyze", files=image_upload())

    assert response.status_code == 502
    assert "500" in response.json()["detail"]


async def test_analyze_food_without_file_returns_422(client):
    response = await client.post("/api/v1/food/analyze")
    assert response.status_code == 422
