import base64
import json
import logging
import re
from typing import Any, Dict, Optional

import httpx

from fittrack.core.config import settings
from fittrack.core.exceptions import AIServiceError, FoodAnalysisError, InvalidArgument
from fittrack.schemas.meal import FoodEstimate

logger = logging.getLogger(__name__)

NO_FOOD_SENTINEL = "No Food in Image"

FOOD_IMAGE_PROMPT = (
    'Analyze this food image and return ONLY a JSON object in this format: '
    '{"meal_name": "name", "calories": number, "protein": number, "carbs": number, "fats": number}. '
    'Do not include any other text. Return info for all items in the image meaning if there are '
    '4 corn dogs in the image, the JSON should contain the total calories, protein, carbs, and fats '
    f'for all 4 corn dogs. If no food in the image, return a message saying {NO_FOOD_SENTINEL}.'
)

ASSISTANT_SYSTEM_PROMPT = (
    "You are a fitness expert. Please only respond to questions related to fitness. "
    "Do not answer questions about religion, sports, politics, programming. "
    "You can assist with questions about health (mental, physical and emotional)."
)


def _to_number(value: Any, cast) -> float:
    try:
        number = cast(float(value))
    except (TypeError, ValueError, OverflowError):
        return cast(0)
    return number if number == number else cast(0)


def parse_food_estimate(text: str) -> Optional[FoodEstimate]:
    """
    Разобрать ответ модели по фото еды.

    None - на фото нет еды. Иначе JSON целиком или первый блок {...} в тексте;
    отсутствующие и нечисловые поля становятся нулями.
    """
    if NO_FOOD_SENTINEL in text:
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        match = re.search(r"\{.*\}", text, re.DOTALL)
        if not match:
            raise FoodAnalysisError("В ответе модели нет JSON с оценкой питания")
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise FoodAnalysisError(f"Не удалось разобрать JSON из ответа модели: {e}")

    if not isinstance(data, dict):
        raise FoodAnalysisError("Ответ модели не является JSON-объектом")

    return FoodEstimate(
        meal_name=data.get("meal_name") or "Unknown Meal",
        calories=_to_number(data.get("calories"), int),
        protein=_to_number(data.get("protein"), float),
        carbs=_to_number(data.get("carbs"), float),
        fats=_to_number(data.get("fats"), float),
    )


class AIService:
    def __init__(self):
        self.gemini_api_key = settings.GEMINI_API_KEY
        self.gemini_url = (
            f"https://generativelanguage.googleapis.com/v1beta/models/{settings.GEMINI_MODEL}:generateContent"
        )
        self.openrouter_api_key = settings.OPENROUTER_API_KEY
        self.openrouter_url = "https://openrouter.ai/api/v1/chat/completions"
        self.timeout = settings.AI_TIMEOUT_SECONDS

        logger.info(
            "AI Service initialized. Gemini key: %s, OpenRouter key: %s",
            "PRESENT" if self.gemini_api_key else "NOT FOUND",
            "PRESENT" if self.openrouter_api_key else "NOT FOUND",
        )

    async def _post(self, url: str, payload: Dict[str, Any], headers: Dict[str, str],
                    params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    headers={"Content-Type": "application/json", **headers},
                    params=params,
                    json=payload,
                    timeout=self.timeout,
                )
        except httpx.TimeoutException:
            raise AIServiceError(f"Таймаут подключения к {url}")
        except httpx.HTTPError as e:
            raise AIServiceError(f"Ошибка подключения к {url}: {e}")

        logger.debug("AI response status: %s", response.status_code)

        if response.status_code != 200:
            error_msg = f"Ошибка AI API: {response.status_code}"
            try:
                error_data = response.json()
                error = error_data.get("error") if isinstance(error_data, dict) else None
                if isinstance(error, dict):
                    error_msg += f" - {error.get('message', error)}"
                elif error:
                    error_msg += f" - {error}"
            except ValueError:
                error_msg += f" - {response.text}"
            logger.error(error_msg)
            raise AIServiceError(error_msg)

        try:
            return response.json()
        except ValueError:
            raise AIServiceError("AI API вернул не JSON")

    async def analyze_food_image(self, image: bytes, mime_type: str) -> Optional[FoodEstimate]:
        """Оценка калорий и БЖУ по фото. None - еда на фото не найдена."""
        if not self.gemini_api_key:
            raise AIServiceError("AI сервис не настроен. Добавьте GEMINI_API_KEY в .env файл")
        if not image:
            raise InvalidArgument("Пустое изображение")

        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": FOOD_IMAGE_PROMPT},
                        {
                            "inline_data": {
                                "mime_type": mime_type,
                                "data": base64.b64encode(image).decode("ascii"),
                            }
                        },
                    ]
                }
            ]
        }
        result = await self._post(self.gemini_url, payload, headers={}, params={"key": self.gemini_api_key})

        try:
            text = result["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            raise AIServiceError("Неверный формат ответа от Gemini API")

        logger.debug("Gemini response text: %s", text)
        return parse_food_estimate(text)

    async def chat(self, message: str) -> str:
        """Ответ фитнес-ассистента на вопрос пользователя."""
        if not message or not message.strip():
            raise InvalidArgument("Сообщение не может быть пустым")
        if not self.openrouter_api_key:
            raise AIServiceError("AI сервис не настроен. Добавьте OPENROUTER_API_KEY в .env файл")

        payload = {
            "model": settings.OPENROUTER_MODEL,
            "messages": [
                {"role": "system", "content": ASSISTANT_SYSTEM_PROMPT},
                {"role": "user", "content": message},
            ],
        }
        result = await self._post(
            self.openrouter_url,
            payload,
            headers={"Authorization": f"Bearer {self.openrouter_api_key}"},
        )

        if "choices" in result and len(result["choices"]) > 0:
            choice = result["choices"][0]
            if "message" in choice and "content" in choice["message"]:
                return choice["message"]["content"]
        raise AIServiceError("Неверный формат ответа от OpenRouter API")


ai_service = AIService()
