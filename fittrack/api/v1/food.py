from fastapi import APIRouter, Depends, File, UploadFile

from fittrack.core.dependencies import get_ai_service
from fittrack.schemas.meal import FoodAnalysisResponse
from fittrack.services.ai_service import AIService
from fittrack.services.uploads import read_image

router = APIRouter()


@router.post("/analyze", response_model=FoodAnalysisResponse)
async def analyze_food(
    file: UploadFile = File(...),
    ai: AIService = Depends(get_ai_service),
):
    """Оценить калории и БЖУ блюда по фото (JPEG/PNG/GIF до 10 МБ)."""
    content, content_type = await read_image(file)
    estimate = await ai.analyze_food_image(content, content_type)
    if estimate is None:
        return FoodAnalysisResponse(food_detected=False)
    return FoodAnalysisResponse(food_detected=True, estimate=estimate)
