from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime, date


class MealRecord(BaseModel):
    id: Optional[int] = None
    user_id: Optional[str] = None
    meal_name: str = "Unknown Meal"
    calories: Optional[float] = 0
    protein: Optional[float] = 0
    carbs: Optional[float] = 0
    fats: Optional[float] = 0
    created_at: datetime


class NutritionTotals(BaseModel):
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0


class NutritionAchievements(BaseModel):
    calories: bool = False
    protein: bool = False
    carbs: bool = False
    fats: bool = False
    last_checked: Optional[date] = None


class NutritionProgress(BaseModel):
    calories: float
    protein: float
    carbs: float
    fats: float


class DailyNutritionRequest(BaseModel):
    meals: List[MealRecord]
    day: date
    calorie_goal: Optional[float] = None
    previous: Optional[NutritionAchievements] = None
    timezone: Optional[str] = None


class DailyNutritionResponse(BaseModel):
    day: date
    totals: NutritionTotals
    achievements: NutritionAchievements
    progress: NutritionProgress


class FoodEstimate(BaseModel):
    meal_name: str = "Unknown Meal"
    calories: int = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0


class FoodAnalysisResponse(BaseModel):
    food_detected: bool
    estimate: Optional[FoodEstimate] = None
