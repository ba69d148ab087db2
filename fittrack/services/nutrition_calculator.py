import logging
from datetime import date
from typing import Dict, Optional, Sequence

from fittrack.core import constants
from fittrack.core.config import settings
from fittrack.core.exceptions import InvalidArgument
from fittrack.core.rounding import ensure_non_negative, round_half_up
from fittrack.schemas.meal import MealRecord, NutritionAchievements, NutritionProgress, NutritionTotals
from fittrack.services.activity import TimezoneLike, to_local

logger = logging.getLogger(__name__)


class NutritionCalculator:
    MACROS = ("calories", "protein", "carbs", "fats")

    @classmethod
    def daily_goals(cls, calorie_goal: Optional[float] = None) -> Dict[str, float]:
        if calorie_goal is None:
            calorie_goal = settings.DEFAULT_CALORIE_GOAL
        ensure_non_negative(calorie_goal, "calorie_goal")
        return {
            "calories": calorie_goal,
            "protein": settings.PROTEIN_GOAL_G,
            "carbs": settings.CARBS_GOAL_G,
            "fats": settings.FATS_GOAL_G,
        }

    @classmethod
    def daily_totals(
            cls,
            meals: Sequence[MealRecord],
            day: date,
            tz: TimezoneLike = None
    ) -> NutritionTotals:
        """Сумма калорий и БЖУ по приёмам пищи за календарный день (пустые значения = 0)."""
        totals = dict.fromkeys(cls.MACROS, 0.0)
        for meal in meals:
            if to_local(meal.created_at, tz).date() != day:
                continue
            for macro in cls.MACROS:
                value = getattr(meal, macro) or 0
                ensure_non_negative(value, macro)
                totals[macro] += value
        return NutritionTotals(**totals)

    @classmethod
    def evaluate_goals(
            cls,
            totals: NutritionTotals,
            calorie_goal: Optional[float] = None,
            today: Optional[date] = None
    ) -> NutritionAchievements:
        goals = cls.daily_goals(calorie_goal)
        flags = {macro: getattr(totals, macro) >= goals[macro] for macro in cls.MACROS}
        return NutritionAchievements(**flags, last_checked=today)

    @classmethod
    def check_achievements(
            cls,
            totals: NutritionTotals,
            calorie_goal: Optional[float] = None,
            previous: Optional[NutritionAchievements] = None,
            today: Optional[date] = None
    ) -> NutritionAchievements:
        """
        Флаги выполнения дневных целей.

        Если прошлая проверка была в предыдущий день, флаги сбрасываются
        и в этот вызов не пересчитываются.
        """
        today = today or date.today()
        if previous is not None and previous.last_checked is not None and previous.last_checked < today:
            logger.debug("Новый день (%s), сбрасываем достижения", today)
            return NutritionAchievements(last_checked=today)
        return cls.evaluate_goals(totals, calorie_goal, today)

    @staticmethod
    def progress_percentage(current: float, goal: float) -> float:
        ensure_non_negative(current, "current")
        if not goal or goal <= 0:
            raise InvalidArgument(f"Цель должна быть положительной, получено {goal!r}")
        return min(current / goal * 100, 100)

    @classmethod
    def progress(cls, totals: NutritionTotals, calorie_goal: Optional[float] = None) -> NutritionProgress:
        goals = cls.daily_goals(calorie_goal)
        return NutritionProgress(**{
            macro: cls.progress_percentage(getattr(totals, macro), goals[macro])
            for macro in cls.MACROS
        })

    @staticmethod
    def validate_body_metrics(height: float, weight: float) -> None:
        min_height, max_height = constants.HEIGHT_RANGE_CM
        min_weight, max_weight = constants.WEIGHT_RANGE_KG
        if height is None or not min_height <= height <= max_height:
            raise InvalidArgument(f"Рост должен быть в диапазоне {min_height}-{max_height} см")
        if weight is None or not min_weight <= weight <= max_weight:
            raise InvalidArgument(f"Вес должен быть в диапазоне {min_weight}-{max_weight} кг")

    @classmethod
    def calculate_bmr(cls, weight: float, height: float, age: int = constants.DEFAULT_AGE) -> float:
        return 10 * weight + 6.25 * height - 5 * age + 5

    @classmethod
    def calculate_tdee(cls, bmr: float) -> float:
        return bmr * constants.ACTIVITY_FACTOR

    @classmethod
    def calculate_calorie_goal(cls, weight: float, height: float, goal: str) -> int:
        cls.validate_body_metrics(height, weight)
        tdee = cls.calculate_tdee(cls.calculate_bmr(weight, height))
        if str(getattr(goal, "value", goal)) == "gain":
            return round_half_up(tdee + constants.CALORIE_ADJUSTMENT)
        return round_half_up(tdee - constants.CALORIE_ADJUSTMENT)

    @classmethod
    def calculate_distance_goal(cls, weight: float) -> float:
        ensure_non_negative(weight, "weight")
        return float(max(constants.MIN_DISTANCE_GOAL_KM, round_half_up(weight * constants.DISTANCE_GOAL_PER_KG, 1)))
