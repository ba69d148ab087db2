"""
Модульные тесты для NutritionCalculator.

Покрываемые методы:
- daily_totals: сумма калорий и БЖУ только за выбранный день, пустые значения = 0
- evaluate_goals / check_achievements: флаги целей и сброс при смене дня
- progress_percentage: прогресс в процентах с ограничением 100
- calculate_calorie_goal: Миффлин-Сан Жеор, возраст 25, коэффициент 1.375, ±500 ккал
- calculate_distance_goal: 0.033 км на кг, минимум 3 км
- validate_body_metrics: допустимые рост и вес

Расчёт не зависит от сети или приложения.
"""

from datetime import date, datetime, timedelta

import pytest

from fittrack.core.exceptions import InvalidArgument
from fittrack.schemas.meal import MealRecord, NutritionAchievements, NutritionTotals
from fittrack.services.nutrition_calculator import NutritionCalculator

pytestmark = pytest.mark.unit

TODAY = date(2024, 3, 4)


def meal(hour: int, calories, protein, carbs, fats, day: date = TODAY) -> MealRecord:
    return MealRecord(
        meal_name="Meal",
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        created_at=datetime(day.year, day.month, day.day, hour, 0),
    )


@pytest.fixture
def todays_meals():
    """Итого за день: 2100 ккал, 140 г белка, 260 г углеводов, 60 г жиров."""
    return [
        meal(8, 600, 40, 80, 20),
        meal(13, 800, 50, 100, 25),
        meal(19, 700, 50, 80, 15),
        meal(22, 900, 90, 90, 30, day=TODAY - timedelta(days=1)),
    ]


# ---------------------------------------------------------------------------
# daily_totals
# ---------------------------------------------------------------------------

def test_daily_totals_sums_only_selected_day(todays_meals):
    totals = NutritionCalculator.daily_totals(todays_meals, TODAY)

    assert totals.calories == pytest.approx(2100)
    assert totals.protein == pytest.approx(140)
    assert totals.carbs == pytest.approx(260)
    assert totals.fats == pytest.approx(60)


def test_daily_totals_treats_missing_values_as_zero():
    meals = [meal(9, 300, None, 40, None)]
    totals = NutritionCalculator.daily_totals(meals, TODAY)
    assert totals.protein == 0
    assert totals.fats == 0
    assert totals.calories == 300


def test_daily_totals_rejects_negative_values():
    with pytest.raises(InvalidArgument):
        NutritionCalculator.daily_totals([meal(9, -100, 0, 0, 0)], TODAY)


def test_daily_totals_empty_day():
    assert NutritionCalculator.daily_totals([], TODAY) == NutritionTotals()


# ---------------------------------------------------------------------------
# evaluate_goals / check_achievements
# ---------------------------------------------------------------------------

def test_goals_example_calories_and_carbs_achieved(todays_meals):
    totals = NutritionCalculator.daily_totals(todays_meals, TODAY)

    achievements = NutritionCalculator.evaluate_goals(totals, calorie_goal=2000)

    assert achievements.calories is True
    assert achievements.protein is False
    assert achievements.carbs is True
    assert achievements.fats is False


def test_goals_thresholds_are_inclusive():
    totals = NutritionTotals(calories=2000, protein=150, carbs=250, fats=65)
    achievements = NutritionCalculator.evaluate_goals(totals, calorie_goal=2000)
    assert all([achievements.calories, achievements.protein, achievements.carbs, achievements.fats])


def test_goals_default_calorie_goal_is_2000():
    achievements = NutritionCalculator.evaluate_goals(NutritionTotals(calories=1999))
    assert achievements.calories is False


def test_check_achievements_same_day_evaluates_goals():
    totals = NutritionTotals(calories=2500, protein=160, carbs=100, fats=10)
    previous = NutritionAchievements(last_checked=TODAY)

    achievements = NutritionCalculator.check_achievements(totals, 2000, previous, today=TODAY)

    assert achievements.calories is True
    assert achievements.protein is True
    assert achievements.last_checked == TODAY


def test_check_achievements_resets_flags_on_new_day():
    totals = NutritionTotals(calories=2500, protein=160, carbs=300, fats=70)
    previous = NutritionAchievements(
        calories=True, protein=True, carbs=True, fats=True, last_checked=TODAY - timedelta(days=1)
    )

    achievements = NutritionCalculator.check_achievements(totals, 2000, previous, today=TODAY)

    assert achievements == NutritionAchievements(last_checked=TODAY)


def test_check_achievements_first_check_without_previous():
    totals = NutritionTotals(calories=2100, protein=140, carbs=260, fats=60)
    achievements = NutritionCalculator.check_achievements(totals, 2000, None, today=TODAY)
    assert (achievements.calories, achievements.protein, achievements.carbs, achievements.fats) == (
        True, False, True, False
    )


# ---------------------------------------------------------------------------
# progress_percentage
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "current, goal, expected",
    [
        (0, 2000, 0),
        (1000, 2000, 50),
        (2000, 2000, 100),
        (3500, 2000, 100),
        (75, 150, 50),
    ],
)
def test_progress_percentage_is_capped(current, goal, expected):
    assert NutritionCalculator.progress_percentage(current, goal) == pytest.approx(expected)


def test_progress_percentage_requires_positive_goal():
    with pytest.raises(InvalidArgument):
        NutritionCalculator.progress_percentage(100, 0)


def test_progress_for_all_macros():
    totals = NutritionTotals(calories=1000, protein=150, carbs=125, fats=130)
    progress = NutritionCalculator.progress(totals, calorie_goal=2000)
    assert progress.calories == pytest.approx(50)
    assert progress.protein == pytest.approx(100)
    assert progress.carbs == pytest.approx(50)
    assert progress.fats == pytest.approx(100)


# ---------------------------------------------------------------------------
# calculate_calorie_goal / calculate_distance_goal
# ---------------------------------------------------------------------------

def test_calculate_bmr_uses_fixed_age():
    """10*80 + 6.25*180 - 5*25 + 5 = 1805"""
    assert NutritionCalculator.calculate_bmr(weight=80, height=180) == pytest.approx(1805)


def test_calculate_calorie_goal_gain_adds_500():
    """1805 * 1.375 = 2481.875; +500 -> 2982"""
    assert NutritionCalculator.calculate_calorie_goal(weight=80, height=180, goal="gain") == 2982


def test_calculate_calorie_goal_lose_subtracts_500():
    assert NutritionCalculator.calculate_calorie_goal(weight=80, height=180, goal="lose") == 1982


@pytest.mark.parametrize("height, weight", [(90, 80), (260, 80), (180, 25), (180, 300)])
def test_calculate_calorie_goal_rejects_out_of_range_body_metrics(height, weight):
    with pytest.raises(InvalidArgument):
        NutritionCalculator.calculate_calorie_goal(weight=weight, height=height, goal="gain")


@pytest.mark.parametrize(
    "weight, expected",
    [
        (80, 3.0),    # 2.64 -> 2.6, ниже минимума
        (100, 3.3),
        (120, 4.0),   # 3.96 -> 4.0
    ],
)
def test_calculate_distance_goal(weight, expected):
    assert NutritionCalculator.calculate_distance_goal(weight) == pytest.approx(expected)
