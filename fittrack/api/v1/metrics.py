from fastapi import APIRouter
import logging

from fittrack.core.rounding import round_half_up
from fittrack.schemas.activity import (
    DistanceProgress, DistanceRequest, WeeklyActivity, WorkoutHistoryPage, WorkoutHistoryRequest,
    WorkoutsSnapshot, WorkoutStatsResponse
)
from fittrack.schemas.meal import DailyNutritionRequest, DailyNutritionResponse
from fittrack.schemas.profile import GoalsRequest, GoalsResponse
from fittrack.schemas.workout import (
    ExerciseIntensityRequest, ExerciseIntensityResponse, ExerciseSetGroup, LogWorkoutRequest,
    LogWorkoutResponse, WorkoutDetailsRequest, WorkoutDetailsResponse, WorkoutIntensityRequest,
    WorkoutIntensityResponse
)
from fittrack.services.activity import ActivityCalculator, resolve_timezone
from fittrack.services.distance import DistanceCalculator
from fittrack.services.exercise import ExerciseCalculator
from fittrack.services.intensity import IntensityCalculator
from fittrack.services.nutrition_calculator import NutritionCalculator
from fittrack.services.pagination import has_more, page_of

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/exercise-intensity", response_model=ExerciseIntensityResponse)
async def classify_exercise(request: ExerciseIntensityRequest):
    """Оценить интенсивность упражнения относительно последних подходов или личного рекорда"""
    intensity = IntensityCalculator.classify_exercise(
        request.current_sets,
        request.recent_sets,
        request.personal_best,
    )
    return ExerciseIntensityResponse(
        intensity=intensity,
        current_performance=IntensityCalculator.max_volume_set(request.current_sets),
        recent_average=IntensityCalculator.recent_average(request.recent_sets),
    )


@router.post("/workout-intensity", response_model=WorkoutIntensityResponse)
async def aggregate_workout(request: WorkoutIntensityRequest):
    mean_score = IntensityCalculator.mean_score(request.intensities)
    return WorkoutIntensityResponse(
        intensity=IntensityCalculator.from_score(mean_score),
        mean_score=round_half_up(mean_score, 2),
    )


@router.post("/log-workout", response_model=LogWorkoutResponse)
async def log_workout(request: LogWorkoutRequest):
    """Классифицировать все упражнения тренировки и посчитать общую интенсивность"""
    return ExerciseCalculator.log_workout(
        request.exercises,
        personal_bests=request.personal_bests,
        name=request.name,
    )


@router.post("/workout-details", response_model=WorkoutDetailsResponse)
async def workout_details(request: WorkoutDetailsRequest):
    """Подходы тренировки, сгруппированные по упражнениям"""
    grouped = ExerciseCalculator.group_sets(request.sets)
    return WorkoutDetailsResponse(exercises=[
        ExerciseSetGroup(exercise_name=name, intensity=sets[0].intensity, sets=sets)
        for name, sets in grouped.items()
    ])


@router.post("/workout-history", response_model=WorkoutHistoryPage)
async def workout_history(request: WorkoutHistoryRequest):
    bounds, workouts = page_of(request.workouts, request.page, request.page_size)
    return WorkoutHistoryPage(
        page=bounds.page,
        page_size=bounds.page_size,
        workouts=workouts,
        has_more=has_more(len(workouts), bounds.page_size),
    )


@router.post("/weekly-activity", response_model=WeeklyActivity)
async def weekly_activity(snapshot: WorkoutsSnapshot):
    tz = resolve_timezone(snapshot.timezone)
    workouts = snapshot.workouts
    if snapshot.reference is not None:
        workouts = ActivityCalculator.workouts_in_week(workouts, snapshot.reference, tz)
    return ActivityCalculator.weekly_intensity(workouts, tz)


@router.post("/workout-stats", response_model=WorkoutStatsResponse)
async def workout_stats(snapshot: WorkoutsSnapshot):
    tz = resolve_timezone(snapshot.timezone)
    return WorkoutStatsResponse(
        stats=ActivityCalculator.workout_stats(snapshot.workouts, tz),
        chart=ActivityCalculator.intensity_chart(snapshot.workouts, tz),
    )


@router.post("/daily-nutrition", response_model=DailyNutritionResponse)
async def daily_nutrition(request: DailyNutritionRequest):
    """Итоги питания за день, флаги достижения целей и прогресс в процентах"""
    totals = NutritionCalculator.daily_totals(request.meals, request.day, resolve_timezone(request.timezone))
    achievements = NutritionCalculator.check_achievements(
        totals,
        calorie_goal=request.calorie_goal,
        previous=request.previous,
        today=request.day,
    )
    return DailyNutritionResponse(
        day=request.day,
        totals=totals,
        achievements=achievements,
        progress=NutritionCalculator.progress(totals, request.calorie_goal),
    )


@router.post("/distance", response_model=DistanceProgress)
async def distance(request: DistanceRequest):
    return DistanceCalculator.progress(request.steps, request.goal_km)


@router.post("/goals", response_model=GoalsResponse)
async def goals(request: GoalsRequest):
    """Дневная цель по калориям и дистанции по росту, весу и цели пользователя"""
    calorie_goal = NutritionCalculator.calculate_calorie_goal(request.weight, request.height, request.goal)
    logger.debug("Цели рассчитаны: %s ккал", calorie_goal)
    return GoalsResponse(
        calorie_goal=calorie_goal,
        distance_goal=NutritionCalculator.calculate_distance_goal(request.weight),
        bmr=round_half_up(NutritionCalculator.calculate_bmr(request.weight, request.height), 2),
    )
