"""
Утилиты для упражнений: ключи личных рекордов, объём, группировка подходов
и сборка записи тренировки из классифицированных упражнений.
"""
import logging
import re
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from fittrack.core.exceptions import InvalidArgument
from fittrack.schemas.workout import (
    ClassifiedExercise, ExerciseInput, ExerciseSet, LogWorkoutResponse, SetPerformance
)
from fittrack.services.intensity import IntensityCalculator, SetLike

logger = logging.getLogger(__name__)


class ExerciseCalculator:
    @staticmethod
    def normalize_exercise_key(name: str) -> str:
        """'Bench  Press' -> 'bench_press'"""
        if not name or not name.strip():
            raise InvalidArgument("Название упражнения не может быть пустым")
        return re.sub(r"\s+", "_", name.lower())

    @staticmethod
    def sanitize_personal_bests(raw: Optional[Mapping]) -> Optional[Dict[str, SetPerformance]]:
        """Оставить только рекорды с заполненными (ненулевыми) весом и повторениями."""
        sanitized = {}
        for exercise, data in (raw or {}).items():
            if isinstance(data, SetPerformance):
                data = data.model_dump()
            data = data or {}
            weight, reps = data.get("weight"), data.get("reps")
            if not weight or not reps:
                continue
            try:
                sanitized[exercise] = SetPerformance(weight=float(weight), reps=int(float(reps)))
            except (TypeError, ValueError, OverflowError):
                logger.debug("Пропускаем некорректный рекорд %s: %r", exercise, data)
        return sanitized or None

    @classmethod
    def personal_best_for(
            cls,
            exercise_name: str,
            personal_bests: Optional[Mapping[str, SetLike]]
    ) -> Optional[SetLike]:
        if not personal_bests:
            return None
        return personal_bests.get(cls.normalize_exercise_key(exercise_name))

    @staticmethod
    def total_volume(sets: Iterable[SetLike]) -> float:
        total = 0.0
        for item in sets:
            performance = IntensityCalculator.to_set(item)
            total += performance.weight * performance.reps
        return total

    @staticmethod
    def group_sets(exercise_sets: Sequence[ExerciseSet]) -> Dict[str, List[ExerciseSet]]:
        """Подходы по названию упражнения в порядке первого появления, внутри по set_number."""
        grouped: Dict[str, List[ExerciseSet]] = {}
        for exercise_set in exercise_sets:
            grouped.setdefault(exercise_set.exercise_name, []).append(exercise_set)
        return {
            name: sorted(sets, key=lambda s: s.set_number)
            for name, sets in grouped.items()
        }

    @classmethod
    def classify(
            cls,
            exercise: ExerciseInput,
            personal_bests: Optional[Mapping[str, SetLike]] = None
    ) -> ClassifiedExercise:
        intensity = IntensityCalculator.classify_exercise(
            exercise.sets,
            exercise.recent_sets,
            cls.personal_best_for(exercise.exercise_name, personal_bests),
        )
        return ClassifiedExercise(
            exercise_name=exercise.exercise_name,
            sets=exercise.sets,
            intensity=intensity,
            total_volume=cls.total_volume(exercise.sets),
        )

    @staticmethod
    def build_exercise_sets(
            workout_id: Optional[int],
            exercises: Sequence[ClassifiedExercise]
    ) -> List[ExerciseSet]:
        """Развернуть упражнения в строки подходов с нумерацией 1..n внутри упражнения."""
        return [
            ExerciseSet(
                workout_id=workout_id,
                exercise_name=exercise.exercise_name,
                set_number=index,
                weight=performance.weight,
                reps=performance.reps,
                intensity=exercise.intensity,
            )
            for exercise in exercises
            for index, performance in enumerate(exercise.sets, start=1)
        ]

    @classmethod
    def log_workout(
            cls,
            exercises: Sequence[ExerciseInput],
            personal_bests: Optional[Mapping[str, SetLike]] = None,
            name: str = "Workout",
            workout_id: Optional[int] = None
    ) -> LogWorkoutResponse:
        if not exercises:
            raise InvalidArgument("Добавьте хотя бы одно упражнение")

        personal_bests = cls.sanitize_personal_bests(personal_bests)
        classified = [cls.classify(exercise, personal_bests) for exercise in exercises]
        intensity = IntensityCalculator.aggregate_workout([e.intensity for e in classified])
        logger.info("Тренировка '%s': %d упражнений, интенсивность %s", name, len(classified), intensity.value)

        return LogWorkoutResponse(
            name=name or "Workout",
            intensity=intensity,
            exercises=classified,
            sets=cls.build_exercise_sets(workout_id, classified),
        )
