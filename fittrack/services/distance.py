from typing import Optional

from fittrack.core import constants
from fittrack.core.config import settings
from fittrack.core.exceptions import InvalidArgument
from fittrack.core.rounding import ensure_non_negative, round_half_up
from fittrack.schemas.activity import DistanceProgress


class DistanceCalculator:
    STRIDE_LENGTH_M = constants.STRIDE_LENGTH_M
    STEPS_PER_KM = constants.STEPS_PER_KM

    @classmethod
    def calculate_distance(cls, steps: int) -> float:
        """Дистанция в км: среднее оценок по длине шага и по шагам на километр."""
        ensure_non_negative(steps, "steps")
        distance_by_stride = steps * cls.STRIDE_LENGTH_M / 1000
        distance_by_steps = steps / cls.STEPS_PER_KM
        return round_half_up((distance_by_stride + distance_by_steps) / 2, 2)

    @staticmethod
    def progress_ratio(distance: float, goal: float) -> float:
        ensure_non_negative(distance, "distance")
        if goal is None or goal <= 0:
            raise InvalidArgument(f"Цель по дистанции должна быть положительной, получено {goal!r}")
        return min(distance / goal, 1)

    @classmethod
    def progress(cls, steps: int, goal_km: Optional[float] = None) -> DistanceProgress:
        goal_km = settings.DEFAULT_DISTANCE_GOAL_KM if goal_km is None else goal_km
        distance = cls.calculate_distance(steps)
        ratio = cls.progress_ratio(distance, goal_km)
        return DistanceProgress(
            steps=steps,
            distance_km=distance,
            goal_km=goal_km,
            ratio=ratio,
            percentage=round_half_up(ratio * 100),
        )
